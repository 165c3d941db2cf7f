"""cmdhelp channel definitions for the THAC0 verbosity system.

Configures the generic log_lib channel infrastructure with the channels
cmdhelp emits on. log_lib itself stays project-agnostic.

Usage:
    from cmdhelp.channels import configure_channels, format_channel_list
"""

from cmdhelp.lib.log_lib import channels as _ch


CHANNELS = {
    'config',       # Settings resolution
    'layout',       # Table column widths
    'section',      # Help sections included / omitted
    'general',      # Default channel
    'error',        # Error messages
    'trace',        # Function tracing (@trace decorator)
}

CHANNEL_DESCRIPTIONS = {
    'config':   'Settings resolution (CLI, project, global)',
    'layout':   'Table row counts and column widths',
    'section':  'Help sections included or omitted',
    'general':  'General output',
    'error':    'Error messages',
    'trace':    'Function call tracing',
}

OPT_IN_CHANNELS = {
    'trace',
}


def configure_channels():
    """Replace log_lib's default channels with the cmdhelp set.

    Call once at startup before init_output().
    """
    _ch.KNOWN_CHANNELS = CHANNELS
    _ch.CHANNEL_DESCRIPTIONS = CHANNEL_DESCRIPTIONS
    _ch.OPT_IN_CHANNELS = OPT_IN_CHANNELS


def format_channel_list() -> str:
    """Format cmdhelp channels for the bare --show listing."""
    configure_channels()
    return _ch.format_channel_list()
