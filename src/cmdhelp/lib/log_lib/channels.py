"""
Channel configuration and parsing for the THAC0 verbosity system.

Channels are named output categories, each with an optional verbosity
threshold that overrides the global level for that channel.

Channel spec syntax (compact, positional):
    CHANNEL:LEVEL:DEST:LOCATION:FORMAT

    Examples:
        layout              # level 0
        layout:3            # level 3
        layout::file:out.log
"""

from dataclasses import dataclass
from typing import Optional


# Generic defaults; projects replace these at startup
KNOWN_CHANNELS = {
    'general',      # Default channel
    'error',        # Error messages
    'trace',        # Function tracing (@trace decorator)
}

CHANNEL_DESCRIPTIONS = {
    'general':   'General output',
    'error':     'Error messages',
    'trace':     'Function call tracing',
}

# Off unless named explicitly with --show
OPT_IN_CHANNELS = {
    'trace',
}


@dataclass
class ChannelConfig:
    """Configuration for a single output channel.

    Only name and level are routed; destination, location and format
    are parsed and stored.
    """
    name: str
    level: int = 0
    destination: Optional[str] = None    # 'stderr', 'stdout', 'file'
    location: Optional[str] = None       # File path for file dest
    format: Optional[str] = None         # 'text', 'json'


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse a channel spec string into a ChannelConfig.

    Empty slots use :: (nothing between colons). A single drive letter in
    the LOCATION slot (C:\\logs\\out.log) is joined back to its path.

    Args:
        spec: Channel spec string like "layout:3"

    Returns:
        ChannelConfig with parsed values
    """
    parts = spec.split(':')

    rejoined = []
    i = 0
    while i < len(parts):
        if (len(parts[i]) == 1 and parts[i].isalpha()
                and i + 1 < len(parts)
                and i >= 3):
            rejoined.append(f"{parts[i]}:{parts[i+1]}")
            i += 2
        else:
            rejoined.append(parts[i])
            i += 1
    parts = rejoined

    name = parts[0] if parts else ''
    level = int(parts[1]) if len(parts) > 1 and parts[1] else 0
    dest = parts[2] if len(parts) > 2 and parts[2] else None
    location = parts[3] if len(parts) > 3 and parts[3] else None
    fmt = parts[4] if len(parts) > 4 and parts[4] else None

    return ChannelConfig(name=name, level=level, destination=dest,
                         location=location, format=fmt)


def format_channel_list() -> str:
    """Format the known channels, one per line, for display."""
    lines = ["Available channels:"]
    max_name = max(len(name) for name in KNOWN_CHANNELS)
    for name in sorted(KNOWN_CHANNELS):
        desc = CHANNEL_DESCRIPTIONS.get(name, '')
        opt_in = " (opt-in)" if name in OPT_IN_CHANNELS else ""
        lines.append(f"  {name:<{max_name}}  {desc}{opt_in}")
    return "\n".join(lines)
