"""
OutputManager — the THAC0 verbosity system core.

Verbosity-gated diagnostic output with per-channel overrides. A message
shows when message.level <= threshold, where threshold is the channel's
override or the global verbosity.

    -v increments, -Q decrements. They compose: -vv -Q = 1

Per-channel overrides:
    --show layout:3    pins the layout channel to threshold 3
    Specific beats generic; -4 on a channel silences it completely.
"""

import sys
from typing import Any, Dict, Optional, TextIO

from . import channels as _channels


class OutputManager:
    """Central coordinator for THAC0 verbosity-gated output.

    Everything is written to the configured file handle (default: stderr)
    so diagnostics never mix with rendered help on stdout.

    Usage::

        out = OutputManager(verbosity=2)
        out.emit(2, "indent {indent}", channel='config', indent=4)
        out.error("Something went wrong")
    """

    def __init__(
        self,
        verbosity: int = 0,
        channel_overrides: Dict[str, int] = None,
        file: TextIO = None,
    ):
        self.verbosity = verbosity
        self.channel_overrides: Dict[str, int] = dict(channel_overrides or {})
        self.file = file

    def threshold(self, channel: str) -> int:
        """Effective threshold for a channel."""
        return self.channel_overrides.get(channel, self.verbosity)

    def emit(self, level: int, message: str, *,
             channel: str = 'general', **kwargs: Any) -> None:
        """Emit a message if level <= threshold for that channel.

        Args:
            level: Message level (higher = more verbose)
            message: Format string (uses str.format with kwargs)
            channel: Output channel name
            **kwargs: Values for template placeholders
        """
        threshold = self.threshold(channel)
        if threshold <= -4 or level > threshold:
            return
        text = message.format(**kwargs) if kwargs else message
        print(text, file=self.file if self.file is not None else sys.stderr)

    def error(self, message: str) -> None:
        """Emit an error message (level -3, shown unless at hard wall)."""
        self.emit(-3, message, channel='error')

    def channel_active(self, channel: str) -> bool:
        """True if a level-0 message on this channel would be shown."""
        threshold = self.threshold(channel)
        return threshold > -4 and 0 <= threshold

    @property
    def quiet(self) -> bool:
        """True when verbosity is negative."""
        return self.verbosity < 0


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[OutputManager] = None


def init_output(verbosity: int = 0, channels: list = None) -> OutputManager:
    """Initialize the module-level OutputManager singleton.

    Call once at program startup after parsing CLI arguments.

    Args:
        verbosity: THAC0 verbosity (0=default, positive=verbose, negative=quiet)
        channels: Channel spec strings (e.g., ['layout:3', 'trace'])

    Returns:
        The initialized OutputManager instance
    """
    global _manager

    channel_overrides = {ch: -1 for ch in _channels.OPT_IN_CHANNELS}
    for spec in channels or []:
        cfg = _channels.parse_channel_spec(spec)
        channel_overrides[cfg.name] = cfg.level

    _manager = OutputManager(
        verbosity=verbosity,
        channel_overrides=channel_overrides,
    )
    return _manager


def get_output() -> OutputManager:
    """Get the module-level OutputManager, creating a default if needed."""
    global _manager
    if _manager is None:
        _manager = OutputManager()
    return _manager
