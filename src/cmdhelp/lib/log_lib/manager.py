"""
OutputManager — the THAC0 verbosity system core.

Central coordinator for verbosity-gated diagnostic output with per-channel
overrides. A message shows when message.level <= threshold, where the
threshold is a per-channel override or the global verbosity.

    <-- quieter ----------- default ----------- louder -->
    -4    -3     -2       -1      0       1      2      3

    -v increments, -Q decrements. They compose: -vv -Q = 1

Per-channel overrides:
    --show layout:2    pins the layout channel to threshold 2
    Specific beats generic, except at -4 (hard wall, nothing at all)

Diagnostics go to stderr by default so they never mix with a help
document written to stdout.
"""

import sys
from typing import Any, Dict, Optional, TextIO

from . import channels as _channels


class OutputManager:
    """Central coordinator for THAC0 verbosity-gated output.

    Usage::

        out = OutputManager(verbosity=2)
        out.emit(2, "column width {w}", channel='layout', w=14)
        out.error("model file not found")
    """

    def __init__(
        self,
        verbosity: int = 0,
        channel_overrides: Dict[str, int] = None,
        file: TextIO = None,
    ):
        self.verbosity = verbosity
        self.channel_overrides: Dict[str, int] = dict(channel_overrides or {})
        self.file = file if file is not None else sys.stderr

    def threshold(self, channel: str) -> int:
        """Return the effective threshold for a channel."""
        return self.channel_overrides.get(channel, self.verbosity)

    def emit(self, level: int, message: str, *,
             channel: str = 'general', **kwargs: Any) -> None:
        """Emit a message if level <= threshold for that channel.

        At threshold -4 (hard wall) nothing is emitted regardless of level.

        Args:
            level: Message level (higher = more verbose)
            message: Format string (uses str.format with kwargs)
            channel: Output channel name
            **kwargs: Values for template placeholders
        """
        threshold = self.threshold(channel)
        if threshold <= -4:
            return
        if level > threshold:
            return
        text = message.format(**kwargs) if kwargs else message
        print(text, file=self.file)

    def error(self, message: str) -> None:
        """Emit an error message (level -3, shown unless at hard wall)."""
        self.emit(-3, message, channel='error')

    def warning(self, message: str) -> None:
        """Emit a warning (level -2)."""
        self.emit(-2, message, channel='general')

    def channel_active(self, channel: str, level: int = 0) -> bool:
        """Check whether a message at ``level`` on ``channel`` would show.

        Used by callers to skip building expensive diagnostic text.
        """
        threshold = self.threshold(channel)
        return threshold > -4 and level <= threshold


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[OutputManager] = None


def init_output(verbosity: int = 0, channels: list = None,
                file: TextIO = None) -> OutputManager:
    """Initialize the module-level OutputManager singleton.

    Call once at program startup after parsing CLI arguments.

    Args:
        verbosity: THAC0 verbosity level (0=default, positive=verbose,
            negative=quiet)
        channels: List of channel spec strings (e.g. ['layout:2', 'trace'])
        file: Destination stream (default: stderr)

    Returns:
        The initialized OutputManager instance
    """
    global _manager

    channel_overrides = {ch: -1 for ch in _channels.OPT_IN_CHANNELS}

    if channels:
        for spec in channels:
            cfg = _channels.parse_channel_spec(spec)
            channel_overrides[cfg.name] = cfg.level

    _manager = OutputManager(
        verbosity=verbosity,
        channel_overrides=channel_overrides,
        file=file,
    )
    return _manager


def get_output() -> OutputManager:
    """Get the module-level OutputManager, creating a default if needed."""
    global _manager
    if _manager is None:
        _manager = OutputManager()
    return _manager
