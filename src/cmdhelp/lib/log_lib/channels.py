"""
Channel configuration and parsing for the THAC0 verbosity system.

Channels are named output categories. Each channel can carry its own
verbosity threshold, overriding the global level.

Channel spec syntax (compact, positional):
    CHANNEL:LEVEL:DEST:LOCATION:FORMAT

    Examples:
        layout              # level 0
        layout:2            # level 2
        width::file:w.log   # default level, file destination
"""

from dataclasses import dataclass
from typing import Optional


# Library defaults; applications replace these at startup
KNOWN_CHANNELS = {
    'general',      # Default channel
    'error',        # Error messages
    'layout',       # Column and wrap computations
    'trace',        # Function tracing (@trace decorator)
}

CHANNEL_DESCRIPTIONS = {
    'general':  'General output',
    'error':    'Error messages',
    'layout':   'Column and wrap computations',
    'trace':    'Function call tracing',
}

# Channels that are OFF by default (require explicit --show to activate).
# They get a default override of -1.
OPT_IN_CHANNELS = {
    'trace',
}


@dataclass
class ChannelConfig:
    """Configuration for a single output channel.

    Only name and level are routed; destination, location and format are
    parsed and stored.
    """
    name: str
    level: int = 0
    destination: Optional[str] = None    # 'stderr', 'stdout', 'file'
    location: Optional[str] = None       # File path for file dest
    format: Optional[str] = None         # 'text', 'json'


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse a channel spec string into a ChannelConfig.

    Empty slots use :: (empty between colons). Windows drive letters in
    the LOCATION slot (e.g. C:\\logs\\out.log) are rejoined.

    Args:
        spec: Channel spec string like "layout:2"

    Returns:
        ChannelConfig with parsed values

    Raises:
        ValueError: If the LEVEL slot is not an integer
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
    level = 0
    dest = location = fmt = None

    if len(parts) > 1 and parts[1]:
        level = int(parts[1])
    if len(parts) > 2 and parts[2]:
        dest = parts[2]
    if len(parts) > 3 and parts[3]:
        location = parts[3]
    if len(parts) > 4 and parts[4]:
        fmt = parts[4]

    return ChannelConfig(name=name, level=level, destination=dest,
                         location=location, format=fmt)


def format_channel_list() -> str:
    """Format the list of known channels for display."""
    lines = ["Available channels:"]
    max_name = max(len(name) for name in KNOWN_CHANNELS)
    for name in sorted(KNOWN_CHANNELS):
        desc = CHANNEL_DESCRIPTIONS.get(name, '')
        opt_in = " (opt-in)" if name in OPT_IN_CHANNELS else ""
        lines.append(f"  {name:<{max_name}}  {desc}{opt_in}")
    return "\n".join(lines)
