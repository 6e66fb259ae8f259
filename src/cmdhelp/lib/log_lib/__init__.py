"""
log_lib — THAC0 verbosity system with named channels.

Public API:
    OutputManager      — central coordinator
    init_output        — singleton initialization
    get_output         — access singleton
    ChannelConfig      — channel configuration
    parse_channel_spec — parse CLI channel spec
    KNOWN_CHANNELS     — set of recognized channel names
    trace              — function tracing decorator
"""

from .manager import OutputManager, init_output, get_output
from .channels import (
    ChannelConfig, parse_channel_spec, KNOWN_CHANNELS,
    CHANNEL_DESCRIPTIONS, OPT_IN_CHANNELS, format_channel_list,
)
from .trace import trace

__all__ = [
    'OutputManager', 'init_output', 'get_output',
    'ChannelConfig', 'parse_channel_spec', 'KNOWN_CHANNELS',
    'CHANNEL_DESCRIPTIONS', 'OPT_IN_CHANNELS', 'format_channel_list',
    'trace',
]
