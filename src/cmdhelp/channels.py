"""cmdhelp channel definitions for the THAC0 verbosity system.

Configures the generic log_lib channel registry with the channels used by
the renderer, the model loaders and the CLI. Keeps log_lib itself
project-agnostic.

Usage:
    from cmdhelp.channels import configure_channels, format_cmdhelp_channel_list
"""

from cmdhelp.lib.log_lib import channels as _ch


CMDHELP_CHANNELS = {
    'general',      # Default channel
    'error',        # Error messages
    'model',        # Model loading and command selection
    'layout',       # Column widths and wrap widths
    'width',        # Terminal width detection
    'config',       # Configuration loading and resolution
    'trace',        # Function tracing (@trace decorator)
}

CMDHELP_CHANNEL_DESCRIPTIONS = {
    'general':  'General output',
    'error':    'Error messages',
    'model':    'Model loading and command selection',
    'layout':   'Column widths and wrap widths',
    'width':    'Terminal width detection',
    'config':   'Configuration loading and resolution',
    'trace':    'Function call tracing',
}

CMDHELP_OPT_IN_CHANNELS = {
    'trace',
}


def configure_channels():
    """Replace log_lib's default channels with the cmdhelp set.

    Call once at startup before init_output().
    """
    _ch.KNOWN_CHANNELS = CMDHELP_CHANNELS
    _ch.CHANNEL_DESCRIPTIONS = CMDHELP_CHANNEL_DESCRIPTIONS
    _ch.OPT_IN_CHANNELS = CMDHELP_OPT_IN_CHANNELS


def format_cmdhelp_channel_list() -> str:
    """Format cmdhelp channels for the bare --show listing."""
    configure_channels()
    return _ch.format_channel_list()
