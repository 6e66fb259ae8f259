"""Exceptions raised outside the rendering core.

The renderer itself only fails when writing to its output stream, and
lets that OSError propagate unchanged.
"""


class CmdHelpError(Exception):
    """Base class for cmdhelp errors reported by the CLI."""


class ModelError(CmdHelpError):
    """A model document or parser could not be turned into a command tree."""


class CommandNotFoundError(CmdHelpError):
    """A command path did not resolve to a node in the model."""

    def __init__(self, path, available=()):
        self.path = path
        self.available = list(available)
        message = f"Unknown command: '{path}'"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)
