"""cmdhelp — context-sensitive help rendering for command-line applications.

Given a tree of commands, positional arguments and flags, cmdhelp lays out
the usage line, wrapped help text and aligned argument/flag/command tables
for the application root or any selected command.
"""

from cmdhelp._version import __version__, __app_name__
from cmdhelp.model import Application, Context, Flag, Node, Positional
from cmdhelp.printer import HelpOptions, print_help, render_help

__all__ = [
    "__version__", "__app_name__",
    "Application", "Context", "Flag", "Node", "Positional",
    "HelpOptions", "print_help", "render_help",
]
