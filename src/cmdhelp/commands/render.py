"""cmdhelp render — render help for a JSON model file.

The model file describes the application, its flags, positional
arguments and nested commands (see cmdhelp.loader). Trailing words select
a command::

    cmdhelp render app.json                 # top-level help
    cmdhelp render app.json remote add      # help for "remote add"
    cmdhelp render app.json --summary       # usage line and hint only
"""

import argparse

from cmdhelp.config import resolve_config
from cmdhelp.errors import CommandNotFoundError
from cmdhelp.lib.log_lib import get_output
from cmdhelp.loader import load_app
from cmdhelp.model import Context
from cmdhelp.printer import HelpOptions, print_help


def register(subparsers, parents):
    """Register the 'render' subcommand."""
    p = subparsers.add_parser(
        "render",
        parents=parents,
        help="Render help for a JSON command model",
        description=(
            "Render context-sensitive help for the application described\n"
            "by a JSON model file, or for one of its commands."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("model", metavar="MODEL",
                   help="Path to the JSON model file")
    add_selection_argument(p)
    p.set_defaults(func=run)


def add_selection_argument(p):
    """Add the trailing COMMAND words shared by the render commands."""
    p.add_argument("command_path", nargs="*", metavar="COMMAND",
                   help="Command to show help for (default: the application)")


def select(app, words):
    """Resolve trailing command words against the model.

    Raises:
        CommandNotFoundError: If the words do not name a command
    """
    if not words:
        return None
    node = app.find(words)
    if node is None:
        parent = app.find(words[:-1]) or app
        raise CommandNotFoundError(" ".join(words),
                                   [c.name for c in parent.leaves()])
    get_output().emit(1, "  [model] selected '{path}'", channel='model',
                      path=node.path())
    return node


def render_app(app, args):
    """Render help for ``app`` with settings resolved from args and config."""
    settings = resolve_config(args)
    ctx = Context(app, select(app, args.command_path))
    options = HelpOptions(summary=settings["summary"],
                          compact=settings["compact"])
    print_help(ctx, options, width=settings["width"])
    return 0


def run(args):
    """Execute the render command."""
    return render_app(load_app(args.model), args)
