"""cmdhelp argparse — render help for an argparse parser.

Imports ``MODULE`` and looks up ``ATTR``: either an ArgumentParser or a
zero-argument callable returning one. The parser is converted to a
command model and rendered like a model file::

    cmdhelp argparse mytool.cli:build_parser
    cmdhelp argparse mytool.cli:build_parser sync --compact
"""

import argparse
import importlib

from cmdhelp.commands.render import add_selection_argument, render_app
from cmdhelp.errors import ModelError
from cmdhelp.loader import app_from_argparse


def register(subparsers, parents):
    """Register the 'argparse' subcommand."""
    p = subparsers.add_parser(
        "argparse",
        parents=parents,
        help="Render help for an importable argparse parser",
        description=(
            "Import MODULE:ATTR, where ATTR is an ArgumentParser or a\n"
            "function returning one, and render its help."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("target", metavar="MODULE:ATTR",
                   help="Parser or parser factory to import")
    add_selection_argument(p)
    p.set_defaults(func=run)


def load_parser(target):
    """Import and return the ArgumentParser named by ``MODULE:ATTR``.

    Raises:
        ModelError: If the target cannot be imported or is not a parser
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ModelError(f"expected MODULE:ATTR, got '{target}'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ModelError(f"cannot import '{module_name}': {e}") from e
    try:
        obj = getattr(module, attr)
    except AttributeError as e:
        raise ModelError(f"'{module_name}' has no attribute '{attr}'") from e
    if callable(obj) and not isinstance(obj, argparse.ArgumentParser):
        obj = obj()
    if not isinstance(obj, argparse.ArgumentParser):
        raise ModelError(f"'{target}' is not an ArgumentParser")
    return obj


def run(args):
    """Execute the argparse command."""
    return render_app(app_from_argparse(load_parser(args.target)), args)
