"""Main CLI entry point for cmdhelp.

Implements a two-pass argument parser:
  1. First pass: extract global flags (--verbose, --quiet, --show, --config)
  2. Second pass: dispatch to the subcommand with shared render flags

Global flags can appear before OR after the subcommand:
  cmdhelp -vv render app.json        # works
  cmdhelp render app.json -vv        # also works

Subcommands self-register via the register(subparsers, parents) convention.
"""

import argparse
import os
import sys

from cmdhelp._version import BASE_VERSION, VERSION
from cmdhelp.errors import CmdHelpError
from cmdhelp.output import print_error


# ---------------------------------------------------------------------------
# Global flags (can precede or follow the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--verbose": {"aliases": ["-v"], "action": "count", "default": 0,
                  "help": "Increase diagnostic verbosity (-v, -vv, -vvv)"},
    "--quiet": {"aliases": ["-Q"], "action": "count", "default": 0,
                "help": "Decrease verbosity (-Q, -QQ, -QQQ, -QQQQ=silent)"},
    "--show": {"nargs": "?", "action": "append", "metavar": "CHANNEL[:LEVEL]",
               "help": "Show diagnostic channel (bare --show lists channels)"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Path to config file (default: ~/.cmdhelp/config.json)"},
}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        global_parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Shared parent parser (inherited by all subcommands via parents=[])
# ---------------------------------------------------------------------------
def _build_common_parser():
    """Build the shared parser for render settings.

    Defaults are None so unset flags fall through to the config files.
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--summary", action="store_true", default=None,
                        help="Show only the usage line and a hint")
    common.add_argument("--compact", action="store_true", default=None,
                        help="List subcommands as a compact table")
    common.add_argument("--width", type=int, metavar="COLUMNS", default=None,
                        help="Wrap to COLUMNS instead of the terminal width")
    return common


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in cmdhelp.commands must export:
      register(subparsers, parents) — add itself to the subparser
      run(args) — execute the command
    """
    from cmdhelp.commands import parser, render
    return [render, parser]


def _build_parser(commands, common_parser):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="cmdhelp",
        description="cmdhelp — render context-sensitive CLI help",
        epilog=(
            "Run 'cmdhelp <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--verbose, --quiet, --show, --config) can appear\n"
            "before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"cmdhelp {BASE_VERSION} ({VERSION})",
    )

    # Global flags on the main parser too, for --help display
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[common_parser])

    return parser


def _silence_stdout():
    """Point stdout at devnull so the interpreter's exit flush cannot fail."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, sys.stdout.fileno())
    except (AttributeError, OSError, ValueError):
        pass
    finally:
        os.close(devnull)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for the cmdhelp CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success, 1 = error).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    from cmdhelp.channels import configure_channels, format_cmdhelp_channel_list
    from cmdhelp.lib.log_lib import init_output

    if global_args.show and None in global_args.show:
        print(format_cmdhelp_channel_list())
        return 0

    verbosity = (global_args.verbose or 0) - (global_args.quiet or 0)
    channels = [s for s in (global_args.show or []) if s is not None]
    configure_channels()
    try:
        init_output(verbosity=verbosity, channels=channels)
    except ValueError as e:
        print_error(f"invalid --show spec: {e}")
        return 1

    # Pass 2: parse subcommand + shared/specific args
    common_parser = _build_common_parser()
    commands = _discover_commands()
    parser = _build_parser(commands, common_parser)

    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    # Merge global args into the namespace for convenience
    for key, value in vars(global_args).items():
        if key not in vars(args) or getattr(args, key) is None:
            setattr(args, key, value)

    try:
        return args.func(args) or 0
    except BrokenPipeError:
        _silence_stdout()
        print_error("output closed before help was fully written")
        return 1
    except CmdHelpError as e:
        print_error(str(e))
        return 1
    except OSError as e:
        print_error(f"cannot write help: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
