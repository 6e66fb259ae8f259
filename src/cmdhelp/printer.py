"""Context-sensitive help rendering.

Renders top-level help when no command is selected and command help
otherwise. Everything is accumulated in a HelpWriter and written to the
application's output stream in one final step.

Layout of a full render::

    Usage:  app <command> [flags]

    Help text, wrapped to the terminal width.

    Arguments:
      <path>    Where to look

    Flags:
      -h, --help       Show context-sensitive help.
          --dry-run    Preview changes without applying them

    Commands:
      build [flags]
        Build the project

    Run "app <command> --help" for more information on a command.
"""

from dataclasses import replace
from typing import Optional

from cmdhelp.lib.help_lib import (
    DEFAULT_COLUMN_PADDING,
    HelpOptions,
    HelpWriter,
    write_flags,
    write_positionals,
    write_two_columns,
)
from cmdhelp.lib.log_lib import get_output, trace
from cmdhelp.model import Application, Context, Node
from cmdhelp.terminal import guess_width


def _new_writer(ctx: Context, options: Optional[HelpOptions],
                width: Optional[int]) -> HelpWriter:
    options = replace(options) if options else HelpOptions()
    if ctx.empty():
        options.summary = False
    if width is None:
        width = guess_width(ctx.app.stdout)
    return HelpWriter(width=width, options=options)


def _render(w: HelpWriter, ctx: Context) -> None:
    selected = ctx.selected
    get_output().emit(2, "  [layout] rendering {target} at width {w} "
                         "(summary={s}, compact={c})",
                      channel='layout',
                      target=selected.path() if selected else ctx.app.name,
                      w=w.width, s=w.summary, c=w.compact)
    if selected is None:
        print_app(w, ctx.app)
    else:
        print_command(w, ctx.app, selected)


@trace
def render_help(ctx: Context, options: Optional[HelpOptions] = None,
                width: Optional[int] = None) -> str:
    """Render help for ``ctx`` and return it as a string.

    Args:
        ctx: The application and selected command
        options: Render options; ``summary`` is ignored for command-less
            applications
        width: Column count; detected from ``ctx.app.stdout`` when None

    Returns:
        The help document, one newline-terminated line per entry
    """
    w = _new_writer(ctx, options, width)
    _render(w, ctx)
    return "".join(line + "\n" for line in w.lines)


@trace
def print_help(ctx: Context, options: Optional[HelpOptions] = None,
               width: Optional[int] = None) -> None:
    """Render help for ``ctx`` and write it to ``ctx.app.stdout``.

    Raises:
        OSError: If writing to the output stream fails
    """
    w = _new_writer(ctx, options, width)
    _render(w, ctx)
    w.flush(ctx.app.stdout)


def print_app(w: HelpWriter, app: Application) -> None:
    w.printf("Usage:  %s", app.summary())
    print_node_detail(w, app)
    if app.leaves():
        w.print("")
        if w.summary:
            w.printf('Run "%s --help" for more information.', app.name)
        else:
            w.printf('Run "%s <command> --help" for more information on a command.',
                     app.name)


def print_command(w: HelpWriter, app: Application, cmd: Node) -> None:
    w.printf("Usage:  %s %s", app.name, cmd.summary())
    print_node_detail(w, cmd)
    if w.summary:
        w.print("")
        w.printf('Run "%s %s --help" for more information.', app.name, cmd.path())


def print_node_detail(w: HelpWriter, node: Node) -> None:
    """Print help text and, outside summary mode, the detail tables."""
    if node.help:
        w.print("")
        w.wrap(node.help)
    if w.summary:
        return
    if node.positional:
        w.print("")
        w.print("Arguments:")
        write_positionals(w.indent(), node.positional)
    flags = node.all_flags()
    if any(flags):
        w.print("")
        w.print("Flags:")
        write_flags(w.indent(), flags)
    cmds = node.leaves()
    if cmds:
        w.print("")
        w.print("Commands:")
        iw = w.indent()
        if w.compact:
            rows = [(cmd.path(), cmd.help) for cmd in cmds]
            write_two_columns(iw, rows, DEFAULT_COLUMN_PADDING)
        else:
            for i, cmd in enumerate(cmds):
                print_command_summary(iw, cmd)
                if i != len(cmds) - 1:
                    iw.print("")


def print_command_summary(w: HelpWriter, cmd: Node) -> None:
    w.print(cmd.summary())
    if cmd.help:
        w.indent().wrap(cmd.help)
