"""Terminal width detection for help layout."""

import os
import sys

from cmdhelp.lib.log_lib import get_output


DEFAULT_WIDTH = 80


def guess_width(stream=None, default: int = DEFAULT_WIDTH) -> int:
    """Return the column count help written to ``stream`` should fit.

    Interactive terminals report their own size. Otherwise a positive
    integer in $COLUMNS wins, then ``default``.
    """
    stream = stream if stream is not None else sys.stdout
    out = get_output()
    try:
        if stream.isatty():
            columns = os.get_terminal_size(stream.fileno()).columns
            if columns > 0:
                out.emit(1, "  [width] terminal reports {c} columns",
                         channel='width', c=columns)
                return columns
    except (AttributeError, OSError, ValueError) as e:
        out.emit(2, "  [width] cannot query terminal: {err}",
                 channel='width', err=e)

    env = os.environ.get("COLUMNS", "").strip()
    if env.isdigit() and int(env) > 0:
        out.emit(1, "  [width] using COLUMNS={c}", channel='width', c=env)
        return int(env)

    out.emit(1, "  [width] not a terminal, using default {c}",
             channel='width', c=default)
    return default
