"""Output helpers for the cmdhelp CLI.

User-facing messages go through the THAC0 OutputManager so they respect
-Q/-QQ. The help document itself is never routed through here; it is
written by the renderer straight to its output stream.

Also re-exports the log_lib public API for convenience imports.
"""

import sys

from cmdhelp.lib.log_lib import (                     # noqa: F401
    OutputManager, init_output, get_output, trace,
)


def print_warn(msg):
    """Print a warning to stderr (hidden at -QQ and below)."""
    get_output().warning(f"  [WARN] {msg}")


def print_error(msg):
    """Print an error message to stderr.

    Routes through OutputManager.error() which emits at level -3.
    Shown at all verbosity levels except hard wall (-QQQQ / -4).
    """
    try:
        get_output().error(f"  ERROR: {msg}")
    except OSError:
        print(f"  ERROR: {msg}", file=sys.__stderr__)
