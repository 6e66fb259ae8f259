"""
Formatters for the tabular parts of help output.
"""

from typing import Iterable, List, Sequence, Tuple

from cmdhelp.lib.log_lib import get_output
from .core import HelpWriter, INDENT_UNIT, wrap_text


# Labels this long or longer do not take part in column alignment
LONG_LABEL_CUTOFF = 30
DEFAULT_COLUMN_PADDING = 4

# Width of "-x, " so long-only flags line up with short-bearing ones
SHORT_FLAG_RESERVATION = " " * 4

Row = Tuple[str, str]


def label_column_width(rows: Iterable[Row]) -> int:
    """Return the width of the label column.

    The widest label shorter than LONG_LABEL_CUTOFF sets the width, so one
    oversized label cannot push every description to the right.
    """
    width = 0
    for label, _ in rows:
        if width < len(label) < LONG_LABEL_CUTOFF:
            width = len(label)
    return width


def write_two_columns(w: HelpWriter, rows: Sequence[Row],
                      padding: int = DEFAULT_COLUMN_PADDING) -> None:
    """
    Write (label, description) rows as an aligned two-column table.

    Descriptions are wrapped into the space right of the label column.
    A label at or above the cutoff is printed on its own line with its
    description below, indented to the shared column. An empty row
    prints a blank separator line.

    Args:
        w: Writer to print into
        rows: Ordered (label, description) pairs
        padding: Spaces between the label column and the description
    """
    rows = list(rows or [])
    left = label_column_width(rows)
    offset = " " * (left + padding)
    wrap_width = w.width - left - padding
    get_output().emit(2, "  [layout] {n} rows: label column {left}, wrap width {wrap}",
                      channel='layout', n=len(rows), left=left, wrap=wrap_width)

    for label, description in rows:
        lines = wrap_text(description or "", wrap_width, pre_indent=INDENT_UNIT)
        if len(label) < LONG_LABEL_CUTOFF:
            first = lines[0] if lines else ""
            w.print(f"{label:<{left}}{' ' * padding}{first}")
            lines = lines[1:]
        else:
            get_output().emit(3, "  [layout] long label on its own line: {label}",
                              channel='layout', label=label)
            w.print(label)
            lines = lines or [""]
        for line in lines:
            w.print(offset + line)


def has_short_flags(groups) -> bool:
    """True if any visible flag in any group has a short name."""
    return any(flag.short and not flag.hidden
               for group in groups or [] for flag in group)


def format_flag(flag, have_short: bool) -> str:
    """
    Return the display form of a flag for the flags table.

    Args:
        flag: The flag to format
        have_short: Whether any flag in the rendered set has a short name;
            long-only flags then reserve the short-name column

    Returns:
        e.g. ``-v, --verbose``, ``    --output=PATH`` or ``--force``
    """
    if flag.short:
        text = f"-{flag.short}, --{flag.name}"
    elif have_short:
        text = f"{SHORT_FLAG_RESERVATION}--{flag.name}"
    else:
        text = f"--{flag.name}"
    if not flag.is_bool:
        text += f"={flag.format_placeholder()}"
    return text


def flag_rows(groups) -> List[Row]:
    """Build flags-table rows from grouped flags.

    Short-name presence is decided over every group before any row is
    built. Groups are separated by an empty row; hidden flags are skipped.
    """
    groups = groups or []
    have_short = has_short_flags(groups)
    rows: List[Row] = []
    for i, group in enumerate(groups):
        if i > 0:
            rows.append(("", ""))
        for flag in group:
            if not flag.hidden:
                rows.append((format_flag(flag, have_short), flag.help))
    return rows


def write_flags(w: HelpWriter, groups) -> None:
    """Write grouped flags as a two-column table."""
    write_two_columns(w, flag_rows(groups))


def write_positionals(w: HelpWriter, positionals) -> None:
    """Write positional arguments as a two-column table."""
    rows = [(arg.summary(), arg.help) for arg in positionals or []]
    write_two_columns(w, rows)
