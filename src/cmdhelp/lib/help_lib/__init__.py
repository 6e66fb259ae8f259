"""
Help layout primitives.

Paragraph wrapping, an indent-aware line writer, and the two-column
tables used for arguments, flags and commands.
"""

from .core import HelpOptions, HelpWriter, wrap_text
from .formatters import (
    DEFAULT_COLUMN_PADDING,
    LONG_LABEL_CUTOFF,
    flag_rows,
    format_flag,
    write_flags,
    write_positionals,
    write_two_columns,
)

__all__ = [
    'HelpOptions',
    'HelpWriter',
    'wrap_text',
    'DEFAULT_COLUMN_PADDING',
    'LONG_LABEL_CUTOFF',
    'flag_rows',
    'format_flag',
    'write_flags',
    'write_positionals',
    'write_two_columns',
]
