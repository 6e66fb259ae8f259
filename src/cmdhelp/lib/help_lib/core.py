"""
Core help layout components: paragraph wrapping and the line writer.
"""

import textwrap
from dataclasses import dataclass
from typing import List, Optional, TextIO, Tuple


INDENT_UNIT = "  "


@dataclass
class HelpOptions:
    """Options for one help render.

    Attributes:
        summary: Only the usage line plus a short hint, no detail tables
        compact: List subcommands as a dense two-column table
    """
    summary: bool = False
    compact: bool = False


def _blocks(text: str) -> List[Tuple[bool, List[str]]]:
    """Split text into (preformatted, lines) blocks.

    A blank line ends a block, and so does a change between indented and
    unindented lines. Indented runs are preformatted.
    """
    blocks: List[Tuple[bool, List[str]]] = []
    open_block = False
    for line in text.splitlines():
        if not line.strip():
            open_block = False
            continue
        pre = line[:1].isspace()
        if open_block and blocks[-1][0] == pre:
            blocks[-1][1].append(line)
        else:
            blocks.append((pre, [line]))
            open_block = True
    return blocks


def wrap_text(text: str, width: int, indent: str = "",
              pre_indent: str = "    ") -> List[str]:
    """
    Wrap text to a maximum width, one list entry per output line.

    Paragraphs are separated by blank lines in the input and by a single
    empty line in the output. A word longer than the width is never split;
    it gets a line of its own. A run of indented lines is preformatted,
    with or without a blank line before it: it becomes its own paragraph
    and is emitted as-is under ``pre_indent``.

    Args:
        text: Text to wrap; surrounding whitespace is ignored
        width: Maximum line length; <= 0 means unbounded
        indent: Prefix for continuation lines, counted against width
        pre_indent: Prefix for preformatted lines

    Returns:
        List of lines, empty for blank input
    """
    lines: List[str] = []
    for preformatted, block in _blocks(text.strip()):
        if lines:
            lines.append("")
        if preformatted:
            dedented = textwrap.dedent("\n".join(block)).splitlines()
            lines.extend((pre_indent + line).rstrip() for line in dedented)
        elif width <= 0:
            lines.append(" ".join(" ".join(block).split()))
        else:
            lines.extend(textwrap.wrap(
                " ".join(" ".join(block).split()),
                width=width,
                subsequent_indent=indent,
                break_long_words=False,
                break_on_hyphens=False,
            ))
    return lines


class HelpWriter:
    """
    Accumulates help output as indented lines.

    Writers created with ``indent()`` share their parent's line list, so
    nested sections land in the same document in the order they are
    printed. Each writer only carries its own indent and width.
    """

    def __init__(self, width: int = 80, options: Optional[HelpOptions] = None,
                 indent: str = "", lines: Optional[List[str]] = None):
        self.width = width
        self.options = options if options is not None else HelpOptions()
        self.indent_str = indent
        self._lines = lines if lines is not None else []

    @property
    def summary(self) -> bool:
        return self.options.summary

    @property
    def compact(self) -> bool:
        return self.options.compact

    @property
    def lines(self) -> List[str]:
        """A copy of the lines accumulated so far."""
        return list(self._lines)

    def print(self, text: str = "") -> None:
        """Append one line under the current indent."""
        self._lines.append((self.indent_str + text).rstrip())

    def printf(self, fmt: str, *args) -> None:
        """Format with ``%`` and append the result."""
        self.print(fmt % args if args else fmt)

    def wrap(self, text: str) -> None:
        """Wrap text to this writer's width and append every line."""
        for line in wrap_text(text, self.width):
            self.print(line)

    def indent(self) -> "HelpWriter":
        """Return a writer nested one level deeper over the same lines."""
        return HelpWriter(
            width=self.width - len(INDENT_UNIT),
            options=self.options,
            indent=self.indent_str + INDENT_UNIT,
            lines=self._lines,
        )

    def flush(self, sink: TextIO) -> None:
        """
        Write every accumulated line to ``sink``, newline-terminated.

        The first failing write raises; nothing is retried.

        Raises:
            OSError: If the sink cannot be written (closed file, broken pipe)
        """
        for line in self._lines:
            sink.write(line + "\n")
        flush = getattr(sink, "flush", None)
        if flush is not None:
            flush()

    def __str__(self) -> str:
        return "\n".join(self._lines)
