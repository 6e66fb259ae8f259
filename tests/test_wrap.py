"""Tests for cmdhelp.lib.help_lib.core.wrap_text — paragraph wrapping."""

import pytest

from cmdhelp.lib.help_lib import wrap_text


LOREM = (
    "Render context-sensitive help for command line applications. "
    "Flags and arguments are laid out in aligned columns, descriptions "
    "are wrapped to the terminal width, and subcommands are listed with "
    "their own summaries so users can find their way around quickly."
)


class TestBasicWrapping:
    """Greedy word wrapping within the width."""

    def test_wraps_at_word_boundaries(self):
        lines = wrap_text("The quick brown fox jumps over the lazy dog", 10)
        assert lines == ["The quick", "brown fox", "jumps over", "the lazy", "dog"]

    def test_short_text_single_line(self):
        assert wrap_text("hello world", 80) == ["hello world"]

    def test_surrounding_whitespace_trimmed(self):
        assert wrap_text("   hello world  \n\n", 80) == ["hello world"]

    def test_internal_newlines_reflowed(self):
        assert wrap_text("one\ntwo\nthree", 80) == ["one two three"]

    def test_blank_input_gives_no_lines(self):
        assert wrap_text("", 40) == []
        assert wrap_text("   \n \n", 40) == []


class TestParagraphs:
    """Blank lines separate paragraphs."""

    def test_paragraph_break_preserved(self):
        assert wrap_text("one two\n\nthree", 80) == ["one two", "", "three"]

    def test_repeated_blank_lines_collapse_to_one(self):
        assert wrap_text("a\n\n\n\nb", 80) == ["a", "", "b"]

    def test_each_paragraph_wrapped_separately(self):
        lines = wrap_text("aaa bbb ccc\n\nddd eee", 7)
        assert lines == ["aaa bbb", "ccc", "", "ddd eee"]


class TestLongWords:
    """Words longer than the width are never split."""

    def test_long_word_on_its_own_line(self):
        lines = wrap_text("a supercalifragilistic b", 10)
        assert lines == ["a", "supercalifragilistic", "b"]

    def test_hyphenated_word_not_broken(self):
        lines = wrap_text("use --non-interactive-mode here", 10)
        assert "--non-interactive-mode" in lines


class TestUnboundedWidth:
    """Width <= 0 disables wrapping."""

    @pytest.mark.parametrize("width", [0, -1, -80])
    def test_one_line_per_paragraph(self, width):
        lines = wrap_text("one  two\nthree\n\nfour five", width)
        assert lines == ["one two three", "", "four five"]

    def test_long_text_not_wrapped(self):
        assert wrap_text(LOREM, 0) == [LOREM]


class TestIndent:
    """Continuation indent counts against the width."""

    def test_continuation_lines_indented(self):
        lines = wrap_text("aaa bbb ccc ddd", 8, indent="  ")
        assert lines == ["aaa bbb", "  ccc", "  ddd"]

    def test_indented_lines_respect_width(self):
        for line in wrap_text(LOREM, 30, indent="    "):
            assert len(line) <= 30


class TestPreformatted:
    """Indented paragraphs are kept verbatim."""

    def test_indented_block_kept(self):
        text = "Examples:\n\n    app run --fast\n    app stop"
        lines = wrap_text(text, 80)
        assert lines == ["Examples:", "", "    app run --fast", "    app stop"]

    def test_pre_indent_replaces_original_indent(self):
        text = "Examples:\n\n      app run\n        --fast"
        lines = wrap_text(text, 80, pre_indent="  ")
        assert lines == ["Examples:", "", "  app run", "    --fast"]

    def test_preformatted_block_not_reflowed(self):
        text = "Intro.\n\n    a b c d e f g h i j k l m n o p"
        lines = wrap_text(text, 10)
        assert lines[-1] == "    a b c d e f g h i j k l m n o p"

    def test_indented_lines_start_block_without_blank_line(self):
        text = "Example:\n  code here\n  more\n\nafter"
        assert wrap_text(text, 40) == [
            "Example:", "", "    code here", "    more", "", "after",
        ]

    def test_unindented_line_ends_block(self):
        text = "Run:\n    app go\nthen check the output"
        assert wrap_text(text, 80) == [
            "Run:", "", "    app go", "", "then check the output",
        ]


class TestProperties:
    """Width bound and idempotence over a range of widths."""

    @pytest.mark.parametrize("width", [5, 12, 20, 33, 50, 79])
    def test_width_bound(self, width):
        for line in wrap_text(LOREM, width):
            assert len(line) <= width or " " not in line

    @pytest.mark.parametrize("width", [8, 15, 24, 40, 72])
    def test_rewrap_is_idempotent(self, width):
        once = wrap_text(LOREM + "\n\n" + LOREM, width)
        twice = wrap_text("\n".join(once), width)
        assert twice == once
