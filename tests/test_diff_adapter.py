"""Tests for the diff primitives and the adapter that tags their spans."""

import pytest

from models.diff import DiffSpan, InvalidSpanError, SegmentKind
from services.diff_adapter import DiffAdapter, diff_lines, diff_words, split_lines, split_words


class TestSplitting:
    """Tests for tokenization helpers."""

    def test_split_lines_keeps_line_breaks(self):
        assert split_lines("a\nb\nc") == ["a\n", "b\n", "c"]

    def test_split_lines_terminal_newline(self):
        """A terminal newline does not produce an extra empty line."""
        assert split_lines("a\n") == ["a\n"]
        assert split_lines("\n") == ["\n"]

    def test_split_lines_blank_interior_line(self):
        assert split_lines("a\n\nb") == ["a\n", "\n", "b"]

    def test_split_lines_empty(self):
        assert split_lines("") == []

    def test_split_words(self):
        """Words, whitespace runs and punctuation are separate tokens."""
        assert split_words("Hi, you  there.") == ["Hi", ",", " ", "you", "  ", "there", "."]


class TestDiffLines:
    """Tests for the line-level primitive."""

    def test_identical(self):
        assert diff_lines("a\nb", "a\nb") == [{"content": "a\nb", "added": False, "removed": False}]

    def test_replacement_is_removed_then_added(self):
        spans = diff_lines("a\nb\nc", "a\nx\nc")
        assert spans == [
            {"content": "a\n", "added": False, "removed": False},
            {"content": "b\n", "added": False, "removed": True},
            {"content": "x\n", "added": True, "removed": False},
            {"content": "c", "added": False, "removed": False},
        ]

    def test_missing_final_newline_is_not_a_change(self):
        """A line that gains a successor is still matched as unchanged."""
        spans = diff_lines("a\nb", "a\nb\nc")
        assert [(s["added"], s["removed"]) for s in spans] == [(False, False), (True, False)]
        assert spans[1]["content"] == "c"

    def test_insert_into_empty(self):
        assert diff_lines("", "x\ny") == [{"content": "x\ny", "added": True, "removed": False}]


class TestDiffWords:
    """Tests for the word-level primitive."""

    def test_single_word_change(self):
        spans = diff_words("The cat sat", "The dog sat")
        assert spans == [
            {"content": "The ", "added": False, "removed": False},
            {"content": "cat", "added": False, "removed": True},
            {"content": "dog", "added": True, "removed": False},
            {"content": " sat", "added": False, "removed": False},
        ]

    def test_spans_rebuild_both_sides(self):
        """Unchanged plus removed spans give the original; unchanged plus added give the modified."""
        original = "one two three, four"
        modified = "one 2 three four five"
        spans = diff_words(original, modified)
        assert "".join(s["content"] for s in spans if not s["added"]) == original
        assert "".join(s["content"] for s in spans if not s["removed"]) == modified


class TestDiffAdapter:
    """Tests for span tagging at the adapter boundary."""

    def test_tags_spans(self):
        adapter = DiffAdapter(diff_words)
        spans = adapter.diff("The cat sat", "The dog sat")
        assert [s.kind for s in spans] == [
            SegmentKind.UNCHANGED,
            SegmentKind.REMOVED,
            SegmentKind.ADDED,
            SegmentKind.UNCHANGED,
        ]
        assert all(isinstance(s, DiffSpan) for s in spans)

    def test_both_empty_yields_no_spans(self):
        """Degenerate input is not an error and never reaches the primitive."""

        def primitive(original, modified):
            raise AssertionError("primitive should not be called")

        assert DiffAdapter(primitive).diff("", "") == []

    def test_rejects_added_and_removed_span(self):
        adapter = DiffAdapter(lambda a, b: [{"content": "x", "added": True, "removed": True}])
        with pytest.raises(InvalidSpanError):
            adapter.diff("x", "y")

    def test_skips_empty_content(self):
        adapter = DiffAdapter(
            lambda a, b: [
                {"content": "", "added": True, "removed": False},
                {"content": "kept", "added": False, "removed": False},
            ]
        )
        assert adapter.diff("kept", "kept") == [DiffSpan(content="kept", kind=SegmentKind.UNCHANGED)]

    def test_unified_patch(self):
        patch = DiffAdapter.unified_patch("a\nb\nc", "a\nx\nc", label="code")
        assert patch.startswith("--- a/code\n+++ b/code\n")
        assert "-b\n" in patch
        assert "+x\n" in patch

    def test_unified_patch_splits_only_on_newlines(self):
        """Form feeds and other line separators stay inside their line."""
        patch = DiffAdapter.unified_patch("x\x0cy\nz\u2028w", "x\x0cy\nq", label="code")
        assert " x\x0cy\n" in patch
        assert "-z\u2028w\n" in patch
        assert "+q\n" in patch
        assert DiffAdapter.unified_patch("a\x0cb\nc", "a\x0cb\nc") == ""

    def test_unified_patch_identical(self):
        assert DiffAdapter.unified_patch("same", "same") == ""
