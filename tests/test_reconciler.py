"""Tests for dual-pane line numbering."""

from models.diff import Segment, SegmentKind
from services.reconciler import number_lines

U = SegmentKind.UNCHANGED
A = SegmentKind.ADDED
R = SegmentKind.REMOVED


def make_segments(*pairs):
    return [Segment(id=i, content=content, kind=kind) for i, (content, kind) in enumerate(pairs)]


class TestNumberLines:
    """Tests for the two running line counters."""

    def test_replacement(self):
        rows = number_lines(make_segments(("a", U), ("b", R), ("x", A), ("c", U)))
        assert [(r.original_line, r.modified_line) for r in rows] == [
            (1, 1),
            (2, None),
            (None, 2),
            (3, 3),
        ]

    def test_side_contents(self):
        rows = number_lines(make_segments(("a", U), ("b", R), ("x", A)))
        assert (rows[0].original_content, rows[0].modified_content) == ("a", "a")
        assert (rows[1].original_content, rows[1].modified_content) == ("b", None)
        assert (rows[2].original_content, rows[2].modified_content) == (None, "x")

    def test_only_changed_rows_are_toggleable(self):
        rows = number_lines(make_segments(("a", U), ("b", R), ("x", A)))
        assert [r.toggleable for r in rows] == [False, True, True]

    def test_acceptance_is_carried(self):
        rows = number_lines(make_segments(("a", U), ("b", R)), {0: True, 1: False})
        assert [r.accepted for r in rows] == [True, False]

    def test_counters_never_count_the_other_side(self):
        """Original numbering skips added rows; modified numbering skips removed rows."""
        segments = make_segments(
            ("x1", A), ("x2", A), ("o1", R), ("k", U), ("o2", R), ("o3", R), ("x3", A), ("k2", U)
        )
        rows = number_lines(segments)

        original = [r.original_line for r in rows if r.original_line is not None]
        modified = [r.modified_line for r in rows if r.modified_line is not None]
        assert original == list(range(1, 6))
        assert modified == list(range(1, 6))
        assert all(r.original_line is None for r in rows if r.kind is A)
        assert all(r.modified_line is None for r in rows if r.kind is R)

    def test_empty(self):
        assert number_lines([]) == []
