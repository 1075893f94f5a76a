"""
Line/Position Reconciler - Number both sides of the dual-pane code view
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from models.diff import LineRow, Segment, SegmentKind


def number_lines(segments: Iterable[Segment], acceptance: Mapping[int, bool] | None = None) -> list[LineRow]:
    """Left-to-right scan with one running line counter per side"""
    acceptance = acceptance or {}
    original_line = 1
    modified_line = 1
    rows = []

    for segment in segments:
        row = LineRow(
            segment_id=segment.id,
            kind=segment.kind,
            accepted=acceptance.get(segment.id, False),
            toggleable=segment.kind is not SegmentKind.UNCHANGED,
        )
        if segment.kind.on_original:
            row.original_line = original_line
            row.original_content = segment.content
            original_line += 1
        if segment.kind.on_modified:
            row.modified_line = modified_line
            row.modified_content = segment.content
            modified_line += 1
        rows.append(row)

    return rows
