"""
Segment Materializer - Expand diff spans into addressable segments
"""

from __future__ import annotations

from collections.abc import Iterable

from models.diff import DiffSpan, Segment


def span_lines(span: DiffSpan) -> list[str]:
    """Lines of a span; only the empty tail left by a final newline is dropped"""
    lines = span.content.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def materialize_lines(spans: Iterable[DiffSpan]) -> list[Segment]:
    """One segment per line, each inheriting its span's kind"""
    segments: list[Segment] = []
    for span in spans:
        for line in span_lines(span):
            segments.append(Segment(id=len(segments), content=line, kind=span.kind))
    return segments


def materialize_spans(spans: Iterable[DiffSpan]) -> list[Segment]:
    """One segment per span, as returned by the differ"""
    return [
        Segment(id=index, content=span.content, kind=span.kind)
        for index, span in enumerate(spans)
    ]
