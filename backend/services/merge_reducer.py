"""
Merge Reducer - Rebuild output from the accepted segments
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from models.diff import Segment


def accepted_contents(segments: Iterable[Segment], acceptance: Mapping[int, bool]) -> list[str]:
    """Contents of accepted segments, in segment order"""
    return [segment.content for segment in segments if acceptance.get(segment.id, False)]


def merge_lines(segments: Iterable[Segment], acceptance: Mapping[int, bool]) -> str:
    """Code mode: one accepted segment per output line"""
    return "\n".join(accepted_contents(segments, acceptance))


def merge_spans(segments: Iterable[Segment], acceptance: Mapping[int, bool]) -> str:
    """Text mode: spans already carry their own whitespace"""
    return "".join(accepted_contents(segments, acceptance))


def code_display_lines(merged: str) -> list[str]:
    if not merged:
        return []
    return merged.split("\n")


def text_display_lines(merged: str) -> list[str]:
    """Merged text as display lines, without a blank last line"""
    lines = merged.split("\n")
    if not lines[-1].strip():
        lines.pop()
    return lines
