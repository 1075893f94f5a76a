"""
Diff Adapter - Wrap difflib behind a span-producing diff primitive
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from difflib import SequenceMatcher, unified_diff
from typing import TypedDict

from models.diff import DiffSpan, SegmentKind

_WORD_TOKEN = re.compile(r"\w+|\s+|[^\w\s]")


class RawSpan(TypedDict):
    """Span as returned by a diff primitive, before it is tagged"""

    content: str
    added: bool
    removed: bool


DiffPrimitive = Callable[[str, str], Sequence[RawSpan]]


def split_lines(text: str) -> list[str]:
    """Split on newlines, keeping each line's terminal newline"""
    if not text:
        return []
    lines = [line + "\n" for line in text.split("\n")]
    # The last piece never had a newline after it
    lines[-1] = lines[-1][:-1]
    if not lines[-1]:
        lines.pop()
    return lines


def split_words(text: str) -> list[str]:
    """Split into word, whitespace and punctuation tokens"""
    return _WORD_TOKEN.findall(text)


def _diff_tokens(
    original: list[str],
    modified: list[str],
    original_keys: list[str] | None = None,
    modified_keys: list[str] | None = None,
) -> list[RawSpan]:
    """Run SequenceMatcher over token lists and group opcodes into spans"""
    matcher = SequenceMatcher(
        None,
        original_keys if original_keys is not None else original,
        modified_keys if modified_keys is not None else modified,
        autojunk=False,
    )
    spans: list[RawSpan] = []

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            spans.append({"content": "".join(modified[j1:j2]), "added": False, "removed": False})
            continue

        # A replacement reads as the old run followed by the new one
        if tag in ("delete", "replace"):
            spans.append({"content": "".join(original[i1:i2]), "added": False, "removed": True})
        if tag in ("insert", "replace"):
            spans.append({"content": "".join(modified[j1:j2]), "added": True, "removed": False})

    return spans


def diff_lines(original: str, modified: str) -> list[RawSpan]:
    """Line-level diff; lines are matched without their line breaks"""
    original_lines = split_lines(original)
    modified_lines = split_lines(modified)
    return _diff_tokens(
        original_lines,
        modified_lines,
        [line.rstrip("\n") for line in original_lines],
        [line.rstrip("\n") for line in modified_lines],
    )


def diff_words(original: str, modified: str) -> list[RawSpan]:
    """Word-level diff; whitespace is carried inside the spans"""
    return _diff_tokens(split_words(original), split_words(modified))


class DiffAdapter:
    """Turn a diff primitive's output into tagged spans"""

    def __init__(self, primitive: DiffPrimitive):
        self.primitive = primitive

    def diff(self, original: str, modified: str) -> list[DiffSpan]:
        """Diff two normalized strings into an ordered list of spans"""
        if not original and not modified:
            return []

        spans = []
        for raw in self.primitive(original, modified):
            if not raw["content"]:
                continue
            kind = SegmentKind.from_flags(raw.get("added", False), raw.get("removed", False))
            spans.append(DiffSpan(content=raw["content"], kind=kind))
        return spans

    @staticmethod
    def unified_patch(
        original: str,
        merged: str,
        label: str = "merged",
        context_lines: int = 3,
    ) -> str:
        """Unified diff of the merged output against the original"""
        # Same line boundaries as the engine: only "\n" ends a line
        original_lines = split_lines(original)
        merged_lines = split_lines(merged)

        # Ensure last lines have newlines for proper diff
        if original_lines and not original_lines[-1].endswith("\n"):
            original_lines[-1] += "\n"
        if merged_lines and not merged_lines[-1].endswith("\n"):
            merged_lines[-1] += "\n"

        return "".join(
            unified_diff(
                original_lines,
                merged_lines,
                fromfile=f"a/{label}",
                tofile=f"b/{label}",
                n=context_lines,
            )
        )
