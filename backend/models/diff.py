"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class InvalidSpanError(ValueError):
    """Raised when a diff primitive tags a span as both added and removed"""


class SegmentKind(str, Enum):
    """Which side(s) of a comparison a segment belongs to"""

    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"

    @classmethod
    def from_flags(cls, added: bool, removed: bool) -> "SegmentKind":
        """Collapse a differ's (added, removed) flag pair into one kind"""
        if added and removed:
            raise InvalidSpanError("A diff span cannot be both added and removed")
        if added:
            return cls.ADDED
        if removed:
            return cls.REMOVED
        return cls.UNCHANGED

    @property
    def on_original(self) -> bool:
        return self is not SegmentKind.ADDED

    @property
    def on_modified(self) -> bool:
        return self is not SegmentKind.REMOVED


class DiffSpan(BaseModel):
    """A contiguous run of content as tagged by the diff primitive"""

    model_config = ConfigDict(frozen=True)

    content: str
    kind: SegmentKind


class Segment(BaseModel):
    """An addressable unit of a comparison (a line or a diff span)"""

    model_config = ConfigDict(frozen=True)

    id: int  # dense, materialization order
    content: str
    kind: SegmentKind


class SegmentState(BaseModel):
    """A segment together with its current acceptance"""

    id: int
    content: str
    kind: SegmentKind
    accepted: bool


class LineRow(BaseModel):
    """One row of the dual-pane code view"""

    segment_id: int
    kind: SegmentKind
    original_line: int | None = None  # 1-indexed, None when blank on this side
    modified_line: int | None = None
    original_content: str | None = None
    modified_content: str | None = None
    accepted: bool
    toggleable: bool


class DiffStats(BaseModel):
    """Segment counts for one comparison run"""

    unchanged: int = 0
    added: int = 0
    removed: int = 0
    accepted: int = 0
    total: int = 0
