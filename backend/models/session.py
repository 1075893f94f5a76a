"""Comparison session data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from .diff import DiffStats, LineRow, SegmentKind, SegmentState


class MergeMode(str, Enum):
    """Granularity of a comparison"""

    CODE = "code"  # one segment per line
    TEXT = "text"  # one segment per word-level diff span


class CompareRequest(BaseModel):
    """Request to compare two versions of content"""

    original: str = ""
    modified: str = ""


class BulkSelectRequest(BaseModel):
    """Request to accept or reject every segment of one kind"""

    kind: SegmentKind
    accepted: bool


class SessionView(BaseModel):
    """Full state of a comparison session"""

    session_id: str
    mode: MergeMode
    segments: list[SegmentState]
    merged: str
    display_lines: list[str]
    rows: list[LineRow] | None = None  # code mode only
    stats: DiffStats


class MergedOutput(BaseModel):
    """Merged output ready to copy or export"""

    session_id: str
    mode: MergeMode
    merged: str
    display_lines: list[str]
    patch: str  # unified diff of merged output against the original
