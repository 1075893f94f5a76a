"""Models module - Pydantic data models"""

from .diff import (
    DiffSpan,
    DiffStats,
    InvalidSpanError,
    LineRow,
    Segment,
    SegmentKind,
    SegmentState,
)
from .session import BulkSelectRequest, CompareRequest, MergedOutput, MergeMode, SessionView

__all__ = [
    # Diff models
    "DiffSpan",
    "DiffStats",
    "InvalidSpanError",
    "LineRow",
    "Segment",
    "SegmentKind",
    "SegmentState",
    # Session models
    "BulkSelectRequest",
    "CompareRequest",
    "MergedOutput",
    "MergeMode",
    "SessionView",
]
