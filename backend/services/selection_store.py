"""
Selection Store - Track which segments of a comparison run are accepted
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from models.diff import DiffStats, Segment, SegmentKind, SegmentState


class SelectionStore:
    """Acceptance flags for the segments of one comparison run.

    The segment list is fixed at construction; only the acceptance map
    changes, and only through ``toggle`` and ``set_kind``. Segments whose
    kind is in ``locked_kinds`` keep their initial acceptance. A new
    comparison gets a new store rather than reconciling this one.
    """

    def __init__(
        self,
        segments: Sequence[Segment],
        acceptance: Mapping[int, bool],
        locked_kinds: Iterable[SegmentKind] = (),
    ):
        self._segments = tuple(segments)
        self._locked_kinds = frozenset(locked_kinds)
        self._kinds = {segment.id: segment.kind for segment in self._segments}
        self._accepted = {segment.id: bool(acceptance.get(segment.id, False)) for segment in self._segments}

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    @property
    def acceptance(self) -> dict[int, bool]:
        """Copy of the current acceptance map"""
        return dict(self._accepted)

    def __len__(self) -> int:
        return len(self._segments)

    @property
    def locked_kinds(self) -> frozenset[SegmentKind]:
        return self._locked_kinds

    def is_accepted(self, segment_id: int) -> bool:
        return self._accepted.get(segment_id, False)

    def toggle(self, segment_id: int) -> bool | None:
        """Flip one segment; returns its new state, or None if nothing changed"""
        if segment_id not in self._accepted:
            # Stale reference from a replaced comparison
            return None
        if self._kinds[segment_id] in self._locked_kinds:
            return None
        self._accepted[segment_id] = not self._accepted[segment_id]
        return self._accepted[segment_id]

    def set_kind(self, kind: SegmentKind, accepted: bool) -> int:
        """Accept or reject every segment of one kind; returns how many changed"""
        if kind in self._locked_kinds:
            return 0
        changed = 0
        for segment in self._segments:
            if segment.kind is kind and self._accepted[segment.id] != accepted:
                self._accepted[segment.id] = accepted
                changed += 1
        return changed

    def snapshot(self) -> list[SegmentState]:
        """All segments with their flags, in materialization order"""
        return [
            SegmentState(
                id=segment.id,
                content=segment.content,
                kind=segment.kind,
                accepted=self._accepted[segment.id],
            )
            for segment in self._segments
        ]

    def stats(self) -> DiffStats:
        stats = DiffStats(total=len(self._segments))
        for segment in self._segments:
            if segment.kind is SegmentKind.ADDED:
                stats.added += 1
            elif segment.kind is SegmentKind.REMOVED:
                stats.removed += 1
            else:
                stats.unchanged += 1
            if self._accepted[segment.id]:
                stats.accepted += 1
        return stats
