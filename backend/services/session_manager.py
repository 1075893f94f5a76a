"""
Session Manager - Comparison sessions and the in-memory registry that holds them
"""

from __future__ import annotations

import logging
import uuid
from collections import OrderedDict

from models.diff import LineRow, SegmentKind
from models.session import MergedOutput, MergeMode, SessionView

from .diff_adapter import DiffAdapter
from .merge_engine import MergeEngine
from .selection_store import SelectionStore

logger = logging.getLogger(__name__)


class MergeSession:
    """One engine plus the selection state of its latest comparison"""

    def __init__(self, engine: MergeEngine, session_id: str | None = None):
        self.session_id = session_id or str(uuid.uuid4())
        self.engine = engine
        self.original = ""
        self.store = SelectionStore([], {})

    @property
    def mode(self) -> MergeMode:
        return self.engine.mode

    def compare(self, original: str, modified: str) -> SelectionStore:
        """Replace the current run with a fresh comparison"""
        self.original = self.engine.normalize(original)
        self.store = self.engine.compare(original, modified)
        return self.store

    def toggle(self, segment_id: int) -> bool | None:
        return self.store.toggle(segment_id)

    def set_kind(self, kind: SegmentKind, accepted: bool) -> int:
        return self.store.set_kind(kind, accepted)

    def merged(self) -> str:
        return self.engine.merge(self.store)

    def rows(self) -> list[LineRow] | None:
        return self.engine.rows(self.store)

    def view(self) -> SessionView:
        merged = self.merged()
        return SessionView(
            session_id=self.session_id,
            mode=self.mode,
            segments=self.store.snapshot(),
            merged=merged,
            display_lines=self.engine.display_lines(merged),
            rows=self.rows(),
            stats=self.store.stats(),
        )

    def export(self) -> MergedOutput:
        merged = self.merged()
        return MergedOutput(
            session_id=self.session_id,
            mode=self.mode,
            merged=merged,
            display_lines=self.engine.display_lines(merged),
            patch=DiffAdapter.unified_patch(self.original, merged, label=self.mode.value),
        )


class SessionRegistry:
    """Bounded map of live sessions; the oldest is evicted when full"""

    def __init__(self, max_sessions: int = 100):
        self.max_sessions = max(1, max_sessions)
        self._sessions: OrderedDict[str, MergeSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def add(self, session: MergeSession) -> MergeSession:
        self._sessions[session.session_id] = session
        self._evict()
        return session

    def resize(self, max_sessions: int) -> int:
        """Change the bound and evict right away; returns how many were evicted"""
        self.max_sessions = max(1, max_sessions)
        return self._evict()

    def _evict(self) -> int:
        evicted = 0
        while len(self._sessions) > self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info("Evicted comparison session %s", evicted_id)
            evicted += 1
        return evicted

    def get(self, session_id: str) -> MergeSession | None:
        return self._sessions.get(session_id)

    def remove(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def clear(self):
        self._sessions.clear()
