"""
Merge Engine - Compare two versions of content and merge selected segments
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from models.diff import DiffSpan, LineRow, Segment, SegmentKind
from models.session import MergeMode

from .diff_adapter import DiffAdapter, DiffPrimitive, diff_lines, diff_words
from .materializer import materialize_lines, materialize_spans
from .merge_reducer import code_display_lines, merge_lines, merge_spans, text_display_lines
from .normalizer import normalize_code, normalize_text
from .reconciler import number_lines
from .selection_store import SelectionStore

logger = logging.getLogger(__name__)


class AcceptancePolicy:
    """Initial acceptance of freshly materialized segments"""

    def __init__(self, accept_added: bool = True, accept_removed: bool = False):
        self.accept_added = accept_added
        self.accept_removed = accept_removed

    @classmethod
    def from_config(cls, section: dict[str, Any] | None) -> "AcceptancePolicy":
        """Read acceptAdded/acceptRemoved; anything but a real bool keeps the default"""
        if not isinstance(section, dict):
            section = {}
        accept_added = section.get("acceptAdded", True)
        accept_removed = section.get("acceptRemoved", False)
        return cls(
            accept_added=accept_added if isinstance(accept_added, bool) else True,
            accept_removed=accept_removed if isinstance(accept_removed, bool) else False,
        )

    def initial(self, kind: SegmentKind) -> bool:
        if kind is SegmentKind.ADDED:
            return self.accept_added
        if kind is SegmentKind.REMOVED:
            return self.accept_removed
        return True


class MergeEngine:
    """Pipeline shared by the code and text engines"""

    mode: MergeMode
    locked_kinds: frozenset[SegmentKind] = frozenset()
    normalize: Callable[[str], str]
    materialize: Callable[[Iterable[DiffSpan]], list[Segment]]
    reduce: Callable[[Iterable[Segment], Mapping[int, bool]], str]
    display_lines: Callable[[str], list[str]]

    def __init__(self, primitive: DiffPrimitive, policy: AcceptancePolicy | None = None):
        self.adapter = DiffAdapter(primitive)
        self.policy = policy or AcceptancePolicy()

    def compare(self, original: str, modified: str) -> SelectionStore:
        """Run one comparison and seed a fresh selection store"""
        spans = self.adapter.diff(self.normalize(original), self.normalize(modified))
        segments = self.materialize(spans)
        acceptance = {segment.id: self.policy.initial(segment.kind) for segment in segments}
        logger.debug("%s comparison: %d spans, %d segments", self.mode.value, len(spans), len(segments))
        return SelectionStore(segments, acceptance, self.locked_kinds)

    def merge(self, store: SelectionStore) -> str:
        return self.reduce(store.segments, store.acceptance)

    def rows(self, store: SelectionStore) -> list[LineRow] | None:
        """Dual-pane rows; only line-granular engines have them"""
        return None


class CodeMergeEngine(MergeEngine):
    """Line-granular engine for source code"""

    mode = MergeMode.CODE
    # Shared lines always stay in the merge
    locked_kinds = frozenset({SegmentKind.UNCHANGED})
    normalize = staticmethod(normalize_code)
    materialize = staticmethod(materialize_lines)
    reduce = staticmethod(merge_lines)
    display_lines = staticmethod(code_display_lines)

    def __init__(self, policy: AcceptancePolicy | None = None, primitive: DiffPrimitive = diff_lines):
        super().__init__(primitive, policy)

    def rows(self, store: SelectionStore) -> list[LineRow]:
        return number_lines(store.segments, store.acceptance)


class TextMergeEngine(MergeEngine):
    """Word-granular engine for prose"""

    mode = MergeMode.TEXT
    normalize = staticmethod(normalize_text)
    materialize = staticmethod(materialize_spans)
    reduce = staticmethod(merge_spans)
    display_lines = staticmethod(text_display_lines)

    def __init__(self, policy: AcceptancePolicy | None = None, primitive: DiffPrimitive = diff_words):
        super().__init__(primitive, policy)


def create_engine(mode: MergeMode, config: dict[str, Any] | None = None) -> MergeEngine:
    """Build the engine for a mode, with acceptance defaults from config"""
    config = config or {}
    policy = AcceptancePolicy.from_config(config.get(mode.value))
    if mode is MergeMode.CODE:
        return CodeMergeEngine(policy)
    return TextMergeEngine(policy)

