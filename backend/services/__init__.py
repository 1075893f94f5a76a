"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_adapter import DiffAdapter, diff_lines, diff_words
from .merge_engine import AcceptancePolicy, CodeMergeEngine, MergeEngine, TextMergeEngine, create_engine
from .selection_store import SelectionStore
from .session_manager import MergeSession, SessionRegistry

__all__ = [
    "ConfigManager",
    "DiffAdapter",
    "diff_lines",
    "diff_words",
    "AcceptancePolicy",
    "CodeMergeEngine",
    "MergeEngine",
    "TextMergeEngine",
    "create_engine",
    "SelectionStore",
    "MergeSession",
    "SessionRegistry",
]
