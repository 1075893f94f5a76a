"""
Logging Utilities - Root logger setup shared by the app and the config API
"""

from __future__ import annotations

import logging


def resolve_level(level: int | str) -> int:
    """Numeric level for a level name; unknown names fall back to INFO"""
    if isinstance(level, int):
        return level
    resolved = getattr(logging, str(level).upper(), logging.INFO)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: int | str = "INFO") -> logging.Logger:
    """Install a single stream handler on the root logger"""
    root_logger = logging.getLogger()
    root_logger.setLevel(resolve_level(level))
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s: %(message)s"))
    root_logger.addHandler(handler)
    return root_logger


def set_log_level(level: int | str) -> int:
    """Change the root level of a running app without touching its handlers"""
    resolved = resolve_level(level)
    logging.getLogger().setLevel(resolved)
    return resolved
