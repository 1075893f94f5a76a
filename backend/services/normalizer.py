"""
Normalizer - Canonicalize raw input before diffing
"""

from __future__ import annotations

import re

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_code(text: str) -> str:
    """Trim the whole input; internal formatting is left untouched"""
    return text.strip()


def normalize_text(text: str) -> str:
    """Collapse whitespace per line, then trim the whole document"""
    lines = [_WHITESPACE_RUN.sub(" ", line.strip()) for line in text.split("\n")]
    return "\n".join(lines).strip()
