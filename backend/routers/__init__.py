"""Routers module - FastAPI route handlers"""

from . import compare, config

__all__ = ["compare", "config"]
