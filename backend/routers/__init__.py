"""Routers module - FastAPI route handlers"""

from . import config, diff, sessions

__all__ = ["config", "diff", "sessions"]
