"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_engine import ALGORITHMS, compute_diff, split_lines
from .diff_generator import DiffGenerator
from .line_projector import project, project_both
from .session_store import SessionStore, get_session_store

__all__ = [
    "ConfigManager",
    "ALGORITHMS",
    "compute_diff",
    "split_lines",
    "DiffGenerator",
    "project",
    "project_both",
    "SessionStore",
    "get_session_store",
]
