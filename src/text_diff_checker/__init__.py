"""
text_diff_checker package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import DiffConfig, config_from_dict, config_from_yaml, load_config
from .engine import compute_diff
from .models import Category, DiffResult, Score, Segment, Window
from .scheduling import DebouncedDiff

__all__ = [
    "DiffConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "compute_diff",
    "Category",
    "DiffResult",
    "Score",
    "Segment",
    "Window",
    "DebouncedDiff",
]

__version__ = "0.1.0"
