"""Ordered map - a sorted map backed by a left-leaning red-black tree."""

from .core.config import TreeMapConfig
from .core.errors import (
    TreeMapError,
    InvalidArgumentError,
    InvariantViolationError,
)
from .core.tree_map import TreeMap
from .core.types import Entry, RED, BLACK

__all__ = [
    "TreeMapConfig",
    "TreeMapError",
    "InvalidArgumentError",
    "InvariantViolationError",
    "TreeMap",
    "Entry",
    "RED",
    "BLACK",
]
