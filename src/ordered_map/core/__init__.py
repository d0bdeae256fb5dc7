"""Ordered map core package."""

from .tree_map import TreeMap

__all__ = ["TreeMap"]
