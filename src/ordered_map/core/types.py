"""Common type definitions for the ordered tree map.

Defines fundamental types used across all components.
"""

from __future__ import annotations

from typing import Any, Generic, NamedTuple, Protocol, TypeVar


class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...
    def __gt__(self, other: Any) -> bool: ...


K = TypeVar("K", bound=Comparable)
V = TypeVar("V")

# Link colors, only meaningful on the insertion path
Color = bool
RED: Color = True
BLACK: Color = False


class Entry(NamedTuple, Generic[K, V]):
    """A (key, value) pair exported from the tree.

    Hashes by key alone, so entries with unhashable values still go into
    sets. Keys are unique within a map, and equality stays tuple equality.
    """
    key: K
    value: V

    def __hash__(self) -> int:
        return hash(self.key)
