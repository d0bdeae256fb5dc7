"""Protocol definition for the sorted map surface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..core.types import K, V

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..core.types import Entry


@runtime_checkable
class SortedMap(Protocol[K, V]):
    """Ordered associative container keyed by a totally ordered type."""

    def put(self, key: K, value: V) -> V | None:
        """Insert or update; return the previous value or None if key was new."""
        ...

    def get(self, key: K, default: V | None = None) -> V | None:
        """Return the value for key, or default when absent."""
        ...

    def find(self, key: K) -> Entry[K, V] | None:
        """Return the stored entry for key, or None if absent.

        Unlike get(), distinguishes a stored None value from a missing key.
        """
        ...

    def contains_key(self, key: K) -> bool:
        """Return True if key is mapped."""
        ...

    def contains_value(self, value: V | None) -> bool:
        """Return True if any stored value equals value (None matches None)."""
        ...

    def remove(self, key: K) -> None:
        """Remove key if present; reports nothing about the removed value."""
        ...

    def size(self) -> int:
        """Return the number of mappings."""
        ...

    def is_empty(self) -> bool:
        """Return True when no mappings are stored."""
        ...

    def clear(self) -> None:
        """Drop every mapping."""
        ...

    def keys(self) -> set[K]:
        """Snapshot of the keys; keys must be hashable."""
        ...

    def values(self) -> list[V]:
        """Snapshot of the values in ascending key order."""
        ...

    def entries(self) -> set[Entry[K, V]]:
        """Snapshot of the (key, value) pairs."""
        ...

    def items(self) -> Iterator[Entry[K, V]]:
        """Iterate entries in ascending key order."""
        ...
