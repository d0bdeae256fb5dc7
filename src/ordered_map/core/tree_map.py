"""TreeMap implementation - main public API.

Wraps the LLRB engine in a map-like surface.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, Generic, Optional

from ..components import llrb
from ..components.invariants import check_tree
from ..components.node import Node
from ..components.render import pretty_print
from .config import TreeMapConfig
from .errors import InvalidArgumentError
from .types import BLACK, Entry, K, V

logger = logging.getLogger(__name__)


class TreeMap(Generic[K, V]):
    """Sorted map backed by a left-leaning red-black tree.

    Args:
        source: Optional mapping (or iterable of pairs) copied in with put_all
        config: Tree map configuration, defaults to TreeMapConfig()

    Public API:
        - put(key, value): Insert or update, returns the previous value
        - get(key) / find(key) / contains_key(key): Lookup
        - remove(key): Delete, returns nothing
        - keys() / values() / entries(): Snapshots
        - common_height() / is_balanced(): Single-path diagnostics

    Invariants:
        - In-order traversal yields strictly ascending keys
        - Every node's size equals the size of its subtree
        - Red-black color rules hold as long as nothing was removed;
          remove() splices without rebalancing
    """

    def __init__(
        self,
        source: Mapping[K, V] | Iterable[tuple[K, V]] | None = None,
        config: TreeMapConfig | None = None,
    ):
        self.config = config or TreeMapConfig()
        self._root: Optional[Node[K, V]] = None
        # set once remove() splices a node out, until the tree is empty again
        self._colors_stale = False

        if source is not None:
            self.put_all(source)

    @staticmethod
    def _require_key(key: Any, operation: str) -> None:
        if key is None:
            raise InvalidArgumentError(f"{operation}: key must not be None")

    def _mutated(self) -> None:
        if self._root is None:
            self._colors_stale = False
        if self.config.check_invariants:
            self.check_invariants()

    # -------------------------------
    # Write path
    # -------------------------------
    def put(self, key: K, value: V) -> V | None:
        """Insert or update key with value.

        Returns the value previously stored under key, or None if key was
        new. Use find() first if a stored None must be told apart.

        Raises:
            InvalidArgumentError: key is None
        """
        self._require_key(key, "put")
        self._root, previous = llrb.insert(self._root, key, value)
        self._root.color = BLACK
        self._mutated()
        return None if previous is None else previous.value

    def remove(self, key: K) -> None:
        """Remove key if present. Absent keys are a no-op.

        The removed value is not reported. The tree is not rebalanced, so
        heavy removal can degrade it toward a plain BST.

        Raises:
            InvalidArgumentError: key is None
        """
        self._require_key(key, "remove")
        before = llrb.size(self._root)
        self._root = llrb.delete(self._root, key)
        if llrb.size(self._root) < before:
            self._colors_stale = True
        self._mutated()

    def put_all(self, source: Mapping[K, V] | Iterable[tuple[K, V]]) -> None:
        """Copy every mapping of source into this map, in source order.

        A key that is None aborts the copy; mappings put before it stay.

        Raises:
            InvalidArgumentError: source or one of its keys is None
        """
        if source is None:
            raise InvalidArgumentError("put_all: source must not be None")

        pairs = source.items() if isinstance(source, Mapping) else source
        count = 0
        for key, value in pairs:
            self.put(key, value)
            count += 1
        logger.debug(f"Copied {count} mappings, size is now {self.size()}")

    def clear(self) -> None:
        """Drop every mapping."""
        logger.debug(f"Clearing tree map of {self.size()} mappings")
        self._root = None
        self._mutated()

    # -------------------------------
    # Read path
    # -------------------------------
    def find(self, key: K) -> Entry[K, V] | None:
        """Return the Entry stored under key, or None if key is absent."""
        self._require_key(key, "find")
        node = llrb.find(self._root, key)
        if node is None:
            return None
        return Entry(node.key, node.value)

    def get(self, key: K, default: V | None = None) -> V | None:
        """Return the value stored under key, or default if key is absent.

        Raises:
            InvalidArgumentError: key is None
        """
        self._require_key(key, "get")
        node = llrb.find(self._root, key)
        return default if node is None else node.value

    def contains_key(self, key: K) -> bool:
        self._require_key(key, "contains_key")
        return llrb.find(self._root, key) is not None

    def contains_value(self, value: V | None) -> bool:
        """Return True if any stored value equals value.

        Scans the whole tree in the worst case. A None query matches
        stored None values.
        """
        if value is None:
            return any(node.value is None for node in llrb.iter_nodes(self._root))
        return any(node.value == value for node in llrb.iter_nodes(self._root))

    def size(self) -> int:
        return llrb.size(self._root)

    def is_empty(self) -> bool:
        return self._root is None

    def min_key(self) -> K | None:
        node = llrb.find_min(self._root)
        return None if node is None else node.key

    def max_key(self) -> K | None:
        node = llrb.find_max(self._root)
        return None if node is None else node.key

    # -------------------------------
    # Traversal and snapshots
    # -------------------------------
    def inorder(self, visit: Callable[[Entry[K, V]], None]) -> None:
        """Call visit(entry) for every mapping in ascending key order."""
        llrb.inorder(self._root, lambda node: visit(Entry(node.key, node.value)))

    def keys(self) -> set[K]:
        """Snapshot set of keys.

        Keys must be hashable as well as comparable; list keys, for
        example, can be stored but raise TypeError here.
        """
        return {node.key for node in llrb.iter_nodes(self._root)}

    def values(self) -> list[V]:
        """Snapshot list of values, in ascending key order."""
        return [node.value for node in llrb.iter_nodes(self._root)]

    def entries(self) -> set[Entry[K, V]]:
        """Snapshot set of entries. Any value type works, entries hash by key."""
        return {Entry(node.key, node.value) for node in llrb.iter_nodes(self._root)}

    def items(self) -> Iterator[Entry[K, V]]:
        """Iterate entries lazily in ascending key order."""
        for node in llrb.iter_nodes(self._root):
            yield Entry(node.key, node.value)

    # -------------------------------
    # Diagnostics
    # -------------------------------
    def left_path_height(self) -> int:
        """Length of the all-left chain from the root, not the tree height."""
        return llrb.left_path_height(self._root)

    def right_path_height(self) -> int:
        """Length of the all-right chain from the root, not the tree height."""
        return llrb.right_path_height(self._root)

    def common_height(self) -> int:
        return max(self.left_path_height(), self.right_path_height())

    def is_balanced(self) -> bool:
        """Compare the two single-path heights.

        A cheap heuristic: it ignores every branch off the two outer
        paths and says nothing about the red-black rules.
        """
        difference = abs(self.left_path_height() - self.right_path_height())
        return difference <= self.config.balance_tolerance

    def height(self) -> int:
        """True height of the tree. O(n)."""
        return llrb.height(self._root)

    def check_invariants(self, check_colors: bool | None = None) -> None:
        """Verify key order and subtree sizes at every node.

        Colors are checked too when check_colors is True, or when it is
        None and nothing has been removed since the tree was last empty.

        Raises:
            InvariantViolationError: the first violation found
        """
        if check_colors is None:
            check_colors = not self._colors_stale
        check_tree(self._root, colors=check_colors)

    def pretty_print(self) -> str:
        return pretty_print(self._root)

    # -------------------------------
    # Mapping protocol
    # -------------------------------
    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __contains__(self, key: object) -> bool:
        if key is None:
            return False
        return llrb.find(self._root, key) is not None

    def __getitem__(self, key: K) -> V:
        entry = self.find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: K) -> None:
        if self.find(key) is None:
            raise KeyError(key)
        self.remove(key)

    def __iter__(self) -> Iterator[K]:
        for node in llrb.iter_nodes(self._root):
            yield node.key

    def __repr__(self) -> str:
        pairs = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"TreeMap({{{pairs}}})"
