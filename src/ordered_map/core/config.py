"""Configuration for the ordered tree map.

Defines the tunable parameters of TreeMap.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidArgumentError


@dataclass
class TreeMapConfig:
    """Configuration parameters for TreeMap.

    Attributes:
        balance_tolerance: Largest left/right single-path height difference
            that is_balanced() still accepts
        check_invariants: Run the recursive structure check after every
            mutating operation (O(n) per mutation, debugging only)
    """

    balance_tolerance: int = 1
    check_invariants: bool = False

    def __post_init__(self) -> None:
        if self.balance_tolerance < 0:
            raise InvalidArgumentError(
                f"balance_tolerance must be >= 0, got {self.balance_tolerance}"
            )
