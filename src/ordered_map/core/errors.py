"""Exception hierarchy for the ordered tree map.

Defines all custom exceptions raised by the package.
"""

from __future__ import annotations


class TreeMapError(Exception):
    """Base exception for all tree map errors."""
    pass


class InvalidArgumentError(TreeMapError, ValueError):
    """Raised when a None key, a None source mapping or a bad config value is given."""
    pass


class InvariantViolationError(TreeMapError):
    """Raised by the structural checker when the tree is malformed."""
    pass
