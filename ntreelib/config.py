"""Configuration system for NTreeLib.

This module defines how users specify a traversal: which order to walk
the tree in, which class of nodes to visit, and how deep to go.
"""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Any, List


UNLIMITED_DEPTH = -1


class TraverseOrder(IntEnum):
    """The order in which a traversal visits nodes."""
    PRE_ORDER = 0     # Node, then children left to right
    IN_ORDER = 1      # First child, node, remaining children
    POST_ORDER = 2    # Children left to right, then node
    LEVEL_ORDER = 3   # Level by level


class TraverseFlags(IntFlag):
    """Which class of nodes a traversal visits.

    The flags only decide whether the visitor is called for a node.
    Traversal always descends into children regardless of the flags.
    """
    LEAVES = 1
    NON_LEAVES = 2
    ALL = LEAVES | NON_LEAVES
    MASK = ALL


def is_valid_order(order: Any) -> bool:
    """Check that ``order`` is one of the declared traversal orders."""
    if isinstance(order, bool) or not isinstance(order, int):
        return False
    try:
        TraverseOrder(order)
    except ValueError:
        return False
    return True


def is_valid_flags(flags: Any) -> bool:
    """Check that ``flags`` has no bits outside ``TraverseFlags.MASK``."""
    if isinstance(flags, bool) or not isinstance(flags, int):
        return False
    return flags >= 0 and (int(flags) & ~int(TraverseFlags.MASK)) == 0


def is_valid_depth(max_depth: Any) -> bool:
    """Check that ``max_depth`` is ``UNLIMITED_DEPTH`` or a positive integer."""
    if isinstance(max_depth, bool) or not isinstance(max_depth, int):
        return False
    return max_depth == UNLIMITED_DEPTH or max_depth > 0


def matches_flags(is_leaf: bool, flags: int) -> bool:
    """Check whether a node of the given class passes ``flags``."""
    if is_leaf:
        return bool(flags & TraverseFlags.LEAVES)
    return bool(flags & TraverseFlags.NON_LEAVES)


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal.

    ``max_depth`` counts the traversal root as depth 1. Use
    ``UNLIMITED_DEPTH`` (-1) to walk the whole subtree.
    """

    order: TraverseOrder = TraverseOrder.PRE_ORDER
    flags: TraverseFlags = TraverseFlags.ALL
    max_depth: int = UNLIMITED_DEPTH

    @classmethod
    def full(cls, order: TraverseOrder = TraverseOrder.PRE_ORDER,
             flags: TraverseFlags = TraverseFlags.ALL) -> 'TraversalConfig':
        """Create config for walking an entire subtree.

        Args:
            order: Traversal order
            flags: Node classes to visit

        Returns:
            TraversalConfig with no depth limit
        """
        return cls(order=order, flags=flags, max_depth=UNLIMITED_DEPTH)

    @classmethod
    def shallow(cls, max_depth: int = 2,
                order: TraverseOrder = TraverseOrder.PRE_ORDER) -> 'TraversalConfig':
        """Create config for a depth-limited scan.

        Args:
            max_depth: Deepest level to visit (default 2 = root and its children)
            order: Traversal order

        Returns:
            TraversalConfig limited to ``max_depth``
        """
        return cls(order=order, flags=TraverseFlags.ALL, max_depth=max_depth)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not is_valid_order(self.order):
            errors.append(f"invalid traversal order: {self.order!r}")

        if not is_valid_flags(self.flags):
            errors.append(
                f"invalid traversal flags: {self.flags!r} "
                f"(must fit mask {int(TraverseFlags.MASK):#x})"
            )

        if not is_valid_depth(self.max_depth):
            errors.append(
                f"invalid max_depth: {self.max_depth!r} "
                f"(use {UNLIMITED_DEPTH} for unlimited or a positive integer)"
            )

        return errors
