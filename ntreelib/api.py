"""High-level API for NTreeLib.

This module provides simple, functional interfaces for walking and
querying trees. None of these functions raise for bad arguments: a missing
root, a missing visitor or an invalid order, flag set or depth produces a
"nothing happened" result (zero visits, ``0`` or ``None``) instead.
"""

from typing import Any, Iterator, Optional, Tuple

from .config import TraversalConfig, TraverseFlags, TraverseOrder, UNLIMITED_DEPTH
from .core.collector import NodeCounter, ValueFinder
from .core.node import Node
from .core.traverser import Visitor
from .planning import TraversalPlan


def traverse(root: Optional[Node],
             order: TraverseOrder,
             flags: TraverseFlags,
             max_depth: int,
             visit: Optional[Visitor],
             data: Any = None) -> None:
    """Walk the subtree at ``root`` and call ``visit(node, data)`` per node.

    Args:
        root: Starting node (depth 1)
        order: PRE_ORDER, IN_ORDER, POST_ORDER or LEVEL_ORDER
        flags: LEAVES, NON_LEAVES or ALL; decides which nodes are visited,
            never which are descended into
        max_depth: UNLIMITED_DEPTH (-1) or a positive depth limit
        visit: Callback returning True to stop the whole traversal
        data: Opaque value passed unchanged to every ``visit`` call

    Example:
        >>> def show(node, prefix):
        ...     print(prefix, node.value)
        ...     return False
        >>> traverse(root, TraverseOrder.PRE_ORDER, TraverseFlags.ALL, -1, show, "-")
    """
    plan = TraversalPlan(TraversalConfig(order=order, flags=flags, max_depth=max_depth))
    plan.execute(root, visit, data)


def iter_nodes(root: Optional[Node],
               order: TraverseOrder = TraverseOrder.PRE_ORDER,
               flags: TraverseFlags = TraverseFlags.ALL,
               max_depth: int = UNLIMITED_DEPTH) -> Iterator[Node]:
    """Iterate over the nodes ``traverse`` would visit, in the same order.

    Breaking out of the loop ends the walk just like a visitor returning
    True would.

    Example:
        >>> [n.value for n in iter_nodes(root, TraverseOrder.LEVEL_ORDER)]
    """
    plan = TraversalPlan(TraversalConfig(order=order, flags=flags, max_depth=max_depth))
    for node, _ in plan.walk(root):
        yield node


def node_count(root: Optional[Node], flags: TraverseFlags = TraverseFlags.ALL) -> int:
    """Count nodes under ``root`` (inclusive) that match ``flags``.

    Returns:
        Number of matching nodes; 0 for a missing root or invalid flags
    """
    counter = NodeCounter()
    traverse(root, TraverseOrder.PRE_ORDER, flags, UNLIMITED_DEPTH, counter)
    return counter.result


def find_node(root: Optional[Node],
              order: TraverseOrder,
              flags: TraverseFlags,
              value: Any) -> Optional[Node]:
    """Find the first node, in ``order``, whose payload equals ``value``.

    Payload equality is the payload type's own ``==``.

    Returns:
        The matching node, or None
    """
    finder = ValueFinder()
    traverse(root, order, flags, UNLIMITED_DEPTH, finder, value)
    return finder.result


def get_root(node: Optional[Node]) -> Tuple[Optional[Node], int]:
    """Follow parent links up to the root.

    Returns:
        Tuple of (root, depth of ``node``) with the root at depth 1;
        ``(None, 0)`` for a missing node
    """
    if node is None:
        return None, 0

    depth = 1
    while node.parent is not None:
        node = node.parent
        depth += 1
    return node, depth


def depth(node: Optional[Node]) -> int:
    """Depth of ``node`` below its root (root = 1, missing node = 0)."""
    return get_root(node)[1]


def render(node: Optional[Node]) -> str:
    """Render the subtree at ``node`` as indented text.

    One line per node in pre-order, two spaces of indent per level, each
    line the ``repr`` of the payload. Empty string for a missing node.
    """
    if node is None:
        return ""
    return node.render()
