"""Tree traversal strategies for NTreeLib.

Each traverser implements one walk order as a lazy generator of
``(node, depth)`` pairs. ``traverse()`` drives a visitor over that
generator and closes it as soon as the visitor asks to stop, so nothing
past the stopping point is ever touched.

Depth is counted from the node the walk starts at, which is depth 1.
The depth-first walks keep their own stack instead of recursing, so tree
depth is not bounded by the interpreter's recursion limit.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Deque, Dict, Iterator, List, Optional, Tuple, Type, Union

from ..config import TraverseFlags, TraverseOrder, UNLIMITED_DEPTH, matches_flags
from ..errors import TraversalConfigError
from .node import Node


Visitor = Callable[[Node, Any], bool]
"""Visitor callback: ``visit(node, data) -> stop``.

Return True to STOP the whole traversal, False to keep going.
"""


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Subclasses only implement ``walk``. Filtering by node class never
    prunes descent; only ``max_depth`` does.
    """

    order: TraverseOrder

    @abstractmethod
    def walk(self,
             root: Node,
             flags: int = TraverseFlags.ALL,
             max_depth: int = UNLIMITED_DEPTH) -> Iterator[Tuple[Node, int]]:
        """Walk the subtree rooted at ``root``.

        Args:
            root: Starting node (depth 1)
            flags: Node classes to yield
            max_depth: Deepest level to visit, or UNLIMITED_DEPTH

        Yields:
            Tuples of (node, depth) for every node matching ``flags``
        """
        pass

    def traverse(self,
                 root: Node,
                 flags: int,
                 max_depth: int,
                 visit: Visitor,
                 data: Any = None) -> bool:
        """Call ``visit(node, data)`` for each node in walk order.

        Arguments are assumed valid; see ``ntreelib.api.traverse`` for the
        checked entry point.

        Returns:
            True if the visitor stopped the traversal early
        """
        walker = self.walk(root, flags, max_depth)
        try:
            for node, _ in walker:
                if visit(node, data):
                    return True
        finally:
            walker.close()
        return False

    def _should_yield(self, node: Node, flags: int) -> bool:
        """Check if a node's class passes the flags at this moment."""
        return matches_flags(node.is_leaf(), flags)

    def _should_explore(self, depth: int, max_depth: int) -> bool:
        """Check if children of a node at ``depth`` are within the limit."""
        if max_depth == UNLIMITED_DEPTH:
            return True
        return depth < max_depth

    def _children_to_explore(self, node: Node, depth: int, max_depth: int) -> Iterator[Node]:
        """Children of ``node`` if the depth limit allows descending, else none."""
        if self._should_explore(depth, max_depth):
            return node.iter_children()
        return iter(())


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal.

    Visits a node before any of its children.
    """

    order = TraverseOrder.PRE_ORDER

    def walk(self,
             root: Node,
             flags: int = TraverseFlags.ALL,
             max_depth: int = UNLIMITED_DEPTH) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = [(root, 1)]

        while stack:
            node, depth = stack.pop()

            if self._should_yield(node, flags):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                # Reversed so the first child is popped next
                children = list(node.iter_children())
                for child in reversed(children):
                    stack.append((child, depth + 1))


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal, generalized to n-ary trees.

    Walks the first child's subtree, then the node, then the remaining
    children's subtrees left to right. A leaf is just visited.
    """

    order = TraverseOrder.IN_ORDER

    # Frame states
    _FRESH, _FIRST_TAKEN, _EMITTED = range(3)

    def walk(self,
             root: Node,
             flags: int = TraverseFlags.ALL,
             max_depth: int = UNLIMITED_DEPTH) -> Iterator[Tuple[Node, int]]:
        # Frames are [node, depth, child iterator, state]
        stack: List[list] = [
            [root, 1, self._children_to_explore(root, 1, max_depth), self._FRESH]
        ]

        while stack:
            frame = stack[-1]
            node, depth, children, state = frame
            child = next(children, None)

            if child is None:
                stack.pop()
                if state != self._EMITTED and self._should_yield(node, flags):
                    yield (node, depth)
                continue

            if state == self._FIRST_TAKEN:
                frame[3] = self._EMITTED
                if self._should_yield(node, flags):
                    yield (node, depth)
            elif state == self._FRESH:
                frame[3] = self._FIRST_TAKEN

            stack.append([child, depth + 1,
                          self._children_to_explore(child, depth + 1, max_depth),
                          self._FRESH])


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal.

    Visits a node after its entire subtree. Good for aggregation or for
    tearing a tree down bottom-up.
    """

    order = TraverseOrder.POST_ORDER

    def walk(self,
             root: Node,
             flags: int = TraverseFlags.ALL,
             max_depth: int = UNLIMITED_DEPTH) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int, Iterator[Node]]] = [
            (root, 1, self._children_to_explore(root, 1, max_depth))
        ]

        while stack:
            node, depth, children = stack[-1]
            child = next(children, None)

            if child is None:
                stack.pop()
                if self._should_yield(node, flags):
                    yield (node, depth)
            else:
                stack.append((child, depth + 1,
                              self._children_to_explore(child, depth + 1, max_depth)))


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal.

    Visits every node at depth N before any node at depth N+1, siblings
    left to right within a level.
    """

    order = TraverseOrder.LEVEL_ORDER

    def walk(self,
             root: Node,
             flags: int = TraverseFlags.ALL,
             max_depth: int = UNLIMITED_DEPTH) -> Iterator[Tuple[Node, int]]:
        queue: Deque[Tuple[Node, int]] = deque([(root, 1)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(node, flags):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in node.iter_children():
                    queue.append((child, depth + 1))


_TRAVERSERS: Dict[TraverseOrder, Type[TreeTraverser]] = {
    TraverseOrder.PRE_ORDER: PreOrderTraverser,
    TraverseOrder.IN_ORDER: InOrderTraverser,
    TraverseOrder.POST_ORDER: PostOrderTraverser,
    TraverseOrder.LEVEL_ORDER: LevelOrderTraverser,
}

_ORDER_NAMES: Dict[str, TraverseOrder] = {
    'pre': TraverseOrder.PRE_ORDER,
    'pre_order': TraverseOrder.PRE_ORDER,
    'in': TraverseOrder.IN_ORDER,
    'in_order': TraverseOrder.IN_ORDER,
    'post': TraverseOrder.POST_ORDER,
    'post_order': TraverseOrder.POST_ORDER,
    'level': TraverseOrder.LEVEL_ORDER,
    'level_order': TraverseOrder.LEVEL_ORDER,
}


def create_traverser(order: Union[TraverseOrder, int, str]) -> TreeTraverser:
    """Create a traverser instance for an order.

    Args:
        order: A TraverseOrder, its integer value, or a name
            (pre, in, post, level, optionally suffixed with ``_order``)

    Returns:
        TreeTraverser instance

    Raises:
        TraversalConfigError: If the order is not recognized
    """
    resolved: Optional[TraverseOrder] = None

    if isinstance(order, str):
        resolved = _ORDER_NAMES.get(order.lower())
    elif isinstance(order, int) and not isinstance(order, bool):
        try:
            resolved = TraverseOrder(order)
        except ValueError:
            resolved = None

    if resolved is None:
        raise TraversalConfigError(
            f"Unknown traversal order: {order!r}. "
            f"Choose from: {', '.join(_ORDER_NAMES.keys())}"
        )

    return _TRAVERSERS[resolved]()
