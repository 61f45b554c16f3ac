"""Node abstraction for NTreeLib.

A Node is a small container for a caller-owned payload plus the links that
place it in an ordered n-ary tree:

    parent
      |
    children -> next -> next -> ...
              <- previous

``children`` points at the first child only; the rest of the children hang
off it as a doubly linked sibling chain. ``children`` is the owning edge,
``parent``/``previous``/``next`` are plain navigation references.

All structural changes go through ``append_child``/``insert`` and ``unlink``
so the sibling and parent links stay consistent.
"""

import logging
from typing import Any, Iterator, Optional


logger = logging.getLogger(__name__)


class Node:
    """A node of an ordered n-ary tree.

    Nodes compare by identity. Two nodes holding equal payloads are still
    two different nodes; use ``find_node`` to look a node up by payload.

    Attributes:
        value: Opaque payload, never copied or interpreted by the tree
        parent: Parent node, or None for a root
        children: First child, or None for a leaf
        next: Right sibling, or None at the end of the chain
        previous: Left sibling, or None at the start of the chain
    """

    __slots__ = ('value', 'parent', 'children', 'next', 'previous')

    def __init__(self, value: Any = None):
        self.value = value
        self.parent: Optional['Node'] = None
        self.children: Optional['Node'] = None
        self.next: Optional['Node'] = None
        self.previous: Optional['Node'] = None

    def is_root(self) -> bool:
        """Check if this node has no parent."""
        return self.parent is None

    def is_leaf(self) -> bool:
        """Check if this node has no children right now."""
        return self.children is None

    def is_internal(self) -> bool:
        """Check if this node has at least one child."""
        return self.children is not None

    def iter_children(self) -> Iterator['Node']:
        """Yield direct children, left to right."""
        child = self.children
        while child is not None:
            # Read next before yielding so the caller may unlink ``child``
            following = child.next
            yield child
            child = following

    def last_child(self) -> Optional['Node']:
        """Return the rightmost child, or None for a leaf."""
        child = self.children
        if child is None:
            return None
        while child.next is not None:
            child = child.next
        return child

    def n_children(self) -> int:
        """Count direct children."""
        return sum(1 for _ in self.iter_children())

    def render(self) -> str:
        """Render this subtree as indented text, one payload per line."""
        lines = []
        stack = [(self, 0)]

        while stack:
            node, indent = stack.pop()
            lines.append(f"{'  ' * indent}{node.value!r}")
            children = list(node.iter_children())
            for child in reversed(children):
                stack.append((child, indent + 1))

        return "\n".join(lines)

    def __iter__(self) -> Iterator['Node']:
        return self.iter_children()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"


def new_node(value: Any = None) -> Node:
    """Create a detached node holding ``value``."""
    return Node(value)


def is_root(node: Optional[Node]) -> bool:
    """Check if ``node`` is a root. A missing node is not a root."""
    return node is not None and node.parent is None


def append_child(parent: Optional[Node], child: Optional[Node]) -> Optional[Node]:
    """Attach ``child`` as the last child of ``parent``.

    Nothing changes when either argument is None or when ``child`` already
    has a parent; the caller gets None back in that case.

    Args:
        parent: Node to attach under
        child: Root node to attach

    Returns:
        ``child`` on success, None if the call was rejected
    """
    if parent is None or child is None:
        logger.debug("append_child rejected: parent=%r child=%r", parent, child)
        return None
    if child.parent is not None:
        logger.debug("append_child rejected: %r is already attached to %r",
                     child, child.parent)
        return None

    last = parent.last_child()
    if last is None:
        parent.children = child
    else:
        last.next = child
        child.previous = last
    child.parent = parent
    return child


def insert(parent: Optional[Node], child: Optional[Node]) -> Optional[Node]:
    """Attach ``child`` under ``parent``.

    Same contract as ``append_child``: the child always goes to the end of
    the sibling chain.
    """
    return append_child(parent, child)


def unlink(node: Optional[Node]) -> None:
    """Detach ``node`` from its parent and siblings.

    The node becomes a root. Its own subtree is left exactly as it was.
    Passing None does nothing.
    """
    if node is None:
        return

    if node.previous is not None:
        node.previous.next = node.next
    elif node.parent is not None:
        node.parent.children = node.next

    if node.next is not None:
        node.next.previous = node.previous

    node.parent = None
    node.previous = None
    node.next = None
