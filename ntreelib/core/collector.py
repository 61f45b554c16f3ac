"""Visitor-based collectors for NTreeLib.

Collectors are callable objects that satisfy the ``Visitor`` contract
(``visit(node, data) -> stop``) and accumulate a result while a traversal
runs. They let the derived queries reuse the traversal engine without
closing over mutable state.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from .node import Node


class NodeCollector(ABC):
    """Base class for visitor collectors.

    Subclasses implement ``__call__`` and expose their result through
    ``result``.
    """

    @abstractmethod
    def __call__(self, node: Node, data: Any) -> bool:
        """Visit a node; return True to stop the traversal."""
        pass

    @property
    @abstractmethod
    def result(self) -> Any:
        """The value accumulated so far."""
        pass


class NodeCounter(NodeCollector):
    """Counts every node it is called for. Never stops the traversal."""

    def __init__(self):
        self.count = 0

    def __call__(self, node: Node, data: Any) -> bool:
        self.count += 1
        return False

    @property
    def result(self) -> int:
        return self.count


class ValueFinder(NodeCollector):
    """Stops at the first node whose payload equals ``data``."""

    def __init__(self):
        self.found: Optional[Node] = None

    def __call__(self, node: Node, data: Any) -> bool:
        if node.value == data:
            self.found = node
            return True
        return False

    @property
    def result(self) -> Optional[Node]:
        return self.found


class ListCollector(NodeCollector):
    """Records nodes in visit order, optionally up to ``limit`` nodes."""

    def __init__(self, limit: Optional[int] = None):
        self.nodes: List[Node] = []
        self.limit = limit

    def __call__(self, node: Node, data: Any) -> bool:
        self.nodes.append(node)
        return self.limit is not None and len(self.nodes) >= self.limit

    @property
    def result(self) -> List[Node]:
        return self.nodes
