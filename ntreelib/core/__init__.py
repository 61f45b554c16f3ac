"""Core abstractions for NTreeLib.

This package contains the node type with its linkage primitives, the
traversal strategies, and the visitor collectors built on them.
"""

from .node import Node, new_node, append_child, insert, unlink, is_root
from .traverser import (
    Visitor,
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .collector import NodeCollector, NodeCounter, ValueFinder, ListCollector

__all__ = [
    "Node",
    "new_node",
    "append_child",
    "insert",
    "unlink",
    "is_root",
    "Visitor",
    "TreeTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "NodeCollector",
    "NodeCounter",
    "ValueFinder",
    "ListCollector",
]
