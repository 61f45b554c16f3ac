"""NTreeLib - Ordered N-ary Tree Library.

NTreeLib provides a generic, ordered n-ary tree: nodes carry any payload
and are linked to a parent, a first child and left/right siblings.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from ntreelib import new_node, append_child, traverse, TraverseOrder, TraverseFlags

    root = new_node("root")
    append_child(root, new_node("a1"))
    traverse(root, TraverseOrder.PRE_ORDER, TraverseFlags.ALL, -1, visit)
━━━━━━━━━━━━━━━━━━━━━━━━━━

Visitors return True to STOP the traversal and False to continue.
"""

import logging

__version__ = "0.1.0"

# Core components
from .core.node import Node, new_node, append_child, insert, unlink, is_root
from .core.traverser import (
    Visitor,
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .core.collector import NodeCollector, NodeCounter, ValueFinder, ListCollector

# Configuration and planning
from .config import TraversalConfig, TraverseOrder, TraverseFlags, UNLIMITED_DEPTH
from .planning import TraversalPlan
from .errors import TraversalConfigError

# High-level API
from .api import (
    traverse,
    iter_nodes,
    node_count,
    find_node,
    get_root,
    depth,
    render,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
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
    # Config
    "TraversalConfig",
    "TraverseOrder",
    "TraverseFlags",
    "UNLIMITED_DEPTH",
    "TraversalPlan",
    "TraversalConfigError",
    # API
    "traverse",
    "iter_nodes",
    "node_count",
    "find_node",
    "get_root",
    "depth",
    "render",
]
