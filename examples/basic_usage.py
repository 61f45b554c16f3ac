#!/usr/bin/env python3
"""
Basic NTreeLib usage.

This example demonstrates:
- Building a tree with new_node / append_child
- Walking it in each order with a visitor
- Stopping a walk early
- Queries: node_count, find_node, depth, get_root
- Detaching and re-attaching a subtree
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from ntreelib import (
    new_node,
    append_child,
    unlink,
    traverse,
    iter_nodes,
    node_count,
    find_node,
    get_root,
    depth,
    render,
    TraverseOrder,
    TraverseFlags,
    UNLIMITED_DEPTH,
    ListCollector,
)


def build_org_chart():
    """Build a small org chart and return its root."""
    ceo = new_node("CEO")
    cto = append_child(ceo, new_node("CTO"))
    cfo = append_child(ceo, new_node("CFO"))

    for name in ("Backend Lead", "Frontend Lead", "SRE Lead"):
        append_child(cto, new_node(name))
    for name in ("Controller", "Treasurer"):
        append_child(cfo, new_node(name))
    return ceo


def print_visitor(node, prefix):
    """Print each node; never stop."""
    print(f"{prefix}{'  ' * (depth(node) - 1)}{node.value}")
    return False


def demo_orders(root):
    print("\n=== Traversal orders ===")
    for order in TraverseOrder:
        values = [n.value for n in iter_nodes(root, order)]
        print(f"{order.name:<12} {', '.join(values)}")


def demo_visitor(root):
    print("\n=== Pre-order visitor, depth <= 2 ===")
    traverse(root, TraverseOrder.PRE_ORDER, TraverseFlags.ALL, 2, print_visitor, "  ")


def demo_early_stop(root):
    print("\n=== Stop at the first leaf ===")
    first_leaf = ListCollector(limit=1)
    traverse(root, TraverseOrder.LEVEL_ORDER, TraverseFlags.LEAVES, UNLIMITED_DEPTH,
             first_leaf)
    print(f"  first leaf in level order: {first_leaf.result[0].value}")
    print(f"  leaves visited: {len(first_leaf.result)}")


def demo_queries(root):
    print("\n=== Queries ===")
    print(f"  nodes:     {node_count(root, TraverseFlags.ALL)}")
    print(f"  leaves:    {node_count(root, TraverseFlags.LEAVES)}")
    print(f"  managers:  {node_count(root, TraverseFlags.NON_LEAVES)}")

    sre = find_node(root, TraverseOrder.PRE_ORDER, TraverseFlags.ALL, "SRE Lead")
    top, level = get_root(sre)
    print(f"  {sre.value!r} reports up to {top.value!r} at depth {level}")


def demo_reorg(root):
    print("\n=== Move the SRE team under the CFO ===")
    sre = find_node(root, TraverseOrder.PRE_ORDER, TraverseFlags.ALL, "SRE Lead")
    cfo = find_node(root, TraverseOrder.PRE_ORDER, TraverseFlags.ALL, "CFO")

    unlink(sre)
    append_child(cfo, sre)
    print(render(root))


def main():
    root = build_org_chart()
    print(render(root))
    demo_orders(root)
    demo_visitor(root)
    demo_early_stop(root)
    demo_queries(root)
    demo_reorg(root)


if __name__ == "__main__":
    main()
