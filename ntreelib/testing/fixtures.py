"""Test fixtures for NTreeLib consumers.

These helpers build trees from compact descriptions and check the linkage
invariants of a subtree, so consumer test suites don't have to reach into
node links by hand.
"""

from typing import Any, Dict, List, Sequence, Set, Tuple

from ..core.node import Node, append_child, new_node


TreeSpec = Tuple[Any, Sequence['TreeSpec']]


def build_tree(spec: TreeSpec) -> Tuple[Node, Dict[Any, Node]]:
    """Build a tree from a nested ``(value, [children...])`` description.

    Example:
        root, nodes = build_tree(
            ("root", [
                ("a1", [("a1_1", []), ("a1_2", [])]),
                ("a2", []),
            ])
        )
        assert nodes["a1_2"].parent is nodes["a1"]

    Args:
        spec: Tuple of payload and a sequence of child specs

    Returns:
        Tuple of (root node, dict mapping payload -> node). Payloads must
        be hashable; later duplicates overwrite earlier entries in the dict.
    """
    nodes: Dict[Any, Node] = {}

    def _build(item: TreeSpec) -> Node:
        value, children = item
        node = new_node(value)
        nodes[value] = node
        for child_spec in children:
            append_child(node, _build(child_spec))
        return node

    root = _build(spec)
    return root, nodes


def check_links(root: Node) -> List[str]:
    """Check every linkage invariant in the subtree at ``root``.

    Verified for each node:
    - the first child has no previous sibling
    - ``next.previous`` and ``previous.next`` point back at the node
    - every child in the sibling chain names the node as its parent
    - no node appears twice (no cycles, no shared children)

    Args:
        root: Subtree to check

    Returns:
        List of problems found (empty if the subtree is consistent)
    """
    problems: List[str] = []
    seen: Set[int] = set()
    stack = [root]

    if root.parent is None and (root.next is not None or root.previous is not None):
        problems.append(f"root {root!r} has siblings")

    while stack:
        node = stack.pop()
        if id(node) in seen:
            problems.append(f"{node!r} is reachable more than once")
            continue
        seen.add(id(node))

        first = node.children
        if first is not None and first.previous is not None:
            problems.append(f"first child {first!r} of {node!r} has a previous sibling")

        child = first
        chain: Set[int] = set()
        while child is not None:
            if id(child) in chain:
                problems.append(f"sibling chain under {node!r} loops at {child!r}")
                break
            chain.add(id(child))

            if child.parent is not node:
                problems.append(f"{child!r} is under {node!r} but its parent is {child.parent!r}")
            if child.next is not None and child.next.previous is not child:
                problems.append(f"{child!r}.next.previous does not point back")
            if child.previous is not None and child.previous.next is not child:
                problems.append(f"{child!r}.previous.next does not point back")

            stack.append(child)
            child = child.next

    return problems
