#!/usr/bin/env python3
"""
Traversal benchmark for NTreeLib.

Builds a wide, deep tree (depth 6, 12 children per node, ~270k nodes)
and times each traversal order:
1. Visitor-driven traverse() over every node
2. The iter_nodes() generator over every node
3. node_count() with each flag set

Each measurement is the median of several runs after a warmup.
"""

import gc
import statistics
import sys
import time
from pathlib import Path
from typing import Callable, Dict

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ntreelib import (
    Node,
    new_node,
    append_child,
    depth,
    traverse,
    iter_nodes,
    node_count,
    TraverseOrder,
    TraverseFlags,
    UNLIMITED_DEPTH,
)


def generate_benchmark_tree(parent: Node, depth_limit: int, child_count: int) -> Node:
    """Grow ``child_count`` children under every node above ``depth_limit``."""
    if depth(parent) < depth_limit:
        for _ in range(child_count):
            child = append_child(parent, new_node({"id": "Mock", "value": 1}))
            generate_benchmark_tree(child, depth_limit, child_count)
    return parent


class TraversalBenchmark:
    """Timing harness for traversal orders."""

    def __init__(self, root: Node, iterations: int = 5):
        self.root = root
        self.iterations = iterations

    def _measure(self, func: Callable[[], int]) -> float:
        func()  # warmup
        times = []
        for _ in range(self.iterations):
            gc.collect()
            start = time.perf_counter()
            func()
            times.append(time.perf_counter() - start)
        return statistics.median(times)

    def benchmark_traverse(self, order: TraverseOrder) -> float:
        def run() -> int:
            counter = {"n": 0}

            def visit(node, data):
                data["n"] += 1
                return False

            traverse(self.root, order, TraverseFlags.ALL, UNLIMITED_DEPTH, visit, counter)
            return counter["n"]

        return self._measure(run)

    def benchmark_iter_nodes(self, order: TraverseOrder) -> float:
        return self._measure(lambda: sum(1 for _ in iter_nodes(self.root, order)))

    def benchmark_node_count(self, flags: TraverseFlags) -> float:
        return self._measure(lambda: node_count(self.root, flags))

    def run_all(self) -> Dict[str, float]:
        results = {}
        for order in TraverseOrder:
            results[f"traverse/{order.name}"] = self.benchmark_traverse(order)
            results[f"iter_nodes/{order.name}"] = self.benchmark_iter_nodes(order)
        for flags in (TraverseFlags.ALL, TraverseFlags.LEAVES, TraverseFlags.NON_LEAVES):
            results[f"node_count/{flags.name}"] = self.benchmark_node_count(flags)
        return results


def main():
    print("Building benchmark tree...")
    root = generate_benchmark_tree(new_node({"id": "Root", "value": 1}), 6, 12)
    total = node_count(root, TraverseFlags.ALL)
    print(f"Node count: {total}\n")

    bench = TraversalBenchmark(root, iterations=3)
    results = bench.run_all()

    print(f"{'Benchmark':<30} {'Median (s)':>12} {'Nodes/s':>14}")
    print("-" * 58)
    for name, seconds in results.items():
        rate = total / seconds if seconds > 0 else float("inf")
        print(f"{name:<30} {seconds:>12.4f} {rate:>14,.0f}")


if __name__ == "__main__":
    main()
