"""Tests for traversal configuration and planning.

TraversalConfig.validate() reports problems as a list of messages;
TraversalPlan turns an invalid config into an inert plan, or raises
TraversalConfigError when asked to be strict.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from ntreelib import (
    TraversalConfig,
    TraversalPlan,
    TraversalConfigError,
    TraverseOrder,
    TraverseFlags,
    UNLIMITED_DEPTH,
    ListCollector,
    LevelOrderTraverser,
)
from ntreelib.testing import build_tree


@pytest.fixture
def root():
    tree_root, _ = build_tree(("r", [("a", [("a1", []), ("a2", [])]), ("b", [])]))
    return tree_root


class TestTraversalConfig:

    def test_defaults(self):
        config = TraversalConfig()
        assert config.order == TraverseOrder.PRE_ORDER
        assert config.flags == TraverseFlags.ALL
        assert config.max_depth == UNLIMITED_DEPTH
        assert config.validate() == []

    def test_convenience_constructors(self):
        full = TraversalConfig.full(TraverseOrder.POST_ORDER, TraverseFlags.LEAVES)
        assert full.max_depth == UNLIMITED_DEPTH
        assert full.flags == TraverseFlags.LEAVES

        shallow = TraversalConfig.shallow(3, TraverseOrder.LEVEL_ORDER)
        assert shallow.max_depth == 3
        assert shallow.order == TraverseOrder.LEVEL_ORDER
        assert shallow.validate() == []

    def test_plain_ints_are_accepted(self):
        assert TraversalConfig(order=2, flags=1, max_depth=5).validate() == []

    def test_reports_every_problem(self):
        errors = TraversalConfig(order=9, flags=8, max_depth=0).validate()
        assert len(errors) == 3
        assert "order" in errors[0]
        assert "flags" in errors[1]
        assert "max_depth" in errors[2]

    @pytest.mark.parametrize("max_depth", [0, -2, -100, 1.0, "3", None, False])
    def test_invalid_depths(self, max_depth):
        errors = TraversalConfig(max_depth=max_depth).validate()
        assert len(errors) == 1
        assert "max_depth" in errors[0]

    @pytest.mark.parametrize("max_depth", [UNLIMITED_DEPTH, 1, 2, 1000])
    def test_valid_depths(self, max_depth):
        assert TraversalConfig(max_depth=max_depth).validate() == []


class TestTraversalPlan:

    def test_valid_plan(self, root):
        plan = TraversalPlan(TraversalConfig.full(TraverseOrder.LEVEL_ORDER))
        assert plan.is_valid
        assert plan.errors == []
        assert isinstance(plan.traverser, LevelOrderTraverser)

        collector = ListCollector()
        stopped = plan.execute(root, collector)
        assert stopped is False
        assert [n.value for n in collector.result] == ["r", "a", "b", "a1", "a2"]
        assert plan.visited == 5

    def test_execute_reports_early_stop(self, root):
        plan = TraversalPlan(TraversalConfig())
        collector = ListCollector(limit=2)
        assert plan.execute(root, collector) is True
        assert [n.value for n in collector.result] == ["r", "a"]
        assert plan.visited == 2

    def test_visited_resets_between_runs(self, root):
        plan = TraversalPlan(TraversalConfig.shallow(2))
        plan.execute(root, ListCollector())
        assert plan.visited == 3
        plan.execute(None, ListCollector())
        assert plan.visited == 0

    def test_invalid_plan_is_inert(self, root, caplog):
        with caplog.at_level(logging.DEBUG, logger="ntreelib"):
            plan = TraversalPlan(TraversalConfig(max_depth=0))

        assert not plan.is_valid
        assert plan.traverser is None
        assert any("max_depth" in record.getMessage() for record in caplog.records)

        collector = ListCollector()
        assert plan.execute(root, collector) is False
        assert collector.result == []
        assert list(plan.walk(root)) == []

    def test_strict_plan_raises(self):
        with pytest.raises(TraversalConfigError) as excinfo:
            TraversalPlan(TraversalConfig(order=7, max_depth=-3), strict=True)

        assert len(excinfo.value.errors) == 2
        assert "Invalid configuration" in str(excinfo.value)
        assert isinstance(excinfo.value, ValueError)

    def test_missing_visitor(self, root):
        plan = TraversalPlan(TraversalConfig())
        assert plan.execute(root, None) is False
        assert plan.visited == 0

    def test_walk_yields_depths(self, root):
        plan = TraversalPlan(TraversalConfig.full(TraverseOrder.POST_ORDER))
        assert [(n.value, d) for n, d in plan.walk(root)] == [
            ("a1", 3), ("a2", 3), ("a", 2), ("b", 2), ("r", 1),
        ]

    def test_summary(self):
        plan = TraversalPlan(TraversalConfig.shallow(2, TraverseOrder.IN_ORDER))
        assert plan.summary() == "TraversalPlan(order=IN_ORDER, flags=3, max_depth=2)"

        plan = TraversalPlan(TraversalConfig(order=1))
        assert "max_depth=unlimited" in plan.summary()

        plan = TraversalPlan(TraversalConfig(flags=16))
        assert plan.summary().startswith("TraversalPlan(invalid:")
