"""Traversal planning for NTreeLib.

The TraversalPlan validates a TraversalConfig and pairs it with the
traverser for its order before any node is touched. An invalid plan is
inert: executing it visits nothing.
"""

import logging
from typing import Any, Iterator, List, Optional, Tuple

from .config import TraversalConfig, TraverseOrder
from .core.node import Node
from .core.traverser import TreeTraverser, Visitor, create_traverser
from .errors import TraversalConfigError


logger = logging.getLogger(__name__)


class TraversalPlan:
    """Validated execution plan for a tree traversal.

    Non-strict plans (the default) keep validation problems in ``errors``
    and turn ``execute``/``walk`` into no-ops. Strict plans raise
    TraversalConfigError up front instead.

    Attributes:
        config: The traversal configuration
        errors: Validation errors (empty for a runnable plan)
        traverser: Selected traverser, or None for an invalid plan
        visited: Number of visitor calls made by the last ``execute``
    """

    def __init__(self, config: TraversalConfig, strict: bool = False):
        """Create and validate a plan.

        Args:
            config: Traversal configuration
            strict: Raise instead of producing an inert plan

        Raises:
            TraversalConfigError: If ``strict`` and the config is invalid
        """
        self.config = config
        self.errors: List[str] = config.validate()
        self.traverser: Optional[TreeTraverser] = None
        self.visited = 0

        if self.errors:
            if strict:
                raise TraversalConfigError(
                    f"Invalid configuration: {'; '.join(self.errors)}",
                    self.errors,
                )
            logger.debug("Traversal plan is inert: %s", '; '.join(self.errors))
            return

        self.traverser = create_traverser(config.order)

    @property
    def is_valid(self) -> bool:
        return self.traverser is not None

    def walk(self, root: Optional[Node]) -> Iterator[Tuple[Node, int]]:
        """Yield ``(node, depth)`` pairs for the planned traversal."""
        if self.traverser is None or root is None:
            return
        yield from self.traverser.walk(root, self.config.flags, self.config.max_depth)

    def execute(self,
                root: Optional[Node],
                visit: Optional[Visitor],
                data: Any = None) -> bool:
        """Run the plan, calling ``visit(node, data)`` for each node.

        Args:
            root: Starting node; None means nothing to visit
            visit: Visitor; returning True stops the traversal
            data: Opaque value passed to every visitor call

        Returns:
            True if the visitor stopped the traversal early
        """
        self.visited = 0

        if self.traverser is None:
            return False
        if root is None or visit is None:
            logger.debug("Traversal skipped: root=%r visit=%r", root, visit)
            return False

        def _counting_visit(node: Node, value: Any) -> bool:
            self.visited += 1
            return visit(node, value)

        return self.traverser.traverse(
            root,
            self.config.flags,
            self.config.max_depth,
            _counting_visit,
            data,
        )

    def summary(self) -> str:
        """Human-readable description of the plan.

        Useful for debugging and logging.
        """
        if not self.is_valid:
            return f"TraversalPlan(invalid: {'; '.join(self.errors)})"
        depth = "unlimited" if self.config.max_depth < 0 else self.config.max_depth
        return (
            f"TraversalPlan(order={TraverseOrder(self.config.order).name}, "
            f"flags={int(self.config.flags)}, max_depth={depth})"
        )
