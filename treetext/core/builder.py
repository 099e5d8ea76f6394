"""Fluent construction of trees.

:class:`TreeBuilder` keeps an explicit stack of open nodes, so construction
depth is not tied to the caller's call stack::

    tree = (TreeBuilder()
            .node("root")
                .leaf("a")
                .node("sub")
                    .leaf("b")
                .end()
            .build())
"""

import logging
from typing import Iterable, List, Optional

from .tree import Leaf, Node, Tree

logger = logging.getLogger(__name__)


class TreeBuildError(ValueError):
    """Raised when the builder is used out of order."""
    pass


class TreeBuilder:
    """Builds a tree through a cursor that points at the open node."""

    def __init__(self):
        self._stack: List[Node] = []
        self._root: Optional[Node] = None

    @property
    def depth(self) -> int:
        """Number of currently open nodes."""
        return len(self._stack)

    def node(self, label: str) -> 'TreeBuilder':
        """Open a new node under the current one and move the cursor into it."""
        new_node = Node(label, [])
        if self._stack:
            self._stack[-1].children.append(new_node)
        elif self._root is not None:
            raise TreeBuildError(
                f"Cannot open node {label!r}: the root {self._root.label!r} is already closed"
            )
        else:
            self._root = new_node
        self._stack.append(new_node)
        return self

    def leaf(self, line: str) -> 'TreeBuilder':
        """Add a single-line leaf to the open node."""
        return self.leaf_lines([line])

    def leaf_lines(self, lines: Iterable[str]) -> 'TreeBuilder':
        """Add a multi-line leaf to the open node."""
        if not self._stack:
            raise TreeBuildError("Cannot add a leaf: no node is open")
        self._stack[-1].children.append(Leaf(list(lines)))
        return self

    def end(self) -> 'TreeBuilder':
        """Close the open node and move the cursor to its parent.

        Closing the root is a no-op so that ``build()`` always has something
        to return.
        """
        if len(self._stack) > 1:
            self._stack.pop()
        else:
            logger.debug("end() called with %d open node(s); ignored", len(self._stack))
        return self

    def build(self) -> Tree:
        """Close every open node and return the root.

        Raises:
            TreeBuildError: If no node was ever opened
        """
        if self._root is None:
            raise TreeBuildError("Cannot build an empty tree")
        self._stack.clear()
        return self._root
