"""Combining two trees.

The result never shares subtrees with either input: everything kept is
copied.

Fallbacks for mismatched variants:

- ``APPEND`` with a leaf on either side keeps a copy of the node side, or of
  the second leaf when both are leaves.
- ``MERGE_BY_LABEL`` applies ``APPEND`` when the two roots are not nodes with
  the same label, and replaces a leaf with the second leaf when both are
  leaves. Only node children are ever matched by label; leaf children are
  carried over as-is.
"""

import logging
from collections import defaultdict, deque
from typing import Deque, Dict, List, Tuple, Union

from .._common.config import MergeStrategy
from ..core.tree import Leaf, Node, Tree, clone

logger = logging.getLogger(__name__)


def merge(first: Tree, second: Tree,
          strategy: Union[MergeStrategy, str] = MergeStrategy.APPEND) -> Tree:
    """Merge ``second`` into a copy of ``first``.

    Args:
        first: Base tree
        second: Tree merged into the base
        strategy: MergeStrategy or its value ("replace", "append",
            "merge_by_label")

    Returns:
        A new tree

    Raises:
        ValueError: If the strategy name is not recognized
    """
    strategy = MergeStrategy(strategy)

    if strategy is MergeStrategy.REPLACE:
        return clone(second)
    if strategy is MergeStrategy.APPEND:
        return _merge_append(first, second)
    return _merge_by_label(first, second)


def _merge_append(first: Tree, second: Tree) -> Tree:
    if isinstance(first, Node) and isinstance(second, Node):
        children = [clone(child) for child in first.children]
        children.extend(clone(child) for child in second.children)
        return Node(first.label, children)

    if isinstance(first, Node):
        logger.debug("Append of leaf into node %r: keeping the node", first.label)
        return clone(first)

    # First is a leaf: the second side wins, whichever variant it is
    logger.debug("Append onto a leaf: keeping the second tree")
    return clone(second)


def _merge_by_label(first: Tree, second: Tree) -> Tree:
    if isinstance(first, Leaf) and isinstance(second, Leaf):
        return clone(second)

    if not (isinstance(first, Node) and isinstance(second, Node)) or first.label != second.label:
        logger.debug("Roots cannot be merged by label; falling back to append")
        return _merge_append(first, second)

    root = Node(first.label, [])
    stack: List[Tuple[Node, Node, Node]] = [(first, second, root)]

    while stack:
        base, other, target = stack.pop()

        # Unused node children of `other`, by label, in original order
        available: Dict[str, Deque[int]] = defaultdict(deque)
        for index, child in enumerate(other.children):
            if isinstance(child, Node):
                available[child.label].append(index)

        used = set()
        for child in base.children:
            if isinstance(child, Node) and available.get(child.label):
                index = available[child.label].popleft()
                used.add(index)
                merged = Node(child.label, [])
                target.children.append(merged)
                stack.append((child, other.children[index], merged))
            else:
                target.children.append(clone(child))

        for index, child in enumerate(other.children):
            if index not in used:
                target.children.append(clone(child))

    return root
