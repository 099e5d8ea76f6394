"""In-place reordering of children.

Every function here reorders the ``children`` of every node in the tree and
nothing else: leaf lines keep their order and node/leaf counts never change.
All sorts are stable, so positions that compare equal keep their original
relative order.

Ordering of a node against a leaf in :func:`sort_by_label`: both are compared
by their text (label or first line); when the text is equal the node comes
first.
"""

from functools import cmp_to_key
from typing import Any, Callable

from ..core.traverser import nodes
from ..core.tree import Node, Tree, display_text
from .stats import depth_map


def sort_by_key(tree: Tree, key: Callable[[Tree], Any], reverse: bool = False) -> Tree:
    """Sort the children of every node by ``key``.

    Args:
        tree: Tree to reorder in place
        key: Function mapping a child to its sort key
        reverse: Sort descending (ties still keep original order)

    Returns:
        The same tree, for chaining
    """
    # Collect first so the traversal never sees a list being reordered
    for node in list(nodes(tree)):
        node.children.sort(key=key, reverse=reverse)
    return tree


def sort_children(tree: Tree, comparator: Callable[[Tree, Tree], int]) -> Tree:
    """Sort children at every level with a ``cmp``-style comparator.

    The comparator returns a negative number, zero or a positive number when
    its first argument sorts before, equal to, or after the second.
    """
    return sort_by_key(tree, cmp_to_key(comparator))


def _label_key(child: Tree):
    return (display_text(child), 0 if isinstance(child, Node) else 1)


def sort_by_label(tree: Tree) -> Tree:
    """Sort children ascending by label (nodes) or first line (leaves)."""
    return sort_by_key(tree, _label_key)


def sort_by_depth(tree: Tree, descending: bool = False) -> Tree:
    """Sort children by the depth of their own subtree.

    Args:
        tree: Tree to reorder in place
        descending: Deepest subtrees first when True
    """
    # Sorting does not change any subtree's depth, so one table serves all levels
    depths = depth_map(tree)
    return sort_by_key(tree, lambda child: depths[id(child)], reverse=descending)
