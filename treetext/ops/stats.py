"""Statistics over a tree.

All queries are pure and linear in tree size. Depth is aggregated bottom-up
over a post-order traversal, so no query recurses.
"""

from dataclasses import dataclass
from typing import Dict

from ..core.traverser import post_order, pre_order
from ..core.tree import Leaf, Node, Tree


@dataclass(frozen=True)
class TreeStats:
    """Summary of a tree's shape."""

    depth: int          # Edges on the longest root-to-position path
    width: int          # Most children held by any single node
    node_count: int     # Number of Node positions
    leaf_count: int     # Number of Leaf positions
    total_lines: int    # Sum of line counts over all leaves


def depth_map(tree: Tree) -> Dict[int, int]:
    """Map ``id(subtree)`` to subtree depth for every position in ``tree``.

    Useful when many depths are needed at once (sorting by depth), since
    each is computed exactly once.
    """
    depths: Dict[int, int] = {}
    for subtree in post_order(tree):
        if isinstance(subtree, Node) and subtree.children:
            depths[id(subtree)] = 1 + max(depths[id(child)] for child in subtree.children)
        else:
            depths[id(subtree)] = 0
    return depths


def depth(tree: Tree) -> int:
    """0 for a leaf or a childless node, else 1 + the deepest child's depth."""
    return depth_map(tree)[id(tree)]


def width(tree: Tree) -> int:
    """Largest number of children found at any single node (0 for a leaf)."""
    return max(
        (len(subtree.children) for subtree in pre_order(tree) if isinstance(subtree, Node)),
        default=0,
    )


def node_count(tree: Tree) -> int:
    return sum(1 for subtree in pre_order(tree) if isinstance(subtree, Node))


def leaf_count(tree: Tree) -> int:
    return sum(1 for subtree in pre_order(tree) if isinstance(subtree, Leaf))


def total_lines(tree: Tree) -> int:
    """Total number of content lines held by all leaves."""
    return sum(len(subtree.lines) for subtree in pre_order(tree) if isinstance(subtree, Leaf))


def stats(tree: Tree) -> TreeStats:
    """Compute all statistics in a single pass plus a depth aggregation.

    Args:
        tree: Tree to measure

    Returns:
        TreeStats for the tree
    """
    nodes = leaves = lines = widest = 0
    for subtree in pre_order(tree):
        if isinstance(subtree, Node):
            nodes += 1
            widest = max(widest, len(subtree.children))
        else:
            leaves += 1
            lines += len(subtree.lines)

    return TreeStats(
        depth=depth(tree),
        width=widest,
        node_count=nodes,
        leaf_count=leaves,
        total_lines=lines,
    )
