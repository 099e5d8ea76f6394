"""Lookup by label or line content.

Every search walks in pre-order and matches by exact string equality.
Absence is reported as ``None`` (or an empty list / ``False``), never as an
exception.
"""

from typing import List, Optional, Tuple

from ..core.traverser import pre_order, walk
from ..core.tree import Leaf, Node, Tree


def find_node(tree: Tree, label: str) -> Optional[Node]:
    """Return the first node whose label equals ``label``."""
    for subtree in pre_order(tree):
        if isinstance(subtree, Node) and subtree.label == label:
            return subtree
    return None


def find_all_nodes(tree: Tree, label: str) -> List[Node]:
    """Return every node whose label equals ``label``, in pre-order."""
    return [
        subtree for subtree in pre_order(tree)
        if isinstance(subtree, Node) and subtree.label == label
    ]


def find_leaf(tree: Tree, content: str) -> Optional[Leaf]:
    """Return the first leaf holding a line equal to ``content``."""
    for subtree in pre_order(tree):
        if isinstance(subtree, Leaf) and content in subtree.lines:
            return subtree
    return None


def _matches(subtree: Tree, text: str) -> bool:
    if isinstance(subtree, Node):
        return subtree.label == text
    return text in subtree.lines


def contains(tree: Tree, text: str) -> bool:
    """True if any label or any leaf line equals ``text``."""
    return any(_matches(subtree, text) for subtree in pre_order(tree))


def path_to(tree: Tree, content: str) -> Optional[List[int]]:
    """Return the path to the first position whose label or line equals ``content``.

    Example:
        >>> tree = Node("root", [Leaf(["a"]), Node("sub", [Leaf(["b"])])])
        >>> path_to(tree, "b")
        [1, 0]
    """
    found = find_with_path(tree, content)
    return found[0] if found else None


def find_with_path(tree: Tree, content: str) -> Optional[Tuple[List[int], Tree]]:
    """Like :func:`path_to` but also return the matching subtree."""
    for path, subtree in walk(tree):
        if _matches(subtree, content):
            return list(path), subtree
    return None
