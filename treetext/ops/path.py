"""Addressing positions by path.

A path is a sequence of child indices from the root; ``[]`` addresses the
root. A path is invalid when an index is out of range or when it tries to
descend into a leaf. Invalid paths yield ``None`` rather than raising.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..core.traverser import walk
from ..core.tree import Leaf, Node, Tree


@dataclass(frozen=True)
class FlattenedEntry:
    """One flattened position: a node label or a single leaf line."""

    path: Tuple[int, ...]
    content: str
    is_node: bool


def get_by_path(tree: Tree, path: Sequence[int]) -> Optional[Tree]:
    """Return the subtree at ``path``, or None if the path is invalid."""
    current = tree
    for index in path:
        if not isinstance(current, Node):
            return None
        if index < 0 or index >= len(current.children):
            return None
        current = current.children[index]
    return current


def get_by_path_mut(tree: Tree, path: Sequence[int]) -> Optional[Tree]:
    """Return the live subtree at ``path`` for in-place editing.

    Trees are mutable objects, so the returned subtree can be edited
    directly (``node.label = ...``, ``node.children.append(...)``,
    ``leaf.lines[0] = ...``). Use :func:`replace_at` to swap the whole
    subtree. No traversal of the same tree may be in progress meanwhile.
    """
    return get_by_path(tree, path)


def replace_at(tree: Tree, path: Sequence[int], subtree: Tree) -> Optional[Tree]:
    """Replace the subtree at ``path`` with ``subtree``.

    Args:
        tree: Tree to modify in place
        path: Position to replace
        subtree: New subtree (must not already belong to another tree)

    Returns:
        The resulting root: ``tree`` itself, or ``subtree`` when ``path`` is
        empty. None if the path is invalid, in which case nothing changes.
    """
    if not path:
        return subtree

    parent = get_by_path(tree, path[:-1])
    index = path[-1]
    if not isinstance(parent, Node) or index < 0 or index >= len(parent.children):
        return None

    parent.children[index] = subtree
    return tree


def get_path(tree: Tree, target: Tree) -> Optional[List[int]]:
    """Return the first pre-order path whose subtree is ``target`` itself.

    Matching is by identity: a deeply equal copy elsewhere is not found.
    Use :func:`treetext.ops.compare.is_subtree_of` for equality-based
    containment.
    """
    for path, subtree in walk(tree):
        if subtree is target:
            return list(path)
    return None


def flatten(tree: Tree) -> List[FlattenedEntry]:
    """List every label and leaf line in pre-order with its path.

    A multi-line leaf expands into one entry per line, all sharing the leaf's
    path. The entries line up one-to-one with the rendered lines.
    """
    entries: List[FlattenedEntry] = []
    for path, subtree in walk(tree):
        if isinstance(subtree, Leaf):
            entries.extend(FlattenedEntry(path, line, False) for line in subtree.lines)
        else:
            entries.append(FlattenedEntry(path, subtree.label, True))
    return entries
