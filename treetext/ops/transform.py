"""Structure-preserving and structure-pruning transforms.

Each transform returns a brand new tree and leaves its input untouched. The
new tree is assembled bottom-up from a post-order traversal: every position
turns into its replacement (or ``None`` when dropped) once all of its
children have been handled, so no transform recurses.
"""

from typing import Callable, List, Optional

from ..core.traverser import post_order
from ..core.tree import Leaf, Node, Tree, clone

Predicate = Callable[[Tree], bool]


def _rebuild(tree: Tree,
             on_leaf: Callable[[Leaf], Optional[Tree]],
             on_node: Callable[[Node, List[Tree]], Optional[Tree]]) -> Optional[Tree]:
    results: List[Optional[Tree]] = []

    for subtree in post_order(tree):
        if isinstance(subtree, Leaf):
            results.append(on_leaf(subtree))
            continue

        count = len(subtree.children)
        kids = results[-count:] if count else []
        if count:
            del results[-count:]
        results.append(on_node(subtree, [kid for kid in kids if kid is not None]))

    return results[0]


def map_nodes(tree: Tree, func: Callable[[str], str]) -> Tree:
    """Return a copy with every node label replaced by ``func(label)``."""
    return _rebuild(
        tree,
        lambda leaf: Leaf(list(leaf.lines)),
        lambda node, kids: Node(func(node.label), kids),
    )


def map_leaves(tree: Tree, func: Callable[[str], str]) -> Tree:
    """Return a copy with every leaf line replaced by ``func(line)``."""
    return _rebuild(
        tree,
        lambda leaf: Leaf([func(line) for line in leaf.lines]),
        lambda node, kids: Node(node.label, kids),
    )


def filter_tree(tree: Tree, predicate: Predicate) -> Optional[Tree]:
    """Keep positions matching ``predicate`` plus the ancestors of any kept position.

    A leaf survives iff ``predicate(leaf)``. A node survives iff
    ``predicate(node)`` or at least one of its filtered children survives.
    The predicate sees the original (unfiltered) subtree.

    Returns:
        Filtered copy, or None if nothing survives
    """
    def on_leaf(leaf: Leaf) -> Optional[Tree]:
        return Leaf(list(leaf.lines)) if predicate(leaf) else None

    def on_node(node: Node, kids: List[Tree]) -> Optional[Tree]:
        if predicate(node) or kids:
            return Node(node.label, kids)
        return None

    return _rebuild(tree, on_leaf, on_node)


def prune(tree: Tree, predicate: Predicate) -> Optional[Tree]:
    """Drop positions matching ``predicate``, the complement of :func:`filter_tree`.

    A leaf is dropped iff ``predicate(leaf)``. A node is dropped iff
    ``predicate(node)`` and none of its pruned children survive.

    Returns:
        Pruned copy, or None if nothing survives
    """
    return filter_tree(tree, lambda subtree: not predicate(subtree))


__all__ = ['map_nodes', 'map_leaves', 'filter_tree', 'prune', 'clone']
