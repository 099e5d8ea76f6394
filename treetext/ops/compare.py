"""Structural comparison of two trees.

Children are aligned by index, never matched by label. All comparisons use
explicit stacks of aligned pairs.
"""

from dataclasses import dataclass
from typing import List, Tuple, Union

from ..core.traverser import pre_order
from ..core.tree import Leaf, Node, Tree, display_text, trees_equal

Path = Tuple[int, ...]


@dataclass(frozen=True)
class OnlyInFirst:
    """Position present in the first tree only."""
    path: Path
    content: str


@dataclass(frozen=True)
class OnlyInSecond:
    """Position present in the second tree only."""
    path: Path
    content: str


@dataclass(frozen=True)
class DifferentContent:
    """Position present in both trees with different kind or content."""
    path: Path
    first: str
    second: str


TreeDiff = Union[OnlyInFirst, OnlyInSecond, DifferentContent]


def eq_structure(first: Tree, second: Tree) -> bool:
    """True if both trees have the same shape, ignoring labels and lines.

    At every aligned position both must be nodes with the same number of
    children, or both must be leaves.
    """
    stack = [(first, second)]
    while stack:
        a, b = stack.pop()
        if isinstance(a, Leaf) and isinstance(b, Leaf):
            continue
        if isinstance(a, Node) and isinstance(b, Node):
            if len(a.children) != len(b.children):
                return False
            stack.extend(zip(a.children, b.children))
            continue
        return False
    return True


def diff(first: Tree, second: Tree) -> List[TreeDiff]:
    """List positional differences between two trees, in pre-order.

    - Position only in ``first`` -> OnlyInFirst (its subtree is not expanded)
    - Position only in ``second`` -> OnlyInSecond
    - Nodes with different labels -> DifferentContent, then children compared
    - Leaves with different lines -> DifferentContent of their first lines
    - A node aligned with a leaf -> DifferentContent, not expanded

    One-sided entries carry the node label or the leaf's first line.
    """
    diffs: List[TreeDiff] = []
    # Work items: ("pair", a, b, path) | ("first", a, path) | ("second", b, path)
    stack: List[tuple] = [("pair", first, second, ())]

    while stack:
        item = stack.pop()
        kind = item[0]

        if kind == "first":
            _, tree, path = item
            diffs.append(OnlyInFirst(path, display_text(tree)))
            continue
        if kind == "second":
            _, tree, path = item
            diffs.append(OnlyInSecond(path, display_text(tree)))
            continue

        _, a, b, path = item
        if isinstance(a, Node) and isinstance(b, Node):
            if a.label != b.label:
                diffs.append(DifferentContent(path, a.label, b.label))

            pending = []
            for index in range(max(len(a.children), len(b.children))):
                child_path = path + (index,)
                if index < len(a.children) and index < len(b.children):
                    pending.append(("pair", a.children[index], b.children[index], child_path))
                elif index < len(a.children):
                    pending.append(("first", a.children[index], child_path))
                else:
                    pending.append(("second", b.children[index], child_path))
            # Reversed so index 0 is handled first
            stack.extend(reversed(pending))
        elif isinstance(a, Leaf) and isinstance(b, Leaf):
            if a.lines != b.lines:
                diffs.append(DifferentContent(path, display_text(a), display_text(b)))
        else:
            diffs.append(DifferentContent(path, display_text(a), display_text(b)))

    return diffs


def is_subtree_of(needle: Tree, haystack: Tree) -> bool:
    """True if ``needle`` deeply equals the subtree at some position of ``haystack``."""
    return any(trees_equal(needle, subtree) for subtree in pre_order(haystack))
