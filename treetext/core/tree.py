"""Tree model for TreeText.

A tree is one of two variants:

- ``Node(label, children)``: an interior position with an ordered list of
  child trees.
- ``Leaf(lines)``: a terminal position holding one or more lines of text
  that render at a single tree position.

Each tree exclusively owns its children. Operations that build new trees
copy the parts they keep instead of sharing them, so no subtree ever has two
parents and cycles cannot form.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass(eq=False)
class Node:
    """Interior tree position: a label plus ordered children."""

    label: str
    children: List['Tree'] = field(default_factory=list)

    def __post_init__(self):
        self.children = list(self.children)

    @classmethod
    def new(cls, label: str) -> 'Node':
        """Create a node with no children."""
        return cls(label, [])

    @property
    def is_node(self) -> bool:
        return True

    @property
    def is_leaf(self) -> bool:
        return False

    @property
    def child_count(self) -> int:
        return len(self.children)

    def add_child(self, child: 'Tree') -> 'Node':
        """Append a child and return self for chaining."""
        self.children.append(child)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Node, Leaf)):
            return NotImplemented
        return trees_equal(self, other)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Node({self.label!r}, children={len(self.children)})"


@dataclass(eq=False)
class Leaf:
    """Terminal tree position holding lines of content."""

    lines: List[str] = field(default_factory=list)

    def __post_init__(self):
        if isinstance(self.lines, str):
            self.lines = [self.lines]
        else:
            self.lines = list(self.lines)

    @classmethod
    def single(cls, line: str) -> 'Leaf':
        """Create a leaf holding exactly one line."""
        return cls([line])

    @property
    def is_node(self) -> bool:
        return False

    @property
    def is_leaf(self) -> bool:
        return True

    @property
    def first_line(self) -> Optional[str]:
        return self.lines[0] if self.lines else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Node, Leaf)):
            return NotImplemented
        return trees_equal(self, other)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Leaf({self.lines!r})"


Tree = Union[Node, Leaf]


def trees_equal(a: Tree, b: Tree) -> bool:
    """Deep equality of structure and content.

    Uses an explicit stack of aligned pairs, so arbitrarily deep trees can be
    compared.
    """
    stack = [(a, b)]
    while stack:
        first, second = stack.pop()
        if first is second:
            continue
        if isinstance(first, Leaf):
            if not isinstance(second, Leaf) or first.lines != second.lines:
                return False
        elif isinstance(first, Node):
            if not isinstance(second, Node):
                return False
            if first.label != second.label or len(first.children) != len(second.children):
                return False
            stack.extend(zip(first.children, second.children))
        else:
            return False
    return True


def display_text(tree: Tree) -> str:
    """Text that stands for a position in diffs and sort keys.

    A node is represented by its label and a leaf by its first line (empty
    string for a leaf without lines).
    """
    if isinstance(tree, Node):
        return tree.label
    return tree.lines[0] if tree.lines else ""


def clone(tree: Tree) -> Tree:
    """Return a deep copy of ``tree`` that shares nothing with it."""
    if isinstance(tree, Leaf):
        return Leaf(list(tree.lines))

    root = Node(tree.label, [])
    stack = [(tree, root)]
    while stack:
        source, target = stack.pop()
        for child in source.children:
            if isinstance(child, Leaf):
                target.children.append(Leaf(list(child.lines)))
            else:
                copy = Node(child.label, [])
                target.children.append(copy)
                stack.append((child, copy))
    return root

