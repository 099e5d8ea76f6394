"""Test fixtures for TreeText consumers.

These builders produce trees with known shapes for use in test suites,
including randomly generated trees for property-style checks and very deep
chains for checking that nothing recurses.
"""

import itertools
import random
from typing import Optional

from ..core.tree import Leaf, Node, Tree


def sample_tree() -> Node:
    """Return the small reference tree used throughout the docs.

    Structure::

        root
        ├─ a
        └─ sub
           └─ b
    """
    return Node("root", [Leaf(["a"]), Node("sub", [Leaf(["b"])])])


def project_tree() -> Node:
    """Return a mid-sized tree mixing nodes, single- and multi-line leaves.

    Structure::

        project
        ├─ src
        │  ├─ main.py
        │  └─ util
        │     ├─ io.py
        │     └─ fmt.py
        ├─ README
        │  first line
        └─ tests
           └─ test_main.py
    """
    return Node("project", [
        Node("src", [
            Leaf(["main.py"]),
            Node("util", [Leaf(["io.py"]), Leaf(["fmt.py"])]),
        ]),
        Leaf(["README", "first line"]),
        Node("tests", [Leaf(["test_main.py"])]),
    ])


def deep_chain(depth: int, leaf_line: Optional[str] = "end") -> Node:
    """Return a single path of ``depth`` nested nodes.

    Args:
        depth: Number of nested nodes below the root
        leaf_line: Line of a leaf attached to the deepest node (None for no leaf)

    Returns:
        Root node ``n0`` whose tree has depth ``depth`` (plus one with a leaf)
    """
    root = Node("n0", [])
    current = root
    for index in range(1, depth + 1):
        child = Node(f"n{index}", [])
        current.children.append(child)
        current = child
    if leaf_line is not None:
        current.children.append(Leaf([leaf_line]))
    return root


def random_tree(seed: int = 0,
                max_depth: int = 4,
                max_children: int = 4,
                max_lines: int = 3) -> Tree:
    """Return a reproducible pseudo-random tree.

    Labels and lines are unique across the tree (``n<k>`` for nodes,
    ``l<k>-<i>`` for leaf lines), which keeps search results unambiguous.

    Args:
        seed: Seed for the random generator
        max_depth: Nodes are only created above this depth
        max_children: Upper bound on children per node
        max_lines: Upper bound on lines per leaf (at least one line each)
    """
    rng = random.Random(seed)
    counter = itertools.count(1)
    root = Node("n0", [])
    stack = [(root, 0)]

    while stack:
        node, level = stack.pop()
        for _ in range(rng.randint(0, max_children)):
            if level + 1 < max_depth and rng.random() < 0.5:
                child = Node(f"n{next(counter)}", [])
                stack.append((child, level + 1))
            else:
                number = next(counter)
                child = Leaf([f"l{number}-{i}" for i in range(rng.randint(1, max_lines))])
            node.children.append(child)

    return root
