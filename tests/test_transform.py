"""Tests for map/filter/prune transforms."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treetext import Node, Leaf, clone, map_nodes, map_leaves, filter_tree, prune
from treetext.testing import sample_tree as build_sample_tree, deep_chain


def is_leaf_with(line):
    return lambda tree: isinstance(tree, Leaf) and line in tree.lines


def test_map_nodes(sample_tree):
    result = map_nodes(sample_tree, str.upper)
    assert result == Node("ROOT", [Leaf(["a"]), Node("SUB", [Leaf(["b"])])])
    # Input untouched
    assert sample_tree == build_sample_tree()


def test_map_leaves():
    tree = Node("r", [Leaf(["a", "b"]), Node("n", [Leaf(["c"])])])
    result = map_leaves(tree, lambda line: line + "!")
    assert result == Node("r", [Leaf(["a!", "b!"]), Node("n", [Leaf(["c!"])])])
    assert tree.children[0].lines == ["a", "b"]


def test_map_shares_nothing(sample_tree):
    result = map_leaves(sample_tree, lambda line: line)
    assert result == sample_tree
    assert result is not sample_tree
    result.children[0].lines.append("extra")
    assert sample_tree.children[0].lines == ["a"]


def test_map_on_leaf_root():
    assert map_leaves(Leaf(["x"]), str.upper) == Leaf(["X"])
    assert map_nodes(Leaf(["x"]), str.upper) == Leaf(["x"])


def test_filter_keeps_ancestors(project_tree):
    result = filter_tree(project_tree, is_leaf_with("io.py"))
    assert result == Node("project", [Node("src", [Node("util", [Leaf(["io.py"])])])])


def test_filter_matching_node_keeps_only_matching_descendants(project_tree):
    result = filter_tree(project_tree, lambda t: isinstance(t, Node) and t.label == "tests")
    assert result == Node("project", [Node("tests", [])])


def test_filter_nothing_survives(project_tree):
    assert filter_tree(project_tree, lambda t: False) is None


def test_filter_everything_survives(project_tree):
    result = filter_tree(project_tree, lambda t: True)
    assert result == project_tree
    assert result is not project_tree


def test_filter_predicate_sees_original_subtree():
    """A node's predicate sees its children before filtering."""
    tree = Node("r", [Node("keep", [Leaf(["x"]), Leaf(["y"])])])
    seen = {}

    def predicate(subtree):
        if isinstance(subtree, Node):
            seen[subtree.label] = len(subtree.children)
        return isinstance(subtree, Leaf) and "x" in subtree.lines

    filter_tree(tree, predicate)
    assert seen["keep"] == 2


def test_prune_leaf(project_tree):
    result = prune(project_tree, is_leaf_with("README"))
    assert [c.label for c in result.children if isinstance(c, Node)] == ["src", "tests"]
    assert len(result.children) == 2


def test_prune_all_leaves(project_tree):
    result = prune(project_tree, lambda t: isinstance(t, Leaf))
    assert result == Node("project", [Node("src", [Node("util", [])]), Node("tests", [])])


def test_prune_node_with_surviving_children(project_tree):
    """A matching node stays if any child survives pruning."""
    result = prune(project_tree, lambda t: isinstance(t, Node) and t.label == "util")
    assert result == project_tree


def test_prune_everything(project_tree):
    assert prune(project_tree, lambda t: True) is None


def test_prune_nothing(project_tree):
    assert prune(project_tree, lambda t: False) == project_tree


def test_clone_is_deep(project_tree):
    copy = clone(project_tree)
    assert copy == project_tree
    copy.children[0].label = "changed"
    assert project_tree.children[0].label == "src"


def test_transforms_on_deep_tree():
    tree = deep_chain(5000)
    result = map_nodes(tree, str.upper)
    assert result.label == "N0"
    assert filter_tree(tree, is_leaf_with("end")) == tree
