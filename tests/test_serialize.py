"""Tests for the tagged dict form used at codec boundaries."""

import json
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treetext import Node, Leaf, to_dict, from_dict
from treetext.testing import deep_chain


def test_to_dict(sample_tree):
    assert to_dict(sample_tree) == {
        "node": "root",
        "children": [
            {"leaf": ["a"]},
            {"node": "sub", "children": [{"leaf": ["b"]}]},
        ],
    }


def test_leaf_root():
    assert to_dict(Leaf(["x", "y"])) == {"leaf": ["x", "y"]}
    assert from_dict({"leaf": ["x", "y"]}) == Leaf(["x", "y"])


def test_round_trip(project_tree):
    assert from_dict(to_dict(project_tree)) == project_tree


def test_json_round_trip(project_tree):
    text = json.dumps(to_dict(project_tree))
    assert from_dict(json.loads(text)) == project_tree


def test_children_order_preserved():
    tree = Node("r", [Leaf([str(i)]) for i in range(10)])
    data = to_dict(tree)
    assert [child["leaf"][0] for child in data["children"]] == [str(i) for i in range(10)]


def test_missing_children_means_empty():
    assert from_dict({"node": "r"}) == Node.new("r")


def test_empty_leaf_kept():
    tree = Node("r", [Leaf([])])
    assert from_dict(to_dict(tree)) == tree


@pytest.mark.parametrize("bad", [
    [],
    "root",
    {"name": "r"},
    {"node": "r", "children": "nope"},
    {"node": "r", "children": [42]},
    {"leaf": "not a list"},
    {"node": None, "children": []},
    {"node": {"x": 1}},
    {"node": 7},
    {"leaf": [1, None]},
    {"node": "r", "children": [{"leaf": ["ok", 3]}]},
])
def test_rejects_malformed(bad):
    with pytest.raises(ValueError):
        from_dict(bad)


def test_deep_round_trip():
    tree = deep_chain(5000)
    assert from_dict(to_dict(tree)) == tree


def test_lines_are_not_coerced():
    data = {"node": "r", "children": [{"leaf": ["1", "None"]}]}
    tree = from_dict(data)
    assert tree == Node("r", [Leaf(["1", "None"])])
    assert to_dict(tree) == data
