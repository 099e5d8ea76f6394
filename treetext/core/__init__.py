"""Core components: the tree model and the engines that walk it."""

from .tree import Node, Leaf, Tree, trees_equal, clone, display_text
from .builder import TreeBuilder, TreeBuildError
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    pre_order,
    post_order,
    level_order,
    nodes,
    leaves,
    walk,
)
from .line_iter import Line, lines, to_lines
from .renderer import render_to_string, write_tree
from .serialize import to_dict, from_dict

__all__ = [
    'Node',
    'Leaf',
    'Tree',
    'trees_equal',
    'clone',
    'display_text',
    'TreeBuilder',
    'TreeBuildError',
    'TreeTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    'pre_order',
    'post_order',
    'level_order',
    'nodes',
    'leaves',
    'walk',
    'Line',
    'lines',
    'to_lines',
    'render_to_string',
    'write_tree',
    'to_dict',
    'from_dict',
]
