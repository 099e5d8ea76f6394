"""Structural operations over trees."""

from .stats import TreeStats, stats, depth, width, node_count, leaf_count, total_lines, depth_map
from .search import find_node, find_all_nodes, find_leaf, contains, path_to, find_with_path
from .path import FlattenedEntry, get_by_path, get_by_path_mut, replace_at, get_path, flatten
from .sort import sort_by_label, sort_by_depth, sort_children, sort_by_key
from .transform import map_nodes, map_leaves, filter_tree, prune
from .compare import (
    TreeDiff,
    OnlyInFirst,
    OnlyInSecond,
    DifferentContent,
    eq_structure,
    diff,
    is_subtree_of,
)
from .merge import merge

__all__ = [
    'TreeStats', 'stats', 'depth', 'width', 'node_count', 'leaf_count', 'total_lines', 'depth_map',
    'find_node', 'find_all_nodes', 'find_leaf', 'contains', 'path_to', 'find_with_path',
    'FlattenedEntry', 'get_by_path', 'get_by_path_mut', 'replace_at', 'get_path', 'flatten',
    'sort_by_label', 'sort_by_depth', 'sort_children', 'sort_by_key',
    'map_nodes', 'map_leaves', 'filter_tree', 'prune',
    'TreeDiff', 'OnlyInFirst', 'OnlyInSecond', 'DifferentContent',
    'eq_structure', 'diff', 'is_subtree_of',
    'merge',
]
