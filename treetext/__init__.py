"""TreeText - render and manipulate hierarchical data as text.

TreeText models a tree as two kinds of positions, ``Node(label, children)``
and ``Leaf(lines)``, and provides:

━━━━━━━━━━━━━━━━━━━━━━━━━━
Rendering:      render_to_string, write_tree, lines
Traversal:      pre_order, post_order, level_order, nodes, leaves, walk
Transform:      map_nodes, map_leaves, filter_tree, prune
Paths:          get_by_path, replace_at, get_path, flatten
Search:         find_node, find_all_nodes, find_leaf, contains, path_to
Sort:           sort_by_label, sort_by_depth, sort_children
Compare/Merge:  eq_structure, diff, is_subtree_of, merge
Statistics:     stats, depth, width, node_count, leaf_count
━━━━━━━━━━━━━━━━━━━━━━━━━━

Example:
    >>> from treetext import Node, Leaf, render_to_string
    >>> tree = Node("root", [Leaf(["a"]), Node("sub", [Leaf(["b"])])])
    >>> print(render_to_string(tree), end="")
    root
    ├─ a
    └─ sub
       └─ b
"""

__version__ = "0.1.0"

from ._common.config import (
    RenderConfig,
    StyleConfig,
    TreeStyle,
    TraversalStrategy,
    TraversalConfig,
    MergeStrategy,
    InvalidConfigError,
)
from .core import (
    Node,
    Leaf,
    Tree,
    clone,
    TreeBuilder,
    TreeBuildError,
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
    Line,
    lines,
    to_lines,
    render_to_string,
    write_tree,
    to_dict,
    from_dict,
)
from .ops import (
    TreeStats,
    stats,
    depth,
    width,
    node_count,
    leaf_count,
    total_lines,
    find_node,
    find_all_nodes,
    find_leaf,
    contains,
    path_to,
    FlattenedEntry,
    get_by_path,
    get_by_path_mut,
    replace_at,
    get_path,
    flatten,
    sort_by_label,
    sort_by_depth,
    sort_children,
    map_nodes,
    map_leaves,
    filter_tree,
    prune,
    TreeDiff,
    OnlyInFirst,
    OnlyInSecond,
    DifferentContent,
    eq_structure,
    diff,
    is_subtree_of,
    merge,
)
from . import api

__all__ = [
    "__version__",
    # Config
    "RenderConfig",
    "StyleConfig",
    "TreeStyle",
    "TraversalStrategy",
    "TraversalConfig",
    "MergeStrategy",
    "InvalidConfigError",
    # Model and construction
    "Node",
    "Leaf",
    "Tree",
    "clone",
    "TreeBuilder",
    "TreeBuildError",
    "to_dict",
    "from_dict",
    # Traversal
    "TreeTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "pre_order",
    "post_order",
    "level_order",
    "nodes",
    "leaves",
    "walk",
    # Rendering
    "Line",
    "lines",
    "to_lines",
    "render_to_string",
    "write_tree",
    # Operations
    "TreeStats",
    "stats",
    "depth",
    "width",
    "node_count",
    "leaf_count",
    "total_lines",
    "find_node",
    "find_all_nodes",
    "find_leaf",
    "contains",
    "path_to",
    "FlattenedEntry",
    "get_by_path",
    "get_by_path_mut",
    "replace_at",
    "get_path",
    "flatten",
    "sort_by_label",
    "sort_by_depth",
    "sort_children",
    "map_nodes",
    "map_leaves",
    "filter_tree",
    "prune",
    "TreeDiff",
    "OnlyInFirst",
    "OnlyInSecond",
    "DifferentContent",
    "eq_structure",
    "diff",
    "is_subtree_of",
    "merge",
    "api",
]
