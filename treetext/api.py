"""High-level API for TreeText.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the traverser classes and the
configuration objects for ease of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from ._common.config import RenderConfig, TraversalConfig, TraversalStrategy, TreeStyle, parse_strategy
from .core.line_iter import Line, lines
from .core.renderer import render_to_string
from .core.traverser import create_traverser, walk
from .core.tree import Leaf, Node, Tree
from .ops.stats import stats


def traverse_tree(
    tree: Tree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Tree], bool]] = None,
    exclude_filter: Optional[Callable[[Tree], bool]] = None,
) -> Iterator[Tree]:
    """Simple interface for tree traversal.

    Args:
        tree: Root of the traversal
        strategy: Traversal strategy (pre_order, post_order, level_order)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding positions
        include_filter: Function deciding whether a position is yielded
        exclude_filter: Function deciding whether a position is skipped

    Yields:
        Subtrees matching the criteria; filters never stop the walk from
        descending into a subtree

    Raises:
        ValueError: For an unknown strategy or inconsistent depth bounds
            (raised on first iteration)

    Example:
        >>> for subtree in traverse_tree(tree, "level_order", max_depth=1):
        ...     print(subtree)
    """
    config = TraversalConfig(
        strategy=parse_strategy(strategy),
        min_depth=min_depth,
        max_depth=max_depth,
        include_filter=include_filter,
        exclude_filter=exclude_filter,
    )

    errors = config.validate()
    if errors:
        raise ValueError(f"Invalid configuration: {'; '.join(errors)}")

    traverser = create_traverser(config.strategy)
    for subtree, _ in traverser.traverse(tree, config.max_depth, config.min_depth):
        if config.should_include(subtree):
            yield subtree


def count_nodes(tree: Tree, **kwargs) -> int:
    """Count positions (nodes and leaves) that match the traversal options.

    Args:
        tree: Tree to count
        **kwargs: Traversal options (see traverse_tree)
    """
    count = 0
    for _ in traverse_tree(tree, **kwargs):
        count += 1
    return count


def find_nodes(tree: Tree, predicate: Callable[[Tree], bool], **kwargs) -> Iterator[Tree]:
    """Yield positions matching ``predicate``.

    Args:
        tree: Tree to search
        predicate: Function that returns True for matching positions
        **kwargs: Traversal options (see traverse_tree)
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(tree, **kwargs)


def get_leaf_nodes(tree: Tree, **kwargs) -> Iterator[Leaf]:
    """Yield every leaf, honoring traversal options."""
    for subtree in traverse_tree(tree, **kwargs):
        if isinstance(subtree, Leaf):
            yield subtree


def get_tree_paths(tree: Tree) -> Iterator[Tuple[List[int], Tree]]:
    """Yield ``(path, subtree)`` for every position in pre-order."""
    for path, subtree in walk(tree):
        yield list(path), subtree


def render(
    tree: Tree,
    style: Union[TreeStyle, str] = TreeStyle.UNICODE,
    node_formatter: Optional[Callable[[str], str]] = None,
    leaf_formatter: Optional[Callable[[str], str]] = None,
    color: bool = False,
) -> str:
    """Render a tree with keyword options instead of a RenderConfig.

    Args:
        tree: Tree to render
        style: TreeStyle or its name ("unicode", "ascii", "box"; any case)
        node_formatter: Applied to each node label before display
        leaf_formatter: Applied to each leaf line before display
        color: Wrap labels and lines in ANSI colors

    Returns:
        The rendered text
    """
    if isinstance(style, str):
        style = style.lower()
    config = RenderConfig(
        style=TreeStyle(style),
        node_formatter=node_formatter,
        leaf_formatter=leaf_formatter,
        color=color,
    )
    return render_to_string(tree, config)


def collect_lines(tree: Tree, config: Optional[RenderConfig] = None) -> List[Line]:
    """Materialize the rendered lines of ``tree`` into a list."""
    return list(lines(tree, config))


def get_tree_stats(tree: Tree) -> Dict[str, Any]:
    """Get statistics about a tree as a dictionary.

    Returns:
        Dictionary with depth, width, node/leaf counts, total lines, the
        number of positions at each depth and the average branching factor
        of nodes

    Example:
        >>> summary = get_tree_stats(tree)
        >>> print(f"Leaves: {summary['leaf_count']}")
    """
    summary = stats(tree)
    result: Dict[str, Any] = {
        'depth': summary.depth,
        'width': summary.width,
        'node_count': summary.node_count,
        'leaf_count': summary.leaf_count,
        'total_lines': summary.total_lines,
        'depths': {},
    }

    child_total = 0
    for subtree, depth in create_traverser(TraversalStrategy.LEVEL_ORDER).traverse(tree):
        result['depths'][depth] = result['depths'].get(depth, 0) + 1
        if isinstance(subtree, Node):
            child_total += len(subtree.children)

    result['average_branching'] = (
        child_total / summary.node_count
        if summary.node_count > 0 else 0
    )
    return result
