"""Incremental line production for TreeText.

:func:`lines` produces the rendered output one :class:`Line` at a time, in
exact rendering order, without building the whole string. It is the engine
behind :mod:`treetext.core.renderer` and the primitive exporters build on.

Prefixes are computed incrementally. Each open node keeps the continuation
string its children inherit; a child's own prefix is that continuation plus
the connector for its position (last sibling or not), and its descendants
inherit the continuation extended by ``empty`` (last) or ``vertical`` (not
last). No line ever re-derives the layout of its ancestors.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .._common.config import RenderConfig, StyleConfig
from .tree import Leaf, Node, Tree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Line:
    """One rendered output line."""

    prefix: str       # Indentation and connector drawing
    content: str      # Formatted label or leaf line
    depth: int = 0    # Depth of the position this line belongs to
    is_last: bool = True  # Whether that position is its parent's last child

    @property
    def text(self) -> str:
        return f"{self.prefix}{self.content}"


def lines(tree: Tree, config: Optional[RenderConfig] = None) -> Iterator[Line]:
    """Lazily produce the rendered lines of ``tree``.

    Args:
        tree: Tree to render
        config: Rendering configuration (default: Unicode, no formatting)

    Returns:
        Iterator of Line values in rendering order

    Raises:
        InvalidConfigError: If the configuration is invalid (raised
            immediately, before any line is produced)
    """
    config = (config or RenderConfig()).ensure_valid()
    return _generate(tree, config, config.resolved_style())


def _generate(tree: Tree, config: RenderConfig, style: StyleConfig) -> Iterator[Line]:
    if isinstance(tree, Leaf):
        yield from _leaf_lines(tree, config, "", "", 0, True)
        return

    yield Line("", config.format_node(tree.label), 0, True)

    # Frames are [node, next_child_index, continuation, depth_of_children]
    stack: List[list] = []
    if tree.children:
        stack.append([tree, 0, "", 1])

    while stack:
        frame = stack[-1]
        node, index, continuation, depth = frame
        if index >= len(node.children):
            stack.pop()
            continue
        frame[1] = index + 1

        child = node.children[index]
        is_last = index == len(node.children) - 1
        prefix = continuation + style.get_branch(is_last)
        child_continuation = continuation + style.get_continuation(is_last)

        if isinstance(child, Node):
            yield Line(prefix, config.format_node(child.label), depth, is_last)
            if child.children:
                stack.append([child, 0, child_continuation, depth + 1])
        else:
            yield from _leaf_lines(child, config, prefix, child_continuation, depth, is_last)


def _leaf_lines(leaf: Leaf,
                config: RenderConfig,
                prefix: str,
                continuation: str,
                depth: int,
                is_last: bool) -> Iterator[Line]:
    if not leaf.lines:
        logger.debug("Skipping leaf without lines at depth %d", depth)
        return

    for position, text in enumerate(leaf.lines):
        # Only the first line carries the connector
        line_prefix = prefix if position == 0 else continuation
        yield Line(line_prefix, config.format_leaf(text), depth, is_last)


def to_lines(tree: Tree, config: Optional[RenderConfig] = None) -> List[str]:
    """Render ``tree`` into a list of strings, one per output line."""
    return [line.text for line in lines(tree, config)]
