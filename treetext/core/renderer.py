"""Text rendering for TreeText.

Two entry points share the incremental line producer in
:mod:`treetext.core.line_iter`:

- :func:`render_to_string` returns the whole rendering as one string.
- :func:`write_tree` streams each line to a caller-supplied sink (anything
  with a ``write(str)`` method, such as an open file or ``io.StringIO``).

Errors raised by a sink propagate unchanged; nothing is retried.
"""

from typing import Optional, TextIO

from .._common.config import RenderConfig
from .line_iter import lines
from .tree import Tree


def render_to_string(tree: Tree, config: Optional[RenderConfig] = None) -> str:
    """Render a tree as indented text with connectors.

    Args:
        tree: Tree to render
        config: Rendering configuration (default: Unicode style)

    Returns:
        Rendered text; every line is terminated by ``config.line_ending``

    Example:
        >>> tree = Node("root", [Leaf(["a"]), Node("sub", [Leaf(["b"])])])
        >>> print(render_to_string(tree), end="")
        root
        ├─ a
        └─ sub
           └─ b
    """
    config = config or RenderConfig()
    ending = config.line_ending
    # Parts are gathered once and joined in a single allocation
    return "".join([f"{line.prefix}{line.content}{ending}" for line in lines(tree, config)])


def write_tree(sink: TextIO, tree: Tree, config: Optional[RenderConfig] = None) -> int:
    """Stream a tree's rendering to ``sink`` line by line.

    Args:
        sink: Object with a ``write(str)`` method
        tree: Tree to render
        config: Rendering configuration (default: Unicode style)

    Returns:
        Number of lines written

    Raises:
        Whatever ``sink.write`` raises, unchanged.
    """
    config = config or RenderConfig()
    ending = config.line_ending
    written = 0
    for line in lines(tree, config):
        sink.write(f"{line.prefix}{line.content}{ending}")
        written += 1
    return written
