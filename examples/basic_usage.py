#!/usr/bin/env python3
"""Demo script for everyday TreeText usage.

Builds a small project tree, renders it in the built-in styles, then
reshapes it with search, sort, filter, diff and merge.
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treetext import (
    Leaf,
    MergeStrategy,
    Node,
    RenderConfig,
    TreeBuilder,
    diff,
    filter_tree,
    merge,
    path_to,
    render_to_string,
    sort_by_label,
    stats,
    write_tree,
)


def build_project() -> Node:
    return (TreeBuilder()
            .node("project")
                .node("src")
                    .leaf("main.py")
                    .leaf("cli.py")
                .end()
                .leaf_lines(["README.md", "  usage notes"])
                .node("tests")
                    .leaf("test_main.py")
                .end()
            .build())


def demo_rendering(tree: Node):
    """Show the built-in connector styles and formatters."""
    print("\n=== Rendering ===")
    print(render_to_string(tree), end="")
    print()
    print(render_to_string(tree, RenderConfig.ascii()), end="")
    print()
    config = RenderConfig(node_formatter=lambda label: f"{label}/", color=sys.stdout.isatty())
    write_tree(sys.stdout, tree, config)


def demo_structure(tree: Node):
    """Show statistics, search and in-place sorting."""
    print("\n=== Structure ===")
    summary = stats(tree)
    print(f"depth={summary.depth} width={summary.width} "
          f"nodes={summary.node_count} leaves={summary.leaf_count}")
    print(f"path to cli.py: {path_to(tree, 'cli.py')}")

    sort_by_label(tree)
    print(render_to_string(tree), end="")


def demo_reshaping(tree: Node):
    """Show filtering, diffing and merging."""
    print("\n=== Reshaping ===")
    python_only = filter_tree(
        tree, lambda t: isinstance(t, Leaf) and t.lines[0].endswith(".py")
    )
    print(render_to_string(python_only), end="")

    for change in diff(tree, python_only):
        print(f"  {change}")

    extra = Node("project", [Node("docs", [Leaf(["index.md"])]), Node("src", [Leaf(["util.py"])])])
    merged = merge(tree, extra, MergeStrategy.MERGE_BY_LABEL)
    print(render_to_string(merged), end="")


def main():
    tree = build_project()
    demo_rendering(tree)
    demo_structure(tree)
    demo_reshaping(tree)


if __name__ == "__main__":
    main()
