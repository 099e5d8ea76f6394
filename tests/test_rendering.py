"""Tests for text rendering: connector styles, formatters, color and sinks."""

import io
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treetext import (
    Node,
    Leaf,
    RenderConfig,
    StyleConfig,
    TreeStyle,
    InvalidConfigError,
    render_to_string,
    write_tree,
    lines,
    to_lines,
)


def test_unicode_is_default(sample_tree):
    assert render_to_string(sample_tree) == render_to_string(sample_tree, RenderConfig.unicode())


def test_ascii_style(sample_tree):
    output = render_to_string(sample_tree, RenderConfig.ascii())
    assert output == (
        "root\n"
        "+- a\n"
        "`- sub\n"
        "   `- b\n"
    )


def test_box_style_matches_unicode(sample_tree):
    box = render_to_string(sample_tree, RenderConfig(style=TreeStyle.BOX))
    assert box == render_to_string(sample_tree)


def test_custom_connectors(sample_tree):
    config = RenderConfig.custom(branch="|-- ", last="\\-- ", vertical="|   ", empty="    ")
    assert render_to_string(sample_tree, config) == (
        "root\n"
        "|-- a\n"
        "\\-- sub\n"
        "    \\-- b\n"
    )


def test_custom_style_config_instance(sample_tree):
    style = StyleConfig(branch="* ", last="* ", vertical="  ", empty="  ")
    output = render_to_string(sample_tree, RenderConfig(style=style))
    assert output == "root\n* a\n* sub\n  * b\n"


def test_multi_line_leaf_continuation():
    """Lines after the first get the continuation, not a connector."""
    tree = Node("root", [Leaf(["x", "y"]), Leaf(["z"])])
    assert render_to_string(tree) == (
        "root\n"
        "├─ x\n"
        "│  y\n"
        "└─ z\n"
    )


def test_multi_line_last_leaf():
    tree = Node("root", [Leaf(["x", "y", "w"])])
    assert render_to_string(tree) == "root\n└─ x\n   y\n   w\n"


def test_multi_line_leaf_nested_under_non_last():
    tree = Node("r", [Node("a", [Leaf(["1", "2"])]), Leaf(["z"])])
    assert to_lines(tree) == [
        "r",
        "├─ a",
        "│  └─ 1",
        "│     2",
        "└─ z",
    ]


def test_leaf_root():
    assert render_to_string(Leaf(["only"])) == "only\n"
    assert render_to_string(Leaf(["a", "b"])) == "a\nb\n"


def test_childless_node():
    assert render_to_string(Node.new("lonely")) == "lonely\n"


def test_formatters(sample_tree):
    config = RenderConfig(node_formatter=str.upper, leaf_formatter=lambda s: f"<{s}>")
    assert render_to_string(sample_tree, config) == (
        "ROOT\n"
        "├─ <a>\n"
        "└─ SUB\n"
        "   └─ <b>\n"
    )


def test_formatter_does_not_shift_prefixes():
    tree = Node("r", [Node("a", [Leaf(["x"])]), Leaf(["y"])])
    config = RenderConfig(node_formatter=lambda s: s * 10)
    fancy = [line.prefix for line in lines(tree, config)]
    plain = [line.prefix for line in lines(tree)]
    assert fancy == plain
    assert to_lines(tree, config)[1] == "├─ aaaaaaaaaa"


def test_color_wraps_content_only(sample_tree):
    output = render_to_string(sample_tree, RenderConfig(color=True))
    assert output == (
        "\033[94mroot\033[0m\n"
        "├─ \033[92ma\033[0m\n"
        "└─ \033[94msub\033[0m\n"
        "   └─ \033[92mb\033[0m\n"
    )


def test_line_ending(sample_tree):
    output = render_to_string(sample_tree, RenderConfig(line_ending="\r\n"))
    assert output.count("\r\n") == 4
    assert output.endswith("└─ b\r\n")


def test_invalid_style_rejected(sample_tree):
    with pytest.raises(InvalidConfigError):
        render_to_string(sample_tree, RenderConfig(style="fancy"))


def test_invalid_formatter_rejected(sample_tree):
    with pytest.raises(InvalidConfigError) as excinfo:
        render_to_string(sample_tree, RenderConfig(node_formatter=42))
    assert "node_formatter" in str(excinfo.value)


def test_invalid_config_is_value_error(sample_tree):
    with pytest.raises(ValueError):
        render_to_string(sample_tree, RenderConfig(line_ending=None))


class TestWriteTree:
    """Streaming rendering into a sink."""

    def test_matches_render_to_string(self, project_tree):
        sink = io.StringIO()
        count = write_tree(sink, project_tree)
        assert sink.getvalue() == render_to_string(project_tree)
        assert count == 10

    def test_one_write_per_line(self, sample_tree):
        writes = []

        class Recorder:
            def write(self, text):
                writes.append(text)

        write_tree(Recorder(), sample_tree)
        assert writes == ["root\n", "├─ a\n", "└─ sub\n", "   └─ b\n"]

    def test_sink_error_propagates(self, sample_tree):
        class FailingSink:
            def __init__(self):
                self.written = []

            def write(self, text):
                if len(self.written) == 2:
                    raise OSError("disk full")
                self.written.append(text)

        sink = FailingSink()
        with pytest.raises(OSError, match="disk full"):
            write_tree(sink, sample_tree)
        assert sink.written == ["root\n", "├─ a\n"]

    def test_invalid_config_writes_nothing(self, sample_tree):
        sink = io.StringIO()
        with pytest.raises(InvalidConfigError):
            write_tree(sink, sample_tree, RenderConfig(style=3))
        assert sink.getvalue() == ""

    def test_file_sink(self, tmp_path, sample_tree):
        target = tmp_path / "tree.txt"
        with open(target, "w", encoding="utf-8") as handle:
            write_tree(handle, sample_tree)
        assert target.read_text(encoding="utf-8") == render_to_string(sample_tree)
