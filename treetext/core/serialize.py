"""Tagged plain-data form of a tree.

This is the boundary format handed to external codecs (JSON, YAML, ...).
Every position is tagged unambiguously:

- a node becomes ``{"node": label, "children": [...]}``
- a leaf becomes ``{"leaf": [line, ...]}``

Sequence order is preserved exactly, so ``from_dict(to_dict(t)) == t``.
Both directions use explicit stacks.
"""

from typing import Any, Dict, List, Tuple

from .tree import Leaf, Node, Tree


def to_dict(tree: Tree) -> Dict[str, Any]:
    """Convert a tree into nested dicts and lists."""
    if isinstance(tree, Leaf):
        return {"leaf": list(tree.lines)}

    root: Dict[str, Any] = {"node": tree.label, "children": []}
    stack: List[Tuple[Node, Dict[str, Any]]] = [(tree, root)]
    while stack:
        node, data = stack.pop()
        for child in node.children:
            if isinstance(child, Leaf):
                data["children"].append({"leaf": list(child.lines)})
            else:
                child_data = {"node": child.label, "children": []}
                data["children"].append(child_data)
                stack.append((child, child_data))
    return root


def from_dict(data: Dict[str, Any]) -> Tree:
    """Rebuild a tree from the form produced by :func:`to_dict`.

    Raises:
        ValueError: If a mapping is neither a tagged node nor a tagged leaf
    """
    root = _decode_position(data)
    stack: List[Tuple[Dict[str, Any], Tree]] = [(data, root)]
    while stack:
        source, target = stack.pop()
        if isinstance(target, Leaf):
            continue
        children = source.get("children", [])
        if not isinstance(children, list):
            raise ValueError(f"'children' of node {target.label!r} must be a list")
        for child_data in children:
            child = _decode_position(child_data)
            target.children.append(child)
            stack.append((child_data, child))
    return root


def _decode_position(data: Any) -> Tree:
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping, got {type(data).__name__}")
    if "node" in data:
        label = data["node"]
        if not isinstance(label, str):
            raise ValueError(f"Node label must be a string, got {type(label).__name__}")
        return Node(label, [])
    if "leaf" in data:
        lines = data["leaf"]
        if not isinstance(lines, list):
            raise ValueError("'leaf' must map to a list of lines")
        for line in lines:
            if not isinstance(line, str):
                raise ValueError(f"Leaf lines must be strings, got {type(line).__name__}")
        return Leaf(list(lines))
    raise ValueError(f"Mapping is neither a node nor a leaf: keys {sorted(data)}")
