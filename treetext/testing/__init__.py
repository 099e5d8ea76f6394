"""Testing utilities for TreeText consumers."""

from .fixtures import sample_tree, project_tree, deep_chain, random_tree

__all__ = ['sample_tree', 'project_tree', 'deep_chain', 'random_tree']
