"""Common components shared across TreeText.

This internal package contains pure configuration code. It should NOT be
imported directly by users; everything here is re-exported from
``treetext``.

Important: This package must NEVER import from core or ops to avoid
circular dependencies.
"""

from .config import (
    RenderConfig,
    StyleConfig,
    TreeStyle,
    TraversalStrategy,
    TraversalConfig,
    MergeStrategy,
    InvalidConfigError,
    parse_strategy,
)

__all__ = [
    'RenderConfig',
    'StyleConfig',
    'TreeStyle',
    'TraversalStrategy',
    'TraversalConfig',
    'MergeStrategy',
    'InvalidConfigError',
    'parse_strategy',
]
