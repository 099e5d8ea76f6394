"""Configuration system for TreeText.

This module defines how users specify rendering requirements (connector
style, formatters, color, line endings) along with the enums used to pick a
traversal order or a merge policy.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Union

logger = logging.getLogger(__name__)

# ANSI escapes used when color output is requested
BLUE = "\033[94m"
GREEN = "\033[92m"
RESET = "\033[0m"


class InvalidConfigError(ValueError):
    """Raised when a RenderConfig fails validation."""
    pass


class TreeStyle(Enum):
    """Built-in connector styles."""
    UNICODE = "unicode"     # ├─ └─ │
    ASCII = "ascii"         # +- `- |
    BOX = "box"             # Alias of UNICODE kept for familiarity


class TraversalStrategy(Enum):
    """Order in which a traversal visits tree positions."""
    PRE_ORDER = "pre_order"       # Parent before children
    POST_ORDER = "post_order"     # Children before parent
    LEVEL_ORDER = "level_order"   # Breadth-first, level by level


class MergeStrategy(Enum):
    """How two trees combine into one."""
    REPLACE = "replace"                 # Result is the second tree
    APPEND = "append"                   # Children of the second appended to the first
    MERGE_BY_LABEL = "merge_by_label"   # Same-label nodes merged recursively


@dataclass(frozen=True)
class StyleConfig:
    """Concrete connector strings used to draw prefixes.

    All four pieces should share one display width so that nested levels
    stay aligned; this is not enforced.
    """

    branch: str      # Connector for a child that has siblings after it
    last: str        # Connector for the last child
    vertical: str    # Continuation under a non-last ancestor
    empty: str       # Continuation under a last ancestor

    def get_branch(self, is_last: bool) -> str:
        """Return the connector for a child position."""
        return self.last if is_last else self.branch

    def get_continuation(self, is_last: bool) -> str:
        """Return what a child contributes to its descendants' prefixes."""
        return self.empty if is_last else self.vertical

    @classmethod
    def unicode(cls) -> 'StyleConfig':
        return cls(branch="├─ ", last="└─ ", vertical="│  ", empty="   ")

    @classmethod
    def ascii(cls) -> 'StyleConfig':
        return cls(branch="+- ", last="`- ", vertical="|  ", empty="   ")

    @classmethod
    def from_style(cls, style: TreeStyle) -> 'StyleConfig':
        """Resolve a built-in style to its connector strings."""
        if style is TreeStyle.ASCII:
            return cls.ascii()
        return cls.unicode()


@dataclass
class RenderConfig:
    """Complete configuration for rendering a tree to text.

    Formatters only change the displayed label/line; prefixes are computed
    before they run, so formatting never shifts indentation.
    """

    style: Union[TreeStyle, StyleConfig] = TreeStyle.UNICODE
    node_formatter: Optional[Callable[[str], str]] = None
    leaf_formatter: Optional[Callable[[str], str]] = None
    color: bool = False
    line_ending: str = "\n"

    # Convenience constructors for common configurations

    @classmethod
    def unicode(cls) -> 'RenderConfig':
        return cls(style=TreeStyle.UNICODE)

    @classmethod
    def ascii(cls) -> 'RenderConfig':
        return cls(style=TreeStyle.ASCII)

    @classmethod
    def custom(cls, branch: str, last: str, vertical: str, empty: str) -> 'RenderConfig':
        """Create a config drawing with caller-supplied connectors.

        Args:
            branch: Connector for non-last children
            last: Connector for the last child
            vertical: Continuation below a non-last ancestor
            empty: Continuation below a last ancestor

        Returns:
            RenderConfig using a custom StyleConfig
        """
        return cls(style=StyleConfig(branch=branch, last=last, vertical=vertical, empty=empty))

    def resolved_style(self) -> StyleConfig:
        """Return the concrete connector strings for this config."""
        if isinstance(self.style, StyleConfig):
            return self.style
        return StyleConfig.from_style(self.style)

    def format_node(self, label: str) -> str:
        text = self.node_formatter(label) if self.node_formatter else label
        if self.color:
            return f"{BLUE}{text}{RESET}"
        return text

    def format_leaf(self, line: str) -> str:
        text = self.leaf_formatter(line) if self.leaf_formatter else line
        if self.color:
            return f"{GREEN}{text}{RESET}"
        return text

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.style, (TreeStyle, StyleConfig)):
            errors.append(
                f"style must be a TreeStyle or StyleConfig, got {type(self.style).__name__}"
            )
        elif isinstance(self.style, StyleConfig):
            for name in ("branch", "last", "vertical", "empty"):
                if not isinstance(getattr(self.style, name), str):
                    errors.append(f"style.{name} must be a string")

        if self.node_formatter is not None and not callable(self.node_formatter):
            errors.append("node_formatter must be callable")

        if self.leaf_formatter is not None and not callable(self.leaf_formatter):
            errors.append("leaf_formatter must be callable")

        if not isinstance(self.line_ending, str):
            errors.append("line_ending must be a string")

        return errors

    def ensure_valid(self) -> 'RenderConfig':
        """Raise InvalidConfigError if validate() reports problems."""
        errors = self.validate()
        if errors:
            logger.warning("Rejected render configuration: %s", "; ".join(errors))
            raise InvalidConfigError(f"Invalid configuration: {'; '.join(errors)}")
        return self


@dataclass
class TraversalConfig:
    """What a high-level traversal should visit and yield."""

    strategy: TraversalStrategy = TraversalStrategy.PRE_ORDER
    min_depth: int = 0                          # Minimum depth to yield
    max_depth: Optional[int] = None             # Maximum depth to traverse
    include_filter: Optional[Callable[[Any], bool]] = None  # Yield only matches
    exclude_filter: Optional[Callable[[Any], bool]] = None  # Never yield matches

    def should_include(self, tree) -> bool:
        """Check if a position passes the filters (exclusion takes precedence)."""
        if self.exclude_filter and self.exclude_filter(tree):
            return False
        if self.include_filter:
            return self.include_filter(tree)
        return True

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.max_depth is not None:
            if self.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.max_depth < self.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        return errors


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse a traversal strategy from string or enum.

    Args:
        strategy: Strategy as enum or string

    Returns:
        TraversalStrategy enum value

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'pre': TraversalStrategy.PRE_ORDER,
        'pre_order': TraversalStrategy.PRE_ORDER,
        'dfs_pre': TraversalStrategy.PRE_ORDER,
        'post': TraversalStrategy.POST_ORDER,
        'post_order': TraversalStrategy.POST_ORDER,
        'dfs_post': TraversalStrategy.POST_ORDER,
        'level': TraversalStrategy.LEVEL_ORDER,
        'level_order': TraversalStrategy.LEVEL_ORDER,
        'bfs': TraversalStrategy.LEVEL_ORDER,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(
        f"Unknown traversal strategy: {strategy}. "
        f"Choose from: {', '.join(strategy_map.keys())}"
    )
