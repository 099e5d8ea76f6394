"""Tree traversal strategies for TreeText.

Traversers implement different algorithms for walking through a tree. All of
them keep their own stack or queue instead of recursing, so tree depth is
bounded only by available memory, and all of them are lazy: each ``next()``
resumes exactly where the previous one stopped.

An iterator must not outlive a mutation of the tree it walks. Changing a
tree while a traversal over it is in progress is a programming error and is
not detected.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple, Union

from .._common.config import TraversalStrategy, parse_strategy
from .tree import Leaf, Node, Tree

Path = Tuple[int, ...]


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers yield ``(subtree, depth)`` pairs where depth is relative to the
    root passed to :meth:`traverse`.
    """

    @abstractmethod
    def traverse(self,
                 root: Tree,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Tree, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting position for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding positions

        Yields:
            Tuples of (subtree, depth)
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a node before its children, children left to right. This is the
    order in which a tree renders.
    """

    def traverse(self,
                 root: Tree,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Tree, int]]:
        stack: List[Tuple[Tree, int]] = [(root, 0)]

        while stack:
            tree, depth = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (tree, depth)

            if isinstance(tree, Node) and self._should_explore(depth, max_depth):
                # Reversed so the leftmost child is popped first
                for child in reversed(tree.children):
                    stack.append((child, depth + 1))


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits all children (left to right) before their parent. Good for
    aggregating values bottom-up, such as subtree depth.
    """

    def traverse(self,
                 root: Tree,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Tree, int]]:
        # Entries are (tree, depth, expanded)
        stack: List[Tuple[Tree, int, bool]] = [(root, 0, False)]

        while stack:
            tree, depth, expanded = stack.pop()

            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (tree, depth)
                continue

            stack.append((tree, depth, True))
            if isinstance(tree, Node) and self._should_explore(depth, max_depth):
                for child in reversed(tree.children):
                    stack.append((child, depth + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits every position at depth N, left to right, before any position at
    depth N+1.
    """

    def traverse(self,
                 root: Tree,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Tree, int]]:
        queue: Deque[Tuple[Tree, int]] = deque([(root, 0)])

        while queue:
            tree, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (tree, depth)

            if isinstance(tree, Node) and self._should_explore(depth, max_depth):
                for child in tree.children:
                    queue.append((child, depth + 1))


def create_traverser(strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or name (pre_order, post_order, level_order, ...)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        TraversalStrategy.PRE_ORDER: PreOrderTraverser,
        TraversalStrategy.POST_ORDER: PostOrderTraverser,
        TraversalStrategy.LEVEL_ORDER: LevelOrderTraverser,
    }
    return strategies[parse_strategy(strategy)]()


# Plain iterators over subtrees

def pre_order(tree: Tree) -> Iterator[Tree]:
    """Yield every position, parent before children."""
    for subtree, _ in PreOrderTraverser().traverse(tree):
        yield subtree


def post_order(tree: Tree) -> Iterator[Tree]:
    """Yield every position, children before parent."""
    for subtree, _ in PostOrderTraverser().traverse(tree):
        yield subtree


def level_order(tree: Tree) -> Iterator[Tree]:
    """Yield every position breadth-first."""
    for subtree, _ in LevelOrderTraverser().traverse(tree):
        yield subtree


def nodes(tree: Tree) -> Iterator[Node]:
    """Yield only Node positions, in pre-order."""
    for subtree in pre_order(tree):
        if isinstance(subtree, Node):
            yield subtree


def leaves(tree: Tree) -> Iterator[Leaf]:
    """Yield only Leaf positions, in pre-order."""
    for subtree in pre_order(tree):
        if isinstance(subtree, Leaf):
            yield subtree


def walk(tree: Tree) -> Iterator[Tuple[Path, Tree]]:
    """Yield ``(path, subtree)`` for every position in pre-order.

    The path is the tuple of child indices leading from ``tree`` to the
    subtree; the root's path is ``()``.
    """
    stack: List[Tuple[Path, Tree]] = [((), tree)]

    while stack:
        path, subtree = stack.pop()
        yield path, subtree

        if isinstance(subtree, Node):
            for index in range(len(subtree.children) - 1, -1, -1):
                stack.append((path + (index,), subtree.children[index]))
