"""High-level API for ArrayTreeLib.

This module provides simple, functional interfaces for common tree and
heap operations. These functions wrap the object-oriented API for ease of
use in simple cases.
"""

import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Union
from .core.tree import BinaryTree
from .core.array_tree import BinaryTreeArray
from .core.heap import MaxHeap
from .core.traverser import create_traverser
from .core.errors import ConfigurationError
from .config import TraversalConfig, TraversalOrder

logger = logging.getLogger(__name__)


def build_tree(values: Optional[Iterable[Any]] = None) -> BinaryTreeArray:
    """Create an array-backed tree holding values in slot order.

    Example:
        >>> tree = build_tree("abc")
        >>> collect_values(tree, order="in")
        ['b', 'a', 'c']
    """
    return BinaryTreeArray(values)


def build_heap(values: Optional[Iterable[Any]] = None) -> MaxHeap:
    """Create a max-heap from values using the bottom-up bulk build."""
    return MaxHeap.of(values if values is not None else [])


def traverse_tree(
    tree: Union[BinaryTree, MaxHeap],
    order: Union[TraversalOrder, str] = TraversalOrder.PRE_ORDER,
    max_nodes: Optional[int] = None,
    include_filter: Optional[Callable[[Any], bool]] = None,
    config: Optional[TraversalConfig] = None,
) -> Iterator[Any]:
    """Simple interface for tree traversal.

    This is the primary high-level function for walking trees. It handles
    the common case of wanting to iterate over values without building
    traversal objects by hand.

    Args:
        tree: Tree to walk. A MaxHeap walks its underlying tree.
        order: Traversal order (pre, in, post, level)
        max_nodes: Stop after yielding this many values
        include_filter: Function deciding which values are yielded
        config: Complete TraversalConfig; overrides the other options

    Yields:
        Node values in the selected order

    Raises:
        ConfigurationError: If the configuration is invalid
        ValueError: If the order name is not recognized

    Example:
        >>> tree = build_tree(range(7))
        >>> list(traverse_tree(tree, "post", max_nodes=3))
        [3, 4, 1]
    """
    if config is None:
        config = TraversalConfig(
            order=TraversalOrder.parse(order),
            max_nodes=max_nodes,
            include_filter=include_filter,
        )

    config_errors = config.validate()
    if config_errors:
        raise ConfigurationError(
            f"Invalid configuration: {'; '.join(config_errors)}"
        )

    if isinstance(tree, MaxHeap):
        tree = tree.tree

    logger.debug("Traversing %d nodes in %s order", tree.size(), config.order.value)

    produced = 0
    for value in create_traverser(config.order, tree):
        if not config.check_node_limit(produced):
            break
        if not config.should_include(value):
            continue
        produced += 1
        yield value

    logger.debug("Traversal yielded %d values", produced)


def collect_values(
    tree: Union[BinaryTree, MaxHeap],
    order: Union[TraversalOrder, str] = TraversalOrder.PRE_ORDER,
    **kwargs
) -> List[Any]:
    """Traverse tree and return its values as a list.

    Args:
        tree: Tree to walk
        order: Traversal order
        **kwargs: Additional traversal options (see traverse_tree)
    """
    return list(traverse_tree(tree, order, **kwargs))


def count_nodes(tree: Union[BinaryTree, MaxHeap], **kwargs) -> int:
    """Count the values a traversal with these options would yield.

    Example:
        >>> count_nodes(build_tree(range(10)), include_filter=lambda v: v % 2)
        5
    """
    count = 0
    for _ in traverse_tree(tree, **kwargs):
        count += 1
    return count


def find_values(
    tree: Union[BinaryTree, MaxHeap],
    predicate: Callable[[Any], bool],
    **kwargs
) -> Iterator[Any]:
    """Find values that match a predicate.

    Args:
        tree: Tree to search
        predicate: Function that returns True for matching values
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Values that match the predicate, in traversal order
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(tree, **kwargs)


def heap_sort(values: Iterable[Any], descending: bool = True) -> List[Any]:
    """Sort values by popping a bulk-built max-heap.

    Args:
        values: Mutually comparable values
        descending: Largest first if True, smallest first otherwise

    Returns:
        New sorted list
    """
    heap = MaxHeap.of(values)
    result = []
    while heap:
        result.append(heap.pop())
    if not descending:
        result.reverse()
    return result


def get_tree_stats(tree: Union[BinaryTree, MaxHeap]) -> Dict[str, Any]:
    """Get structural statistics about a tree.

    Returns:
        Dictionary with:
        - size: Number of nodes
        - height: Depth of the deepest node (-1 for an empty tree)
        - leaf_count: Nodes without children
        - internal_count: Nodes with at least one child
    """
    if isinstance(tree, MaxHeap):
        tree = tree.tree

    stats = {
        'size': tree.size(),
        'height': -1,
        'leaf_count': 0,
        'internal_count': 0,
    }

    root = tree.get_root()
    if root is None:
        return stats

    # The leftmost descendant of the root sits on the bottom level
    stats['height'] = tree.get_depth(tree.leftmost_descendant(root))
    for key in tree.keys():
        if tree.is_leaf(key):
            stats['leaf_count'] += 1
        else:
            stats['internal_count'] += 1

    return stats
