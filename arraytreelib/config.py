"""Configuration system for ArrayTreeLib.

This module defines how users specify their traversal requirements:
which order to walk the tree in, how many values to produce, and which
values to keep.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Union


class TraversalOrder(Enum):
    """Order in which a traversal visits the nodes of a binary tree."""
    PRE_ORDER = "pre"       # Node, left subtree, right subtree
    IN_ORDER = "in"         # Left subtree, node, right subtree
    POST_ORDER = "post"     # Left subtree, right subtree, node
    LEVEL_ORDER = "level"   # Level by level, left to right

    @classmethod
    def parse(cls, order: Union['TraversalOrder', str]) -> 'TraversalOrder':
        """Resolve an order given as a member or a case-insensitive name.

        Args:
            order: TraversalOrder member, value ("pre") or alias
                ("pre_order", "preorder", "PRE_ORDER", ...)

        Returns:
            Matching TraversalOrder member

        Raises:
            ValueError: If the name is not recognized
        """
        if isinstance(order, cls):
            return order

        aliases = {}
        for member in cls:
            aliases[member.value] = member
            aliases[member.name.lower()] = member
            aliases[member.name.lower().replace('_', '')] = member

        order_lower = str(order).lower()
        if order_lower not in aliases:
            raise ValueError(
                f"Unknown traversal order: {order}. "
                f"Choose from: {', '.join(aliases.keys())}"
            )
        return aliases[order_lower]


@dataclass
class TraversalConfig:
    """Complete configuration for a traversal through the high-level API.

    Filtering happens before counting: values rejected by include_filter
    do not count toward max_nodes.
    """

    order: TraversalOrder = TraversalOrder.PRE_ORDER
    max_nodes: Optional[int] = None                           # Stop after this many values
    include_filter: Optional[Callable[[Any], bool]] = None    # Keep values it accepts

    @classmethod
    def pre_order(cls, **kwargs) -> 'TraversalConfig':
        return cls(order=TraversalOrder.PRE_ORDER, **kwargs)

    @classmethod
    def in_order(cls, **kwargs) -> 'TraversalConfig':
        return cls(order=TraversalOrder.IN_ORDER, **kwargs)

    @classmethod
    def post_order(cls, **kwargs) -> 'TraversalConfig':
        return cls(order=TraversalOrder.POST_ORDER, **kwargs)

    @classmethod
    def level_order(cls, **kwargs) -> 'TraversalConfig':
        return cls(order=TraversalOrder.LEVEL_ORDER, **kwargs)

    def should_include(self, value: Any) -> bool:
        """Check if a value passes the include filter."""
        if self.include_filter is None:
            return True
        return bool(self.include_filter(value))

    def check_node_limit(self, node_count: int) -> bool:
        """Check if another value may be produced after node_count values.

        Returns:
            True if within limits or no limit set
        """
        if self.max_nodes is None:
            return True
        return node_count < self.max_nodes

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.order, TraversalOrder):
            errors.append(f"order must be a TraversalOrder, got {self.order!r}")

        if self.max_nodes is not None:
            if isinstance(self.max_nodes, bool) or not isinstance(self.max_nodes, int):
                errors.append("max_nodes must be an integer")
            elif self.max_nodes <= 0:
                errors.append("max_nodes must be positive")

        if self.include_filter is not None and not callable(self.include_filter):
            errors.append("include_filter must be callable")

        return errors
