#!/usr/bin/env python3
"""
Walk one tree in every order, then sort with the max-heap.

This example demonstrates:
- Building an array-backed tree
- The four traversal orders
- Bulk heap construction and popping
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from arraytreelib import MaxHeap, TraversalOrder, build_tree, get_tree_stats, traverse_tree


def main():
    tree = build_tree("abcdefghij")
    stats = get_tree_stats(tree)
    print(f"Tree of {stats['size']} nodes, height {stats['height']}")

    for order in TraversalOrder:
        values = " ".join(traverse_tree(tree, order))
        print(f"  {order.name:<12} {values}")

    heap = MaxHeap.of([10, 18, 20, 8, 2, 16, 14, 12, 4, 6])
    popped = []
    while heap:
        popped.append(heap.pop())
    print(f"Popped from heap: {popped}")


if __name__ == "__main__":
    main()
