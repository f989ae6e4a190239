"""
Aggregations over the values of a tree.

Functions:
    reduce_tree(combine, initial, n) - Pre-order, left-to-right fold
    fold_tree(f, n)                  - Bottom-up fold over values and folded children
    count(n)                         - Number of nodes
    height(n)                        - Length of the longest root-to-leaf path (leaf = 1)
    leaves(n)                        - Values of the leaves, left to right
"""

from __future__ import annotations

from typing import Callable

from rosetree.functionals import depth_first_preorder, postorder_fold
from rosetree.nodes import Node
from rosetree.types import Acc, Id, T, U


def reduce_tree(
    combine: Callable[[T, Acc], Acc], initial: Acc, n: Node[Id, T]
) -> Acc:
    """
    Folds every value of the tree into an accumulator.

    The node's own value is combined first, then each child's whole subtree,
    left to right: node, child 1 subtree, child 2 subtree, ...

    Args:
        combine: Takes a value and the current accumulator, returns the new accumulator.
        initial: The starting accumulator.
        n: The tree to fold.

    Returns:
        The final accumulator.
    """
    acc = initial
    for current in depth_first_preorder(_children, n):
        acc = combine(current.value, acc)
    return acc


def fold_tree(f: Callable[[T, list[U]], U], n: Node[Id, T]) -> U:
    """
    Folds the tree bottom-up: f takes a node's value and the list of its
    children's results.
    """
    return postorder_fold(
        _children, lambda current, results: f(current.value, results), n
    )


def count(n: Node) -> int:
    return reduce_tree(lambda _, acc: acc + 1, 0, n)


def height(n: Node) -> int:
    return fold_tree(lambda _, heights: 1 + max(heights, default=0), n)


def leaves(n: Node[Id, T]) -> list[T]:
    """Return a list of all leaf values (nodes without children)."""
    return [
        current.value
        for current in depth_first_preorder(_children, n)
        if not current.children
    ]


def _children(n: Node) -> tuple[Node, ...]:
    return n.children
