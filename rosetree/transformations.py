"""
Structural transforms over identity-aware rose trees.

Key functions:
    map_tree(derive_id, transform, n)   - Same shape, new values and ids
    map2(derive_id, combine, na, nb)    - Positional combination of two trees
    zip_trees(derive_id, na, nb)        - map2 building (a, b) pairs
    flatten(combine_ids, n)             - Collapse a tree of trees
    flat_map(derive_id, produce, n)     - map_tree then flatten, keeping outer ids

Every transform returns a new tree and leaves its inputs untouched.
"""

from __future__ import annotations

import logging
from typing import Callable

from rosetree.functionals import postorder_fold
from rosetree.nodes import Node
from rosetree.types import A, B, C, Id, T, U

logger = logging.getLogger(__name__)


def map_tree(
    derive_id: Callable[[T], Id],
    transform: Callable[[T], U],
    n: Node[Id, T],
) -> Node[Id, U]:
    """
    Maps a function over every value of a tree, preserving its shape.

    Args:
        derive_id: Computes each new identifier from the *original* value.
        transform: Computes each new value from the original value.
        n: The tree to map over.

    Returns:
        A tree with the same number of children at every position, in the same order.
    """

    def rebuild(current: Node[Id, T], new_children: list[Node[Id, U]]) -> Node[Id, U]:
        return Node(
            derive_id(current.value), transform(current.value), tuple(new_children)
        )

    return postorder_fold(_children, rebuild, n)


def map2(
    derive_id: Callable[[A, B], Id],
    combine: Callable[[A, B], C],
    na: Node[Id, A],
    nb: Node[Id, B],
) -> Node[Id, C]:
    """
    Combines two trees position by position (by child index, not by identifier).

    When the two trees have a different number of children at some node, the
    result keeps only as many children as the shorter sequence: trailing
    children of the longer one are dropped.

    Args:
        derive_id: Computes the identifier of each combined node from both values.
        combine: Computes the value of each combined node from both values.
        na: Left tree.
        nb: Right tree.

    Returns:
        The combined tree.
    """

    def paired(pair: tuple[Node[Id, A], Node[Id, B]]):
        left, right = pair
        if len(left.children) != len(right.children):
            logger.debug(
                f"map2 truncates children of ({left.identifier}, {right.identifier}): "
                f"{len(left.children)} vs {len(right.children)}"
            )
        return zip(left.children, right.children)

    def rebuild(
        pair: tuple[Node[Id, A], Node[Id, B]], new_children: list[Node[Id, C]]
    ) -> Node[Id, C]:
        left, right = pair
        return Node(
            derive_id(left.value, right.value),
            combine(left.value, right.value),
            tuple(new_children),
        )

    return postorder_fold(paired, rebuild, (na, nb))


def zip_trees(
    derive_id: Callable[[A, B], Id],
    na: Node[Id, A],
    nb: Node[Id, B],
) -> Node[Id, tuple[A, B]]:
    """map2 with pairs as values. Same truncation rule."""
    return map2(derive_id, _pair, na, nb)


def flatten(
    combine_ids: Callable[[Id, Id], Id],
    n: Node[Id, Node[Id, A]],
) -> Node[Id, A]:
    """
    Collapses a tree whose values are trees into a single tree.

    For each outer node, the result has:
        - identifier: combine_ids(outer identifier, inner root identifier)
        - value: the inner root's value
        - children: the inner root's children, followed by the flattened
          outer children

    Inner children are reused as they are.
    """

    def rebuild(
        current: Node[Id, Node[Id, A]], new_children: list[Node[Id, A]]
    ) -> Node[Id, A]:
        inner = current.value
        return Node(
            combine_ids(current.identifier, inner.identifier),
            inner.value,
            inner.children + tuple(new_children),
        )

    return postorder_fold(_children, rebuild, n)


def keep_outer_id(outer: Id, inner: Id) -> Id:
    """Identifier combiner that discards the inner identifier."""
    return outer


def flat_map(
    derive_id: Callable[[A], Id],
    produce: Callable[[A], Node[Id, B]],
    n: Node[Id, A],
) -> Node[Id, B]:
    """
    Replaces every node by the tree `produce(value)`, spliced in place.

    Each resulting node keeps the identifier `derive_id(value)` of the node it
    replaces; the produced tree's children come before the node's own
    (flattened) children.
    """
    return flatten(keep_outer_id, map_tree(derive_id, produce, n))


def _children(n: Node) -> tuple[Node, ...]:
    return n.children


def _pair(a: A, b: B) -> tuple[A, B]:
    return a, b
