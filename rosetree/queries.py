"""
Query accessors. All of them are total projections of a node.
"""

from __future__ import annotations

from rosetree.nodes import Node
from rosetree.types import Id, T


def identifier(n: Node[Id, T]) -> Id:
    return n.identifier


def value(n: Node[Id, T]) -> T:
    return n.value


def children(n: Node[Id, T]) -> tuple[Node[Id, T], ...]:
    return n.children


def has_children(n: Node[Id, T]) -> bool:
    """True iff the node is not a leaf."""
    return len(n.children) > 0


def decompose(n: Node[Id, T]) -> tuple[Id, T, tuple[Node[Id, T], ...]]:
    """Returns (identifier, value, children) in one call."""
    return n.decompose()


# Tuple view of a node
to_tuple = decompose
