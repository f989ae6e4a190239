"""
Lookups by identifier.

There is no index: every lookup is a pre-order scan of the tree, and the
first match in pre-order wins when identifiers are duplicated.

Functions:
    iter_nodes(n)          - All nodes, pre-order
    iter_levels(n)         - All nodes, level by level from the root
    find(target_id, n)     - First matching node or None
    get(target_id, n)      - First matching node, raises NodeNotFoundError
    contains(target_id, n) - Whether some node matches
    path_to(target_id, n)  - Identifiers from the root down to the first match
"""

from __future__ import annotations

import logging
from typing import Iterator

from rosetree.errors import NodeNotFoundError
from rosetree.functionals import breadth_first_preorder, depth_first_preorder
from rosetree.nodes import Node
from rosetree.types import Id, T

logger = logging.getLogger(__name__)


def iter_nodes(n: Node[Id, T]) -> Iterator[Node[Id, T]]:
    return depth_first_preorder(lambda current: current.children, n)


def iter_levels(n: Node[Id, T]) -> Iterator[Node[Id, T]]:
    """Breadth-first: the root, then its children, then their children, ..."""
    return breadth_first_preorder(lambda current: current.children, n)


def find(target_id: Id, n: Node[Id, T]) -> Node[Id, T] | None:
    for current in iter_nodes(n):
        if current.identifier == target_id:
            return current
    return None


def get(target_id: Id, n: Node[Id, T]) -> Node[Id, T]:
    """
    Returns the first node whose identifier equals `target_id`.

    Raises:
        NodeNotFoundError: If no node matches.
    """
    found = find(target_id, n)
    if found is None:
        logger.debug(f"get: no node with id {target_id} under {n.identifier}")
        raise NodeNotFoundError(target_id)
    return found


def contains(target_id: Id, n: Node[Id, T]) -> bool:
    return find(target_id, n) is not None


def path_to(target_id: Id, n: Node[Id, T]) -> tuple[Id, ...] | None:
    """
    Returns the identifiers from the root to the first pre-order match,
    both included (a breadcrumb trail), or None if nothing matches.
    """
    # visited[i] = (identifier, index of the parent in visited)
    visited: list[tuple[Id, int]] = []
    stack: list[tuple[Node[Id, T], int]] = [(n, -1)]
    while stack:
        current, parent = stack.pop()
        if current.identifier == target_id:
            path = [current.identifier]
            while parent >= 0:
                ancestor, parent = visited[parent]
                path.append(ancestor)
            return tuple(reversed(path))
        visited.append((current.identifier, parent))
        here = len(visited) - 1
        stack.extend((child, here) for child in reversed(current.children))
    return None
