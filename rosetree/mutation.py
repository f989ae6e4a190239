"""
Identity-directed insertion.
"""

from __future__ import annotations

import logging

from rosetree.functionals import postorder_fold
from rosetree.nodes import Node, add_child
from rosetree.types import Id, T

logger = logging.getLogger(__name__)


def push_deep(target_id: Id, new_id: Id, value: T, n: Node[Id, T]) -> Node[Id, T]:
    """
    Inserts a new leaf `(new_id, value)` as the first child of every node
    whose identifier equals `target_id`.

    The search covers the whole tree: it does not stop at the first match and
    still descends below matched nodes, so with duplicated identifiers (nested
    or not) every match receives its own copy of the leaf. Inserted leaves are
    not searched themselves.

    With no match, the result is a new tree equal to `n`.
    """
    matches = 0

    def rebuild(current: Node[Id, T], new_children: list[Node[Id, T]]) -> Node[Id, T]:
        nonlocal matches
        rebuilt = Node(current.identifier, current.value, tuple(new_children))
        if current.identifier == target_id:
            matches += 1
            return add_child(new_id, value, rebuilt)
        return rebuilt

    result = postorder_fold(lambda current: current.children, rebuild, n)
    logger.debug(f"push_deep: inserted {new_id} under {matches} node(s) with id {target_id}")
    return result
