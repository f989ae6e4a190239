"""
Node type and constructors for identity-aware rose trees.

A node carries an identifier, a value and an ordered tuple of child nodes.
The identifier is independent of the value, so nodes can be addressed by id
across transformations that rewrite values.

Constructors:
    singleton(id, value)              - Leaf node
    node(id, value, children)         - Node with pre-built children
    add_child(child_id, value, parent) - Parent with a new leaf prepended
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterable

from rosetree.functionals import postorder_fold
from rosetree.types import Id, T


@dataclass(frozen=True)
class Node(Generic[Id, T]):
    """
    Immutable rose tree node.

    Equality and hashing are structural (identifier, value and children, in
    order). Any iterable of children is stored as a tuple. Supports
    destructuring with `match`:

        match tree:
            case Node(identifier, value, ()):
                ...  # leaf
    """

    identifier: Id
    value: T
    children: tuple[Node[Id, T], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return False
        # Pairwise walk instead of recursive tuple comparison, deep trees stay comparable
        stack: list[tuple[Node, Node]] = [(self, other)]
        while stack:
            left, right = stack.pop()
            if left is right:
                continue
            if (
                left.identifier != right.identifier
                or left.value != right.value
                or len(left.children) != len(right.children)
            ):
                return False
            stack.extend(zip(left.children, right.children))
        return True

    def __hash__(self) -> int:
        return postorder_fold(
            _children,
            lambda n, hashes: hash((n.identifier, n.value, tuple(hashes))),
            self,
        )

    def decompose(self) -> tuple[Id, T, tuple[Node[Id, T], ...]]:
        """Returns (identifier, value, children)."""
        return self.identifier, self.value, self.children

    def __str__(self) -> str:
        def show(n: Node, shown: list[str]) -> str:
            if not shown:
                return f"{n.identifier}:{n.value}"
            return f"{n.identifier}:{n.value}[{', '.join(shown)}]"

        return postorder_fold(_children, show, self)

    def __repr__(self) -> str:
        def show(n: Node, shown: list[str]) -> str:
            trailing = "," if len(shown) == 1 else ""
            return (
                f"Node(identifier={n.identifier!r}, value={n.value!r}, "
                f"children=({', '.join(shown)}{trailing}))"
            )

        return postorder_fold(_children, show, self)


def _children(n: Node) -> tuple[Node, ...]:
    return n.children


def singleton(identifier: Id, value: T) -> Node[Id, T]:
    """Creates a leaf node."""
    return Node(identifier, value)


def node(
    identifier: Id, value: T, children: Iterable[Node[Id, T]]
) -> Node[Id, T]:
    """
    Creates a node with the given children, kept in the given order.

    No validation is made: duplicate identifiers among the children are allowed.
    """
    return Node(identifier, value, tuple(children))


def add_child(child_id: Id, child_value: T, parent: Node[Id, T]) -> Node[Id, T]:
    """
    Returns `parent` with a new leaf prepended to its children.

    The most recently added child is always the first one. Existing children
    are shared with the original parent, not copied.
    """
    return Node(
        parent.identifier,
        parent.value,
        (singleton(child_id, child_value),) + parent.children,
    )
