"""
Rose Tree: identity-aware rose trees for navigation hierarchies.

Every node holds an identifier, a value and an ordered tuple of children.
The identifier is independent of the value, so nodes of a menu-like
hierarchy can be addressed and spliced by id across transformations.

Trees are immutable: every operation returns a new tree, sharing the
untouched subtrees with its input.

Modules:
- nodes: the Node type and its constructors
- queries: accessors
- transformations: map, map2/zip, flatten, flat_map
- aggregation: pre-order reduce and bottom-up fold
- mutation: push_deep, insertion under every node with a given id
- lookup: scans by identifier
- display: rendering with rich

Example Usage:
    >>> from rosetree import node, singleton, push_deep, reduce_tree
    >>> menu = node("1", 1, [singleton("2", 2), node("3", 3, [singleton("4", 4)])])
    >>> reduce_tree(lambda v, acc: v + acc, 0, menu)
    10
    >>> push_deep("4", "10", 10, menu) == node(
    ...     "1", 1, [singleton("2", 2), node("3", 3, [node("4", 4, [singleton("10", 10)])])]
    ... )
    True
"""

from __future__ import annotations

from rosetree.types import A, Acc, B, C, Id, T, U

from rosetree.errors import NodeNotFoundError, RoseTreeError

from rosetree.nodes import Node, add_child, node, singleton

from rosetree.queries import (
    children,
    decompose,
    has_children,
    identifier,
    to_tuple,
    value,
)

from rosetree.transformations import (
    flat_map,
    flatten,
    keep_outer_id,
    map2,
    map_tree,
    zip_trees,
)

from rosetree.aggregation import count, fold_tree, height, leaves, reduce_tree

from rosetree.mutation import push_deep

from rosetree.lookup import contains, find, get, iter_levels, iter_nodes, path_to

from rosetree.display import node_label, print_tree, render, to_rich_tree

from rosetree.rose import Rose

__all__ = [
    # Types
    "Id",
    "T",
    "U",
    "A",
    "B",
    "C",
    "Acc",
    # Errors
    "RoseTreeError",
    "NodeNotFoundError",
    # Nodes
    "Node",
    "singleton",
    "node",
    "add_child",
    # Queries
    "identifier",
    "value",
    "children",
    "has_children",
    "decompose",
    "to_tuple",
    # Transforms
    "map_tree",
    "map2",
    "zip_trees",
    "flatten",
    "flat_map",
    "keep_outer_id",
    # Aggregation
    "reduce_tree",
    "fold_tree",
    "count",
    "height",
    "leaves",
    # Mutation
    "push_deep",
    # Lookup
    "iter_nodes",
    "iter_levels",
    "find",
    "get",
    "contains",
    "path_to",
    # Display
    "node_label",
    "to_rich_tree",
    "render",
    "print_tree",
    # Namespace
    "Rose",
]
