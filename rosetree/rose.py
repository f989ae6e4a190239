"""
Implements the `Rose` namespace: the whole rose tree algebra under its
short names (`id`, `root`, `map`, `zip`, `reduce`, ...) without shadowing
the builtins at module level.

    >>> from rosetree import Rose
    >>> menu = Rose.add_child("help", "Help", Rose.singleton("root", "Menu"))
    >>> Rose.reduce(lambda v, acc: acc + [v], [], menu)
    ['Menu', 'Help']
"""

from rosetree import aggregation, lookup, mutation, nodes, queries, transformations


class Rose:
    # Construction
    singleton = staticmethod(nodes.singleton)
    node = staticmethod(nodes.node)
    add_child = staticmethod(nodes.add_child)

    # Queries
    id = staticmethod(queries.identifier)
    root = staticmethod(queries.value)
    value = staticmethod(queries.value)
    children = staticmethod(queries.children)
    has_children = staticmethod(queries.has_children)
    decompose = staticmethod(queries.decompose)
    to_tuple = staticmethod(queries.to_tuple)

    # Transforms
    map = staticmethod(transformations.map_tree)
    map2 = staticmethod(transformations.map2)
    zip = staticmethod(transformations.zip_trees)
    flatten = staticmethod(transformations.flatten)
    flat_map = staticmethod(transformations.flat_map)

    # Aggregation
    reduce = staticmethod(aggregation.reduce_tree)
    fold = staticmethod(aggregation.fold_tree)
    count = staticmethod(aggregation.count)
    height = staticmethod(aggregation.height)
    leaves = staticmethod(aggregation.leaves)

    # Identity
    push_deep = staticmethod(mutation.push_deep)
    breadth_first = staticmethod(lookup.iter_levels)
    find = staticmethod(lookup.find)
    get = staticmethod(lookup.get)
    contains = staticmethod(lookup.contains)
    path_to = staticmethod(lookup.path_to)

    @staticmethod
    def is_leaf(rose_tree: nodes.Node) -> bool:
        return not queries.has_children(rose_tree)
