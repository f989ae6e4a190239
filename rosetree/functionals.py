"""
Functionals for tree structures, parametrised by a children accessor.

All of them walk the tree with an explicit stack or queue, so the depth of a
tree is bounded by memory rather than by the interpreter's recursion limit.

Functions:
    depth_first_preorder(after, root)   - Node before its children, left to right
    breadth_first_preorder(after, root) - Level by level from the root
    postorder_fold(after, combine, root) - Bottom-up rebuild/fold of a tree
"""

from collections import deque
from typing import Callable, Iterable, Iterator, TypeVar

T = TypeVar("T")
U = TypeVar("U")


def depth_first_preorder(
    after: Callable[[T], Iterable[T]], root: T | None
) -> Iterator[T]:
    """
    Performs a depth-first preorder traversal of an object, yielding the
    current object before its children.

    Args:
        after: The function which returns the children of the current object
        root: The root object to traverse.

    Yields:
        T: Each instance in depth-first preorder.
    """
    if root is None:
        return
    stack = [root]
    while stack:
        current = stack.pop()
        yield current
        # Push in reverse to process left-to-right
        stack.extend(reversed(tuple(after(current))))


def breadth_first_preorder(
    after: Callable[[T], Iterable[T]], root: T | None
) -> Iterator[T]:
    """
    Performs a breadth-first preorder traversal of an object, yielding all
    instances level by level.

    Args:
        after: The function which returns the children of the current object
        root: The root object to traverse.

    Yields:
        T: Each instance in breadth-first preorder.
    """
    if root is None:
        return
    queue = deque([root])
    while queue:
        current = queue.popleft()
        yield current
        queue.extend(after(current))


def postorder_fold(
    after: Callable[[T], Iterable[T]],
    combine: Callable[[T, list[U]], U],
    root: T,
) -> U:
    """
    Folds a tree bottom-up: every node is combined with the results of its
    children, which are computed first and passed in left-to-right order.

    This is the iterative equivalent of

        combine(root, [postorder_fold(after, combine, c) for c in after(root)])

    and is the building block for every tree rebuild in the package.

    Args:
        after: Returns the children of a node. Called exactly once per node.
        combine: Builds the result for a node from the node and its children's results.
        root: The root of the tree.

    Returns:
        The result computed for the root.
    """
    # (node, children) where children is None until the node has been expanded
    stack: list[tuple[T, tuple[T, ...] | None]] = [(root, None)]
    results: list[U] = []
    while stack:
        current, kids = stack.pop()
        if kids is None:
            kids = tuple(after(current))
            stack.append((current, kids))
            stack.extend((child, None) for child in reversed(kids))
            continue
        if kids:
            child_results = results[-len(kids) :]
            del results[-len(kids) :]
        else:
            child_results = []
        results.append(combine(current, child_results))
    return results[0]
