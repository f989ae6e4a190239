"""
Terminal rendering of trees with rich.

Usage:
    print_tree(menu)              # ids and values, coloured when supported
    text = render(menu, show_ids=False)
"""

from __future__ import annotations

from io import StringIO
from typing import Callable, TypeAlias

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from rosetree.constants import GUIDE_STYLE, ID_SEPARATOR, ID_STYLE, VALUE_STYLE
from rosetree.nodes import Node

Label: TypeAlias = Callable[[Node], str | Text]


def node_label(n: Node, show_ids: bool = True) -> Text:
    """Default label: `identifier: value`, or just the value."""
    if not show_ids:
        return Text(str(n.value), style=VALUE_STYLE)
    return Text.assemble(
        (str(n.identifier), ID_STYLE),
        ID_SEPARATOR,
        (str(n.value), VALUE_STYLE),
    )


def to_rich_tree(
    n: Node,
    label: Label | None = None,
    show_ids: bool = True,
    guide_style: str = GUIDE_STYLE,
) -> Tree:
    """
    Converts a node into a rich Tree, children kept in order.

    Args:
        n: The tree to convert.
        label: Builds the label of each node. Defaults to `node_label`.
        show_ids: Whether the default label shows identifiers.
        guide_style: Style of the guide lines.
    """

    def make_label(current: Node) -> str | Text:
        if label is not None:
            return label(current)
        return node_label(current, show_ids)

    root = Tree(make_label(n), guide_style=guide_style)
    stack: list[tuple[Node, Tree]] = [(n, root)]
    while stack:
        current, branch = stack.pop()
        # rich keeps children in insertion order, so add before descending
        subtrees = [(child, branch.add(make_label(child))) for child in current.children]
        stack.extend(reversed(subtrees))
    return root


def render(
    n: Node,
    label: Label | None = None,
    show_ids: bool = True,
    width: int = 120,
) -> str:
    """Renders the tree to a plain string, without colours."""
    buffer = StringIO()
    console = Console(file=buffer, width=width, color_system=None, force_terminal=False)
    console.print(to_rich_tree(n, label=label, show_ids=show_ids))
    return buffer.getvalue()


def print_tree(
    n: Node,
    console: Console | None = None,
    label: Label | None = None,
    show_ids: bool = True,
) -> None:
    (console or Console()).print(to_rich_tree(n, label=label, show_ids=show_ids))
