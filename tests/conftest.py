"""Shared fixtures for rose tree tests."""

import pytest

from rosetree import Node, node, singleton


@pytest.fixture
def numbers() -> Node[str, int]:
    """
    Tree structure:
          1
         / \\
        2   3
            |
            4
    """
    return node("1", 1, [singleton("2", 2), node("3", 3, [singleton("4", 4)])])


@pytest.fixture
def menu() -> Node[str, str]:
    """A small navigation menu with unique ids."""
    return node(
        "root",
        "Home",
        [
            node(
                "products",
                "Products",
                [singleton("laptops", "Laptops"), singleton("phones", "Phones")],
            ),
            node("about", "About", [singleton("team", "Team")]),
        ],
    )
