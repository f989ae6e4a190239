"""Tests for reduce_tree, fold_tree and the derived measures."""

import pytest

from rosetree import count, fold_tree, height, leaves, node, reduce_tree, singleton


class TestReduceTree:
    def test_sum(self, numbers):
        assert reduce_tree(lambda a, b: a + b, 0, numbers) == 10

    @pytest.mark.parametrize("initial", [0, 7, -3])
    def test_singleton(self, initial):
        combine = lambda v, acc: v * 2 - acc
        assert reduce_tree(combine, initial, singleton("i", 5)) == combine(5, initial)

    def test_preorder_left_to_right(self, menu):
        order = reduce_tree(lambda v, acc: acc + [v], [], menu)
        assert order == ["Home", "Products", "Laptops", "Phones", "About", "Team"]

    def test_accumulator_threaded_sequentially(self, numbers):
        # Non-commutative combine exposes the visiting order
        result = reduce_tree(lambda v, acc: acc * 10 + v, 0, numbers)
        assert result == 1234

    def test_each_node_once(self):
        tree = node("a", 1, [node("b", 1, [singleton("c", 1)]), singleton("d", 1)])
        assert reduce_tree(lambda v, acc: acc + v, 0, tree) == 4


class TestFoldTree:
    def test_sum(self, numbers):
        assert fold_tree(lambda v, results: v + sum(results), numbers) == 10

    def test_children_results_in_order(self, menu):
        rendered = fold_tree(
            lambda v, results: v + ("(" + " ".join(results) + ")" if results else ""),
            menu,
        )
        assert rendered == "Home(Products(Laptops Phones) About(Team))"


class TestMeasures:
    def test_count(self, numbers, menu):
        assert count(numbers) == 4
        assert count(menu) == 6
        assert count(singleton("a", 0)) == 1

    def test_height(self, numbers):
        assert height(numbers) == 3
        assert height(singleton("a", 0)) == 1

    def test_leaves(self, numbers, menu):
        assert leaves(numbers) == [2, 4]
        assert leaves(menu) == ["Laptops", "Phones", "Team"]
        assert leaves(singleton("a", 0)) == [0]

    def test_deep_chain(self):
        chain = singleton(0, 0)
        for i in range(1, 10_000):
            chain = node(i, i, [chain])
        assert height(chain) == 10_000
        assert leaves(chain) == [0]
