"""Tests for push_deep."""

from rosetree import (
    children,
    count,
    identifier,
    iter_nodes,
    node,
    push_deep,
    singleton,
    value,
)


class TestPushDeep:
    def test_inserts_under_target(self, numbers):
        result = push_deep("4", "10", 10, numbers)
        expected = node(
            "1",
            1,
            [
                singleton("2", 2),
                node("3", 3, [node("4", 4, [singleton("10", 10)])]),
            ],
        )
        assert result == expected

    def test_new_child_is_first(self, numbers):
        result = push_deep("1", "new", 0, numbers)
        assert children(result)[0] == singleton("new", 0)
        assert children(result)[1:] == children(numbers)

    def test_no_match(self, numbers):
        result = push_deep("missing", "new", 0, numbers)
        assert result == numbers
        assert count(result) == count(numbers)

    def test_duplicate_ids_all_receive_child(self):
        tree = node("r", 0, [singleton("X", 1), node("a", 2, [singleton("X", 3)])])
        result = push_deep("X", "new", 99, tree)

        matched = [n for n in iter_nodes(result) if identifier(n) == "X"]
        assert len(matched) == 2
        for n in matched:
            assert children(n) == (singleton("new", 99),)
        assert count(result) == count(tree) + 2

    def test_nested_matches_both_receive_child(self):
        tree = node("X", "outer", [node("X", "inner", [])])
        result = push_deep("X", "new", "v", tree)

        assert [identifier(c) for c in children(result)] == ["new", "X"]
        inner = children(result)[1]
        assert value(inner) == "inner"
        assert children(inner) == (singleton("new", "v"),)

    def test_new_id_equal_to_target_is_not_searched(self):
        result = push_deep("X", "X", 1, singleton("X", 0))
        assert result == node("X", 0, [singleton("X", 1)])

    def test_input_untouched(self, numbers):
        before = node("1", 1, [singleton("2", 2), node("3", 3, [singleton("4", 4)])])
        push_deep("3", "new", 0, numbers)
        assert numbers == before

    def test_deep_chain(self):
        chain = singleton(0, 0)
        for i in range(1, 10_000):
            chain = node(i, i, [chain])
        result = push_deep(0, "bottom", -1, chain)
        assert count(result) == 10_001
