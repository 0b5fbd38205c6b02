from dataclasses import dataclass

import pytest

from dsa.stack import Stack


@dataclass(frozen=True)
class Item:
    value: str

    def __str__(self) -> str:
        return f"{{value:{self.value}}}"


CASES = {
    "only integers": ([1, 2, 3], [3, 2, 1], "[3] -> [2] -> [1]", 3),
    "only strings": (["a", "b", "c"], ["c", "b", "a"], "[c] -> [b] -> [a]", "c"),
    "only structs": (
        [Item("a"), Item("b"), Item("c")],
        [Item("c"), Item("b"), Item("a")],
        "[{value:c}] -> [{value:b}] -> [{value:a}]",
        Item("c"),
    ),
    "mixed types": (
        [1, "b", Item("c")],
        [Item("c"), "b", 1],
        "[{value:c}] -> [b] -> [1]",
        Item("c"),
    ),
}


@pytest.mark.parametrize(
    "to_push, to_pop, expected_string, expected_peek",
    list(CASES.values()),
    ids=list(CASES),
)
def test_stack(to_push, to_pop, expected_string, expected_peek):
    s = Stack()
    for item in to_push:
        s.push(item)

    assert str(s) == expected_string
    assert s.peek() == expected_peek
    assert s.is_empty() is False
    assert len(s) == len(to_push)

    for item in to_pop:
        assert s.pop() == item

    assert str(s) == "[]"
    assert s.pop() is None
    assert s.peek() is None
    assert s.is_empty() is True
    assert len(s) == 0


def test_peek_does_not_remove():
    s = Stack()
    s.push(5)
    assert s.peek() == 5
    assert s.peek() == 5
    assert len(s) == 1


def test_interleaved_operations_keep_lifo_order():
    s = Stack()
    s.push(1)
    s.push(2)
    assert s.pop() == 2
    s.push(3)
    assert [s.pop(), s.pop()] == [3, 1]
    assert s.pop() is None