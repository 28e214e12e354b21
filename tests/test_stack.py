import pytest

from rpp.stack import Stack


def test_format_from_source_cases():
    assert str(Stack(1, 2)) == "Stack[1, 2]"
    assert str(Stack()) == "Stack[]"


def test_push_pop_is_lifo():
    s = Stack()
    assert s.push(1) == 1
    s.push(2)
    s.push(3)
    assert s.top() == 3
    assert [s.pop(), s.pop(), s.pop()] == [3, 2, 1]
    assert not s


def test_iteration_bottom_to_top():
    s = Stack(1, 2)
    s.push(3)
    assert list(s) == [1, 2, 3]
    assert len(s) == 3


def test_empty_stack_errors():
    s = Stack()
    with pytest.raises(IndexError):
        s.pop()
    with pytest.raises(IndexError):
        s.top()


def test_clear():
    s = Stack(1, 2, 3)
    s.clear()
    assert len(s) == 0
    assert str(s) == "Stack[]"


def test_clone_is_independent():
    s = Stack([1], [2])
    c = s.clone()
    c.top().append(9)
    c.push([3])
    assert list(s) == [[1], [2]]
    assert list(c) == [[1], [2, 9], [3]]


def test_clone_uses_clone_method():
    class Item:
        def __init__(self, tag):
            self.tag = tag

        def clone(self):
            return Item(self.tag + "'")

    c = Stack(Item("a"), Item("b")).clone()
    assert [i.tag for i in c] == ["a'", "b'"]