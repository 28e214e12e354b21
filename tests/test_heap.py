import pytest

from rpp.heap import Heap


def _is_heap(items):
    return all(not items[i] < items[(i - 1) // 2] for i in range(1, len(items)))


def test_format_from_source_cases():
    assert str(Heap(1, 2)) == "Heap[1, 2]"
    assert str(Heap()) == "Heap[]"


def test_push_keeps_min_on_top():
    h = Heap(5, 3, 8, 1)
    assert h.top() == 1
    assert len(h) == 4
    assert _is_heap(list(h))


def test_pop_yields_sorted_order():
    values = [9, 4, 7, 1, 8, 2, 2, 6, 3, 5, 0]
    h = Heap(*values)
    out = [h.pop() for _ in range(len(values))]
    assert out == sorted(values)
    assert not h


def test_pop_rebuilds_internal_layout():
    h = Heap(1, 2, 3)
    assert h.pop() == 1
    assert list(h) == [2, 3]


def test_invariant_holds_after_each_pop():
    h = Heap(*[17, 3, 11, 5, 2, 13, 7, 19, 23, 1])
    while h:
        assert _is_heap(list(h))
        h.pop()
    assert len(h) == 0


def test_empty_heap_errors():
    h = Heap()
    with pytest.raises(IndexError):
        h.pop()
    with pytest.raises(IndexError):
        h.top()


def test_clear():
    h = Heap(1, 2, 3)
    h.clear()
    assert len(h) == 0
    assert str(h) == "Heap[]"


def test_clone_is_independent():
    h = Heap(3, 1, 2)
    c = h.clone()
    c.push(0)
    assert h.top() == 1
    assert c.top() == 0
    assert len(h) == 3
    assert len(c) == 4


def test_clone_uses_clone_method():
    class Item:
        def __init__(self, v):
            self.v = v
            self.cloned = False

        def __lt__(self, other):
            return self.v < other.v

        def clone(self):
            item = Item(self.v)
            item.cloned = True
            return item

    h = Heap(Item(2), Item(1))
    c = h.clone()
    assert [i.cloned for i in c] == [True, True]
    assert c.top().v == 1