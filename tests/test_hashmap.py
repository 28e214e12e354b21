import pytest

from rpp.hashmap import Map
from rpp.rng import Stream


def test_format_empty():
    assert str(Map()) == "Map[]"


def test_format_pairs():
    m = Map((1, 2), (3, 4))
    text = str(m)
    assert text in ("Map[{1 : 2}, {3 : 4}]", "Map[{3 : 4}, {1 : 2}]")
    expected = "Map[" + ", ".join(f"{{{k} : {v}}}" for k, v in m.items()) + "]"
    assert text == expected


def test_insert_and_get():
    m = Map((1, 2), (3, 4))
    assert len(m) == 2
    assert m.get(1) == 2
    assert m[3] == 4
    assert m.contains(1)
    assert 5 not in m


def test_missing_key_raises():
    m = Map()
    with pytest.raises(KeyError):
        m.get(1)
    m[1] = 1
    with pytest.raises(KeyError):
        m[2]
    with pytest.raises(KeyError):
        m.erase(2)


def test_try_get_and_try_erase():
    m = Map(("a", 1))
    assert m.try_get("a") == 1
    assert m.try_get("b") is None
    assert m.try_erase("a") is True
    assert m.try_erase("a") is False
    assert len(m) == 0


def test_replace_keeps_length():
    m = Map()
    m.insert("key", 1)
    m.insert("key", 2)
    assert len(m) == 1
    assert m["key"] == 2


def test_insert_returns_value():
    m = Map()
    assert m.insert(7, "seven") == "seven"


def test_default_growth():
    m = Map()
    for i in range(24):
        m[i] = i
    assert m.capacity() == 32
    m[24] = 24
    assert m.capacity() == 64
    assert all(m[i] == i for i in range(25))


def test_capacity_rounds_to_power_of_two():
    assert Map(capacity=10).capacity() == 16
    m = Map()
    m.reserve(100)
    assert m.capacity() == 128


def test_get_or_insert():
    m = Map()
    bucket = m.get_or_insert("x", list)
    bucket.append(1)
    assert m.get_or_insert("x", list) == [1]
    assert len(m) == 1


def test_clone_is_independent():
    m = Map((1, [1]), (2, [2]))
    c = m.clone()
    c[1].append(5)
    c[3] = [3]
    assert m[1] == [1]
    assert 3 not in m
    assert c.capacity() == m.capacity()
    assert dict(c.items()) == {1: [1, 5], 2: [2], 3: [3]}


def test_clear():
    m = Map((1, 1), (2, 2))
    m.clear()
    assert len(m) == 0
    assert 1 not in m
    m[1] = 3
    assert m[1] == 3


def test_delitem():
    m = Map((1, 1), (2, 2))
    del m[1]
    assert list(m) == [2]


def test_unhashable_key():
    m = Map()
    with pytest.raises(TypeError):
        m[[1]] = 2
    assert len(m) == 0
    assert list(m.items()) == []


def test_tuple_and_string_keys():
    m = Map()
    m[(1, "a")] = "pair"
    m["hello world"] = "text"
    assert m[(1, "a")] == "pair"
    assert m["hello world"] == "text"
    assert (1, "b") not in m


def test_random_operations_match_dict():
    rng = Stream(0)
    m = Map()
    reference = {}
    for _ in range(3000):
        key = rng.range(0, 500)
        if rng.coin_flip(0.3):
            assert m.try_erase(key) == (reference.pop(key, None) is not None)
        else:
            value = rng.range(0, 1000) + 1
            m[key] = value
            reference[key] = value
        assert len(m) == len(reference)
    assert dict(m.items()) == reference
    assert sorted(m) == sorted(reference)
    for key in range(500):
        assert m.try_get(key) == reference.get(key)