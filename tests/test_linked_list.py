import pytest
from hypothesis import given, strategies as st

from ftlib.linked_list import LinkedList


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_init_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3
    assert lst.last() == "c"


def test_push_front_and_back():
    lst = LinkedList()
    lst.push_back(2)
    lst.push_front(1)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]
    assert lst.last() == 3


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    lst.push_front("x")
    assert lst.last() == "x"
    assert len(lst) == 1


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(lst) == 0
    assert lst.last() is None


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_push_after_clear():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.push_back(5)
    assert list(lst) == [5]
    assert lst.last() == 5


def test_for_each_visits_all():
    seen = []
    lst = LinkedList(["p", "q"])
    lst.for_each(seen.append)
    assert seen == ["p", "q"]


def test_map_returns_new_list():
    lst = LinkedList(["ab", "c"])
    mapped = lst.map(str.upper)
    assert list(mapped) == ["AB", "C"]
    assert list(lst) == ["ab", "c"]


def test_map_failure_deletes_partial_result():
    deleted = []

    def func(value):
        if value == "bad":
            raise RuntimeError("boom")
        return value * 2

    lst = LinkedList(["a", "b", "bad", "c"])
    with pytest.raises(RuntimeError):
        lst.map(func, deleted.append)
    assert deleted == ["aa", "bb"]


def test_remove_head():
    lst = LinkedList(["a", "b", "c"])
    assert lst.remove("a") is True
    assert list(lst) == ["b", "c"]
    assert len(lst) == 2


def test_remove_tail_updates_last():
    lst = LinkedList(["a", "b", "c"])
    assert lst.remove("c") is True
    assert lst.last() == "b"
    lst.push_back("d")
    assert list(lst) == ["a", "b", "d"]


def test_remove_only_first_match_and_calls_delete():
    deleted = []
    lst = LinkedList(["x", "y", "x"])
    assert lst.remove("x", deleted.append) is True
    assert deleted == ["x"]
    assert list(lst) == ["y", "x"]


def test_remove_missing_returns_false():
    lst = LinkedList(["a"])
    assert lst.remove("z") is False
    assert list(lst) == ["a"]


def test_remove_single_element_empties():
    lst = LinkedList(["a"])
    assert lst.remove("a") is True
    assert lst.last() is None
    assert len(lst) == 0


@given(st.lists(st.integers()))
def test_round_trip(items):
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)
    assert lst.last() == (items[-1] if items else None)


@given(st.lists(st.integers()))
def test_push_front_reverses(items):
    lst = LinkedList()
    for item in items:
        lst.push_front(item)
    assert list(lst) == items[::-1]


@given(st.lists(st.integers()), st.integers())
def test_remove_matches_list_remove(items, key):
    lst = LinkedList(items)
    expected = list(items)
    removed = lst.remove(key)
    assert removed == (key in expected)
    if removed:
        expected.remove(key)
    assert list(lst) == expected
    assert len(lst) == len(expected)
    assert lst.last() == (expected[-1] if expected else None)