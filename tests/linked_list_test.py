import os
import sys
import weakref

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mini_linked_list.datastructures import ArenaLinkedList, LinkedList


@pytest.fixture(params=[LinkedList, ArenaLinkedList], ids=["owned-chain", "arena"])
def make_list(request):
    return request.param


def test_new_list_is_empty(make_list):
    lst = make_list()
    assert lst.collect() == []
    assert len(lst) == 0
    assert not lst


def test_push_left_reverses_call_order(make_list):
    lst = make_list()
    for v in (1, 2, 3, 4):
        lst.push_left(v)
    assert lst.collect() == [4, 3, 2, 1]


def test_push_right_keeps_call_order(make_list):
    lst = make_list()
    for v in (1, 2, 3, 4):
        lst.push_right(v)
    assert lst.collect() == [1, 2, 3, 4]
    assert len(lst) == 4


def test_pop_left_after_push_right(make_list):
    lst = make_list()
    for v in (1, 2, 3, 4):
        lst.push_right(v)
    expected_rest = [[2, 3, 4], [3, 4], [4], []]
    for v, rest in zip((1, 2, 3, 4), expected_rest):
        assert lst.pop_left() == v
        assert lst.collect() == rest
    assert lst.pop_left() is None


def test_pop_right_after_push_right(make_list):
    lst = make_list()
    lst.push_right(1)
    lst.push_right(2)
    assert lst.pop_right() == 2
    assert lst.collect() == [1]
    assert lst.pop_right() == 1
    assert lst.collect() == []
    assert lst.pop_right() is None


def test_pop_right_single_element_leaves_list_truly_empty(make_list):
    lst = make_list()
    lst.push_left("only")
    assert lst.pop_right() == "only"
    assert not lst
    lst.push_right("again")
    assert lst.collect() == ["again"]


def test_push_left_pop_left_is_lifo(make_list):
    lst = make_list()
    values = [5, 9, 1, 7, 3]
    for v in values:
        lst.push_left(v)
    popped = [lst.pop_left() for _ in values]
    assert popped == list(reversed(values))
    assert lst.pop_left() is None


def test_push_right_pop_right_is_lifo(make_list):
    lst = make_list()
    values = ["a", "b", "c"]
    for v in values:
        lst.push_right(v)
    popped = [lst.pop_right() for _ in values]
    assert popped == ["c", "b", "a"]


def test_push_right_pop_left_is_fifo(make_list):
    lst = make_list()
    values = list(range(10))
    for v in values:
        lst.push_right(v)
    popped = [lst.pop_left() for _ in values]
    assert popped == values


def test_empty_pops_do_not_change_state(make_list):
    lst = make_list()
    for _ in range(3):
        assert lst.pop_left() is None
        assert lst.pop_right() is None
    assert lst.collect() == []
    lst.push_left(1)
    assert lst.collect() == [1]


def test_pop_default_distinguishes_stored_none(make_list):
    missing = object()
    lst = make_list()
    lst.push_left(None)
    assert lst.pop_left(missing) is None
    assert lst.pop_left(missing) is missing
    assert lst.pop_right(default=missing) is missing


def test_mixed_push_and_pop_both_ends(make_list):
    lst = make_list()
    for v in (1, 2, 3, 4):
        lst.push_right(v)
    for v in (1, 2, 3, 4):
        lst.push_left(v)
    assert lst.collect() == [4, 3, 2, 1, 1, 2, 3, 4]

    assert lst.pop_right() == 4
    assert lst.pop_left() == 4
    assert lst.collect() == [3, 2, 1, 1, 2, 3]


def test_collect_returns_fresh_list(make_list):
    lst = make_list()
    lst.push_right(1)
    snapshot = lst.collect()
    snapshot.append(99)
    assert lst.collect() == [1]


def test_clear_empties_and_list_is_reusable(make_list):
    lst = make_list()
    for v in range(20):
        lst.push_right(v)
    lst.clear()
    assert lst.collect() == []
    assert lst.pop_left() is None
    lst.push_left("x")
    assert lst.collect() == ["x"]


class _Payload:
    pass


def test_popped_values_are_not_retained():
    lst = LinkedList()
    left, right = _Payload(), _Payload()
    left_ref, right_ref = weakref.ref(left), weakref.ref(right)
    lst.push_left(left)
    lst.push_right(right)
    del left, right

    lst.pop_left()
    assert left_ref() is None
    lst.pop_right()
    assert right_ref() is None
    assert lst.head is None


def test_clear_releases_long_chain():
    lst = LinkedList()
    first = _Payload()
    ref = weakref.ref(first)
    lst.push_left(first)
    del first
    for v in range(200000):
        lst.push_left(v)
    lst.clear()
    assert ref() is None
    assert lst.head is None
