import random

import pytest

from structkit.linked_list import LinkedList, Node


def test_construct_keeps_order():
    values = [5, 1, 4]
    linked = LinkedList(values)
    assert list(linked) == values
    assert len(linked) == len(values)


def test_empty():
    linked = LinkedList()
    assert list(linked) == []
    assert len(linked) == 0
    assert linked.head is None


def test_push_front_reverses_input_order():
    linked = LinkedList()
    inputs = [1, 2, 3]
    for value in inputs:
        linked.push_front(value)
    assert list(linked) == list(reversed(inputs))
    assert len(linked) == 3


def test_push_front_then_append():
    linked = LinkedList()
    linked.push_front(2)
    linked.append(3)
    linked.push_front(1)
    assert list(linked) == [1, 2, 3]


def test_head_is_node():
    linked = LinkedList([7, 8])
    assert linked.head == Node(7, Node(8))


def test_sort_integers():
    values = [9, 3, 7, 1, 3]
    linked = LinkedList(values)
    linked.sort()
    assert list(linked) == sorted(values)


def test_sort_strings():
    words = ["pear", "Apple", "fig", "apple"]
    linked = LinkedList(words)
    linked.sort()
    assert list(linked) == sorted(words)


def test_sort_empty_is_noop():
    linked = LinkedList()
    linked.sort()
    assert list(linked) == []


def test_sort_random():
    rng = random.Random(3)
    for _ in range(30):
        values = [rng.randint(-10, 10) for _ in range(rng.randint(0, 20))]
        linked = LinkedList(values)
        linked.sort()
        assert list(linked) == sorted(values)


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5], [1, 2, 3, 4]])
def test_reverse(values):
    linked = LinkedList(values)
    linked.reverse()
    assert list(linked) == list(reversed(values))


def test_reverse_twice_round_trip():
    values = ["x", "y", "z"]
    linked = LinkedList(values)
    linked.reverse()
    linked.reverse()
    assert list(linked) == values


def test_append_after_reverse_goes_to_end():
    linked = LinkedList([1, 2])
    linked.reverse()
    linked.append(3)
    assert list(linked) == [2, 1, 3]


def test_render():
    assert LinkedList([1, 2]).render() == "1 -> 2 -> NULL"


def test_render_empty():
    assert LinkedList().render() == "The list is empty."