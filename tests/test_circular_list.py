import pytest

from structkit.circular_list import CircularList


def test_worked_example_from_source():
    circle = CircularList([10, 20, 30, 40])
    assert circle.render() == "10 -> 20 -> 30 -> 40 -> (Back to head)"
    circle.delete(20)
    assert circle.render() == "10 -> 30 -> 40 -> (Back to head)"
    circle.delete(10)
    assert circle.render() == "30 -> 40 -> (Back to head)"


def test_empty_render_and_length():
    circle = CircularList()
    assert circle.render() == "List is empty."
    assert len(circle) == 0
    assert list(circle) == []


def test_append_keeps_order_and_length():
    values = [5, 1, 4, 2]
    circle = CircularList()
    for value in values:
        circle.append(value)
    assert list(circle) == values
    assert len(circle) == len(values)


def test_delete_missing_key_raises():
    circle = CircularList([1, 2, 3])
    with pytest.raises(KeyError):
        circle.delete(99)
    assert list(circle) == [1, 2, 3]


def test_delete_from_empty_raises():
    with pytest.raises(KeyError):
        CircularList().delete(1)


def test_delete_only_node_empties_list():
    circle = CircularList([7])
    circle.delete(7)
    assert len(circle) == 0
    assert circle.render() == "List is empty."


def test_delete_tail_then_append_links_correctly():
    circle = CircularList([1, 2, 3])
    circle.delete(3)
    circle.append(4)
    assert list(circle) == [1, 2, 4]
    assert len(circle) == 3


def test_delete_removes_first_occurrence_only():
    circle = CircularList([3, 1, 3, 2])
    circle.delete(3)
    assert list(circle) == [1, 3, 2]


def test_reuse_after_emptying():
    circle = CircularList([1, 2])
    circle.delete(1)
    circle.delete(2)
    circle.append(9)
    assert list(circle) == [9]