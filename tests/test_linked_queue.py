import pytest

from structkit.errors import EmptyError
from structkit.linked_queue import LinkedQueue


def test_unbounded_fifo_order():
    queue = LinkedQueue()
    values = list(range(50))
    for value in values:
        queue.enqueue(value)
    assert len(queue) == 50
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty()


def test_empty_queue_raises_index_error_family():
    queue = LinkedQueue()
    with pytest.raises(EmptyError):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.peek()


def test_render_formats():
    queue = LinkedQueue()
    assert queue.render() == "Queue is empty"
    queue.enqueue(10)
    queue.enqueue(20)
    assert queue.render() == "Queue elements: 10 -> 20 -> NULL"


def test_reuse_after_draining():
    queue = LinkedQueue()
    queue.enqueue(1)
    assert queue.dequeue() == 1
    with pytest.raises(EmptyError):
        queue.dequeue()
    queue.enqueue(2)
    assert queue.peek() == 2
    assert list(queue) == [2]