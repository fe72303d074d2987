"""An unbounded first-in first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

from structkit.errors import EmptyError
from structkit.linked_list import _arrow_chain, _ValuesRepr


class LinkedQueue(_ValuesRepr):
    """Unbounded FIFO queue: values leave in the order they arrived."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def _ensure_not_empty(self) -> None:
        if not self._items:
            raise EmptyError("Queue is empty")

    def enqueue(self, value: Any) -> None:
        """Add value at the rear."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raise EmptyError when empty."""
        self._ensure_not_empty()
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front value without removing it; raise EmptyError when empty."""
        self._ensure_not_empty()
        return self._items[0]

    def is_empty(self) -> bool:
        """Return True when the queue holds no values."""
        return not self._items

    def render(self) -> str:
        """Return 'Queue elements: a -> b -> NULL', or a notice when empty."""
        if not self._items:
            return "Queue is empty"
        return "Queue elements: " + _arrow_chain(self._items, "NULL")

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)