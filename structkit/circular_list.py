"""A singly linked list whose last node points back to the first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from structkit.linked_list import Node, _arrow_chain, _ValuesRepr


class CircularList(_ValuesRepr):
    """Circular singly linked list with appending and deletion by value."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        tail = self._tail
        if tail is None:
            return
        node = tail.next
        while True:
            yield node
            if node is tail:
                return
            node = node.next

    def append(self, value: Any) -> None:
        """Insert value after the last node, linking it back to the head."""
        node = Node(value)
        if self._tail is None:
            node.next = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._tail = node
        self._size += 1

    def delete(self, key: Any) -> None:
        """Remove the first node, from the head on, whose value equals key.

        Raises KeyError when no node holds key.
        """
        prev = self._tail
        for node in self._nodes():
            if node.value == key:
                if node is prev:
                    self._tail = None
                else:
                    prev.next = node.next
                    if node is self._tail:
                        self._tail = prev
                self._size -= 1
                return
            prev = node
        raise KeyError(key)

    def render(self) -> str:
        """Return the list as 'a -> b -> (Back to head)', or a notice when empty."""
        if self._tail is None:
            return "List is empty."
        return _arrow_chain(self, "(Back to head)")

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size