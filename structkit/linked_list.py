"""A singly linked list with in-place sorting and reversal by value swapping."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One element of a singly linked list."""

    value: Any
    next: Node | None = None


def _walk(head: Node | None) -> Iterator[Node]:
    """Yield the nodes of a chain, starting at head."""
    node = head
    while node is not None:
        yield node
        node = node.next


def _arrow_chain(values: Iterable[Any], end: str) -> str:
    """Join values as 'a -> b -> ' followed by end."""
    return "".join(f"{value} -> " for value in values) + end


class _ValuesRepr:
    """Mixin giving a repr built from the container's iteration."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"  # type: ignore[call-overload]


class LinkedList(_ValuesRepr):
    """Singly linked list whose sort and reverse move values, not nodes."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def push_front(self, value: Any) -> None:
        """Insert value before the current head."""
        self.head = Node(value, self.head)
        if self._tail is None:
            self._tail = self.head
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert value after the current tail."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def sort(self) -> None:
        """Sort ascending in place by swapping values between nodes."""
        for p in _walk(self.head):
            for q in _walk(p.next):
                if p.value > q.value:
                    p.value, q.value = q.value, p.value

    def reverse(self) -> None:
        """Reverse the order of values in place, keeping the nodes where they are."""
        nodes = list(_walk(self.head))
        for left, right in zip(nodes[: len(nodes) // 2], reversed(nodes)):
            left.value, right.value = right.value, left.value

    def render(self) -> str:
        """Return the list as 'a -> b -> NULL', or a notice when it is empty."""
        if self.head is None:
            return "The list is empty."
        return _arrow_chain(self, "NULL")

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in _walk(self.head))

    def __len__(self) -> int:
        return self._size