"""Small recursive routines."""

from collections.abc import Iterable, Iterator
from typing import Any


def _count_up(n: int) -> Iterator[int]:
    if n > 0:
        yield from _count_up(n - 1)
        yield n


def count_up(n: int) -> list[int]:
    """Return 1..n in order, produced by recursing before emitting each value."""
    return list(_count_up(n))


def _unwind(values: Iterator[Any]) -> Iterator[Any]:
    try:
        value = next(values)
    except StopIteration:
        return
    yield from _unwind(values)
    yield value


def reverse_recursive(values: Iterable[Any]) -> list:
    """Return the values in reverse order, emitting each one as the recursion unwinds."""
    return list(_unwind(iter(values)))