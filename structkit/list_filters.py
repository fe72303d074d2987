"""Filters and selections over singly linked lists."""

from __future__ import annotations

from itertools import islice
from math import isqrt
from typing import Any

from structkit.linked_list import LinkedList


def is_prime(n: int) -> bool:
    """Return True when n is a prime number; values below 2 are not prime."""
    if n <= 1:
        return False
    return all(n % divisor for divisor in range(2, isqrt(n) + 1))


def delete_alternate(linked: LinkedList) -> LinkedList:
    """Return a list holding the first, third, fifth... values of linked."""
    return LinkedList(islice(linked, 0, None, 2))


def delete_even(linked: LinkedList) -> LinkedList:
    """Return a list without the even values of linked, order kept."""
    return LinkedList(value for value in linked if value % 2 != 0)


def delete_primes(linked: LinkedList) -> LinkedList:
    """Return a list without the prime values of linked, order kept."""
    return LinkedList(value for value in linked if not is_prime(value))


def even_index_values(linked: LinkedList) -> list[Any]:
    """Return the values at positions 0, 2, 4... of linked."""
    return list(islice(linked, 0, None, 2))


def even_values(linked: LinkedList) -> list[Any]:
    """Return the even values of linked, in list order."""
    return [value for value in linked if value % 2 == 0]