"""Linear and binary search over sequences."""

from collections.abc import Sequence
from typing import Any


def linear_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first element equal to target, or None."""
    return next((i for i, item in enumerate(items) if item == target), None)


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of target in the ascending sequence items, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == target:
            return mid
        if value > target:
            high = mid - 1
        else:
            low = mid + 1
    return None