"""Classic comparison sorts. Each returns a new sorted list."""

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list:
    """Sort by swapping adjacent pairs, stopping early once a pass makes no swap."""
    data = list(items)
    n = len(data)
    for done in range(n - 1):
        swapped = False
        for j in range(n - done - 1):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
                swapped = True
        if not swapped:
            break
    return data


def insertion_sort(items: Iterable[Any]) -> list:
    """Sort by inserting each element into the sorted prefix before it."""
    data = list(items)
    for i in range(1, len(data)):
        key = data[i]
        j = i - 1
        while j >= 0 and data[j] > key:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = key
    return data


def selection_sort(items: Iterable[Any]) -> list:
    """Sort by repeatedly moving the smallest remaining element to the front."""
    data = list(items)
    n = len(data)
    for i in range(n - 1):
        smallest = min(range(i, n), key=data.__getitem__)
        data[i], data[smallest] = data[smallest], data[i]
    return data


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list:
    """Sort by splitting in halves, sorting each, and merging the results."""
    data = list(items)
    if len(data) <= 1:
        return data
    mid = (len(data) - 1) // 2 + 1
    return _merge(merge_sort(data[:mid]), merge_sort(data[mid:]))


def _partition(data: list, lo: int, hi: int) -> int:
    """Partition data[lo:hi] around data[lo]; return the pivot's final index."""
    pivot = data[lo]
    i, j = lo, hi
    while i < j:
        i += 1
        while i < hi and data[i] <= pivot:
            i += 1
        j -= 1
        while data[j] > pivot:
            j -= 1
        if i < j:
            data[i], data[j] = data[j], data[i]
    data[lo], data[j] = data[j], data[lo]
    return j


def quick_sort(items: Iterable[Any]) -> list:
    """Sort by partitioning around the first element of each range."""
    data = list(items)
    pending = [(0, len(data))]
    while pending:
        lo, hi = pending.pop()
        if hi - lo > 1:
            p = _partition(data, lo, hi)
            pending.append((lo, p))
            pending.append((p + 1, hi))
    return data