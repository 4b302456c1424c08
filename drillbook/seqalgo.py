"""Searching, merging and set operations on sorted sequences."""

from __future__ import annotations

import bisect
import heapq
from typing import Any, Iterable, Sequence

_END = object()


def adjacent_find(values: Iterable[Any]) -> int | None:
    """Index of the first element equal to the one after it, or None."""
    items = iter(values)
    previous = next(items, _END)
    if previous is _END:
        return None
    for index, current in enumerate(items):
        if current == previous:
            return index
        previous = current
    return None


def binary_search(values: Sequence[Any], target: Any) -> bool:
    """True when target occurs in the ascending sequence values."""
    position = bisect.bisect_left(values, target)
    return position < len(values) and not (target < values[position])


def set_union(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Sorted union of two sorted sequences, keeping the larger multiplicity."""
    left, right = iter(first), iter(second)
    x, y = next(left, _END), next(right, _END)
    result: list[Any] = []
    while x is not _END and y is not _END:
        if x < y:
            result.append(x)
            x = next(left, _END)
        elif y < x:
            result.append(y)
            y = next(right, _END)
        else:
            result.append(x)
            x, y = next(left, _END), next(right, _END)
    if x is not _END:
        result.append(x)
        result.extend(left)
    if y is not _END:
        result.append(y)
        result.extend(right)
    return result


def set_intersection(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Sorted intersection of two sorted sequences, keeping the smaller multiplicity."""
    left, right = iter(first), iter(second)
    x, y = next(left, _END), next(right, _END)
    result: list[Any] = []
    while x is not _END and y is not _END:
        if x < y:
            x = next(left, _END)
        elif y < x:
            y = next(right, _END)
        else:
            result.append(x)
            x, y = next(left, _END), next(right, _END)
    return result


def set_difference(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Elements of the sorted first sequence not matched in the sorted second."""
    left, right = iter(first), iter(second)
    x, y = next(left, _END), next(right, _END)
    result: list[Any] = []
    while x is not _END and y is not _END:
        if x < y:
            result.append(x)
            x = next(left, _END)
        elif y < x:
            y = next(right, _END)
        else:
            x, y = next(left, _END), next(right, _END)
    if x is not _END:
        result.append(x)
        result.extend(left)
    return result


def merge(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Merge two sorted sequences; equal elements from first come first."""
    return list(heapq.merge(first, second))