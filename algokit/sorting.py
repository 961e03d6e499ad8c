"""Comparison sorts: merge, quick, insertion and bubble sort."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Return a new stably sorted list, built by top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[T], start: int, end: int) -> int:
    """Place ``items[start]`` at its final position within ``start..end``."""
    pivot = items[start]
    smaller = sum(1 for item in items[start + 1 : end + 1] if item <= pivot)
    pivot_index = start + smaller
    items[pivot_index], items[start] = items[start], items[pivot_index]

    i, j = start, end
    while i < pivot_index and j > pivot_index:
        while items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < pivot_index and j > pivot_index:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return pivot_index


def quick_sort(values: Iterable[T]) -> list[T]:
    """Return a new sorted list, built by quicksort with the first element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        p = _partition(items, start, end)
        pending.append((start, p - 1))
        pending.append((p + 1, end))
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Return a new stably sorted list, built by insertion sort."""
    items: list[T] = []
    for key in values:
        j = len(items)
        items.append(key)
        while j > 0 and items[j - 1] > key:
            items[j] = items[j - 1]
            j -= 1
        items[j] = key
    return items


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Return a new stably sorted list, built by bubble sort."""
    items = list(values)
    for unsorted in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(unsorted):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items