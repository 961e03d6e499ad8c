"""Array problems: cake cuts, pair sums, rotation, search and merging."""

from __future__ import annotations

import bisect
import heapq
from collections.abc import Sequence

MODULUS = 1_000_000_007


def _largest_gap(length: int, cuts: Sequence[int]) -> int:
    edges = [0, *sorted(cuts), length]
    return max(b - a for a, b in zip(edges, edges[1:]))


def max_cake_area(
    height: int, width: int, horizontal_cuts: Sequence[int], vertical_cuts: Sequence[int]
) -> int:
    """Area of the largest piece after all cuts, modulo 10**9 + 7."""
    return _largest_gap(height, horizontal_cuts) * _largest_gap(width, vertical_cuts) % MODULUS


def two_sum_sorted(numbers: Sequence[int], target: int) -> tuple[int, int]:
    """1-based positions of two entries of a sorted sequence that add up to ``target``."""
    a, b = 0, len(numbers) - 1
    while a < b:
        total = numbers[a] + numbers[b]
        if total == target:
            return a + 1, b + 1
        if total < target:
            a += 1
        else:
            b -= 1
    raise ValueError(f"no two entries add up to {target}")


def rotate(values: Sequence[int], k: int) -> list[int]:
    """Return ``values`` rotated ``k`` places to the right."""
    items = list(values)
    if not items:
        return items
    shift = k % len(items)
    return items[-shift:] + items[:-shift] if shift else items


def search_insert(values: Sequence[int], target: int) -> int:
    """Index of ``target`` in a sorted sequence, or where it would be inserted."""
    return bisect.bisect_left(values, target)


def max_subarray(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run of ``values``."""
    if not values:
        raise ValueError("max_subarray() needs at least one value")
    running = best = values[0]
    for value in values[1:]:
        running = max(running, 0) + value
        best = max(best, running)
    return best


def merge_sorted(first: Sequence[int], m: int, second: Sequence[int], n: int) -> list[int]:
    """Merge the first ``m`` items of ``first`` with the first ``n`` of ``second``."""
    if not 0 <= m <= len(first):
        raise ValueError(f"m={m} does not fit a sequence of length {len(first)}")
    if not 0 <= n <= len(second):
        raise ValueError(f"n={n} does not fit a sequence of length {len(second)}")
    return list(heapq.merge(first[:m], second[:n]))