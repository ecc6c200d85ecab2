"""In-place sorts over an inclusive index range: merge, quick, insertion and a hybrid."""

from __future__ import annotations

import random
import time
from heapq import merge
from typing import Any, Callable, MutableSequence

from dsakit.search import random_int_array

HYBRID_THRESHOLD = 10

_rng = random.Random()


def _check_range(items: MutableSequence[Any], start: int, end: int) -> None:
    if start < 0 or end >= len(items):
        raise IndexError(f"range {start}..{end} out of bounds for {len(items)} items")


def _merge_halves(items: MutableSequence[Any], start: int, mid: int, end: int) -> None:
    """Merge the sorted runs start..mid and mid+1..end back into place, stably."""
    left = items[start : mid + 1]
    right = items[mid + 1 : end + 1]
    for offset, value in enumerate(merge(left, right)):
        items[start + offset] = value


def merge_sort(items: MutableSequence[Any], start: int, end: int) -> None:
    """Sort items[start..end] (inclusive) in place, ascending, by merge sort."""
    if start >= end:
        return
    _check_range(items, start, end)
    mid = start + (end - start) // 2
    merge_sort(items, start, mid)
    merge_sort(items, mid + 1, end)
    _merge_halves(items, start, mid, end)


def quick_sort(items: MutableSequence[Any], start: int, end: int) -> None:
    """Sort items[start..end] (inclusive) in place, ascending, by quicksort with a random pivot."""
    if start >= end:
        return
    _check_range(items, start, end)
    while start < end:
        pivot = _rng.randint(start, end)
        items[pivot], items[start] = items[start], items[pivot]
        pivot_value = items[start]
        lower = start
        for i in range(start + 1, end + 1):
            if items[i] < pivot_value:
                lower += 1
                items[i], items[lower] = items[lower], items[i]
        items[start], items[lower] = items[lower], items[start]
        # Recurse into the smaller side and loop over the larger to bound the depth.
        if lower - start < end - lower:
            quick_sort(items, start, lower - 1)
            start = lower + 1
        else:
            quick_sort(items, lower + 1, end)
            end = lower - 1


def insertion_sort(items: MutableSequence[Any], start: int, end: int) -> None:
    """Sort items[start..end] (inclusive) in place, ascending, by insertion sort."""
    if start >= end:
        return
    _check_range(items, start, end)
    for i in range(start + 1, end + 1):
        current = items[i]
        position = i - 1
        while position >= start and items[position] > current:
            items[position + 1] = items[position]
            position -= 1
        items[position + 1] = current


def hybrid_sort(items: MutableSequence[Any], start: int, end: int) -> None:
    """Sort items[start..end] (inclusive) in place, ascending.

    Each half is sorted by insertion sort when it spans fewer than ten further
    elements and by merge sort otherwise; the halves are then merged.
    """
    if start >= end:
        return
    _check_range(items, start, end)
    mid = start + (end - start) // 2
    if mid - start < HYBRID_THRESHOLD:
        insertion_sort(items, start, mid)
    else:
        merge_sort(items, start, mid)
    if end - (mid + 1) < HYBRID_THRESHOLD:
        insertion_sort(items, mid + 1, end)
    else:
        merge_sort(items, mid + 1, end)
    _merge_halves(items, start, mid, end)


def _time_us(sorter: Callable[[list[int]], Any], items: list[int]) -> int:
    start = time.perf_counter_ns()
    sorter(items)
    return (time.perf_counter_ns() - start) // 1000


def sort_speed(length: int) -> tuple[int, int, int, int, int]:
    """Microseconds each sort takes on copies of one random list of length ints.

    Returns (merge, quick, insertion, hybrid, built-in sort).
    """
    if length < 0:
        raise ValueError("length must not be negative")
    data = random_int_array(length, 0, length)
    last = length - 1
    return (
        _time_us(lambda items: merge_sort(items, 0, last), list(data)),
        _time_us(lambda items: quick_sort(items, 0, last), list(data)),
        _time_us(lambda items: insertion_sort(items, 0, last), list(data)),
        _time_us(lambda items: hybrid_sort(items, 0, last), list(data)),
        _time_us(list.sort, list(data)),
    )