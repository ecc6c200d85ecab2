"""Quadratic in-place sorts (bubble, selection, insertion) and a timing comparison."""

from __future__ import annotations

import time
from typing import Any, Callable, MutableSequence

from dsakit.search import random_int_array


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort items in place, ascending, by repeatedly swapping adjacent pairs."""
    length = len(items)
    for done in range(length):
        for j in range(length - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort items in place, ascending, by moving each smallest remaining item forward."""
    length = len(items)
    for i in range(length - 1):
        lowest = min(range(i, length), key=items.__getitem__)
        items[i], items[lowest] = items[lowest], items[i]


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort items in place, ascending, by inserting each item into the sorted prefix."""
    for i in range(1, len(items)):
        current = items[i]
        position = i - 1
        while position >= 0 and items[position] > current:
            items[position + 1] = items[position]
            position -= 1
        items[position + 1] = current


def _time_us(sorter: Callable[[list[int]], Any], items: list[int]) -> int:
    start = time.perf_counter_ns()
    sorter(items)
    return (time.perf_counter_ns() - start) // 1000


def sort_speed(length: int) -> tuple[int, int, int, int]:
    """Microseconds each sort takes on copies of one random list of length ints.

    Returns (bubble, selection, insertion, built-in sort).
    """
    if length < 0:
        raise ValueError("length must not be negative")
    data = random_int_array(length, 0, length)
    return (
        _time_us(bubble_sort, list(data)),
        _time_us(selection_sort, list(data)),
        _time_us(insertion_sort, list(data)),
        _time_us(list.sort, list(data)),
    )