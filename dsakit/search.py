"""Linear and binary search, with a timing comparison of the two."""

from __future__ import annotations

import random
import time
from typing import Any, Sequence


def linear_search(items: Sequence[Any], key: Any) -> int:
    """Index of the first item equal to key, or -1 if there is none."""
    for index, item in enumerate(items):
        if item == key:
            return index
    return -1


def binary_search(items: Sequence[Any], key: Any) -> int:
    """Index of an item equal to key in sorted items, or -1 if there is none."""
    low, high = 0, len(items) - 1
    while low <= high:
        middle = low + (high - low) // 2
        value = items[middle]
        if value == key:
            return middle
        if value < key:
            low = middle + 1
        else:
            high = middle - 1
    return -1


def random_int_array(length: int, minimum: int, maximum: int) -> list[int]:
    """A list of length random ints, each between minimum and maximum inclusive."""
    if length < 0:
        raise ValueError("length must not be negative")
    if minimum > maximum:
        raise ValueError("minimum must not exceed maximum")
    rng = random.SystemRandom()
    return [rng.randint(minimum, maximum) for _ in range(length)]


def array_search_speed(length: int, num_tests: int) -> tuple[int, int]:
    """Average nanoseconds per linear and per binary search on a sorted random list.

    Returns (linear, binary).
    """
    if num_tests <= 0:
        raise ValueError("num_tests must be positive")
    items = sorted(random_int_array(length, 0, length))
    keys = random_int_array(num_tests, 0, length)

    start = time.perf_counter_ns()
    for key in keys:
        linear_search(items, key)
    linear_speed = (time.perf_counter_ns() - start) // num_tests
    print(f"Total Linear Time: {linear_speed}")

    start = time.perf_counter_ns()
    for key in keys:
        binary_search(items, key)
    binary_speed = (time.perf_counter_ns() - start) // num_tests
    print(f"Total Binary Time: {binary_speed}")

    return linear_speed, binary_speed