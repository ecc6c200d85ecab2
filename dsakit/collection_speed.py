"""Timing comparison of searching a linked list against a dynamic array."""

from __future__ import annotations

import time

from dsakit.containers import Collection, DynamicArray, LinkedList
from dsakit.search import random_int_array


def _average_search_ns(collection: Collection, keys: list[int]) -> int:
    start = time.perf_counter_ns()
    for key in keys:
        collection.contains(key)
    return (time.perf_counter_ns() - start) // len(keys)


def search_speed(length: int, num_tests: int) -> tuple[int, int]:
    """Average nanoseconds per search of random keys in collections of random ints.

    Returns (linked list, dynamic array).
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if num_tests <= 0:
        raise ValueError("num_tests must be positive")
    linked = LinkedList()
    array = DynamicArray()
    for value in random_int_array(length, 0, length):
        linked.insert_at_end(value)
        array.insert_at_end(value)
    keys = random_int_array(num_tests, 0, length)

    linked_speed = _average_search_ns(linked, keys)
    array_speed = _average_search_ns(array, keys)
    return linked_speed, array_speed