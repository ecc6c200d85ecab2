# dsakit

A small collection of classic data structures and algorithms in plain Python.
It covers searching, sorting, two list containers and a reader for yearly city
temperature records. Each algorithm group has a timing helper, so you can
compare the algorithms against one another.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `dsakit.citydata`

Reads yearly temperature records for a city from a CSV file.

```python
from dsakit.citydata import read_city

nyc = read_city("NYC", "tempdata.csv", 1, 51)
print(nyc.name, len(nyc), nyc.first_year)
print(nyc[1970].num_days_below_32)
print(nyc.all_time_average(), nyc.total_days_below_32(), nyc.total_days_above_90())
```

`read_city` reads the lines from `start_line` to `end_line`. Lines count from
0 and both ends are included.

- It raises `ValueError` when `start_line` is negative, when the range is reversed, or when the file ends too soon.
- Each row needs at least eight cells, and the first two are ignored.
- The remaining cells give the year, the days below 32, the days above 90, the average temperature, the average maximum and the average minimum.
- `clean` strips quotes and whitespace from each cell.
- `read_line` turns one line into a frozen `CityYear`.

`CityTemperatureData` holds consecutive years. Indexing it by a year outside
its range raises `KeyError`.

### `dsakit.search`

```python
from dsakit.search import linear_search, binary_search, random_int_array, array_search_speed

linear_search([23, 4, 11, 4, 7, 8], 7)       # 4
binary_search([4, 4, 7, 72, 84], 72)         # 3
random_int_array(10, 0, 100)                 # ten ints in [0, 100]
array_search_speed(10_000, 1000)             # (linear_ns, binary_ns) averages
```

- Both searches return `-1` when the key is missing.
- `binary_search` needs a sorted sequence.
- `array_search_speed` prints each average as it measures it.

### `dsakit.containers`

`DynamicArray` and `LinkedList` share the abstract `Collection` interface:

- `find`
- `get` and indexing
- `contains` and `in`
- `insert_at_beginning`, `insert_at_end` and `insert`
- `remove_at_beginning`, `remove_at_end`, `remove_at` and `remove`
- `len()`

An index out of range raises `IndexError`, and so does a removal from an empty
collection.

```python
from dsakit.containers import DynamicArray, LinkedList

da = DynamicArray(5)      # the default capacity is 10
for i in range(11):
    da.insert_at_end(i)
da.capacity               # 20; the capacity doubles when it runs out
da.set_capacity(3)        # anything past the new capacity is dropped
len(da)                   # 3

ll = LinkedList()
ll.insert_at_end("b")
ll.insert_at_beginning("a")
list(ll)                  # ["a", "b"]
```

`dsakit.collection_speed.search_speed(length, num_tests)` times searches in
both containers. It returns the average nanoseconds per search, first for the
linked list and then for the dynamic array.

### `dsakit.simple_sorts`

`bubble_sort`, `selection_sort` and `insertion_sort` sort a mutable sequence in
place.

`sort_speed(length)` times the three sorts and the built-in sort on copies of
the same random data. It returns microseconds in that order.

### `dsakit.range_sorts`

`merge_sort`, `quick_sort`, `insertion_sort` and `hybrid_sort` sort
`items[start:end + 1]` in place. `quick_sort` picks a random pivot.
`hybrid_sort` uses insertion sort on a half that spans fewer than ten further
elements and merge sort otherwise, then merges the two halves.

```python
from dsakit.range_sorts import hybrid_sort

data = [23, -3, -2, 4, 11, 4, 7, 8, 0, 0, -3]
hybrid_sort(data, 0, len(data) - 1)
```

`sort_speed(length)` times merge, quick, insertion, hybrid and the built-in
sort, and returns microseconds in that order.

## What it does not do

The package has no command-line program. It does not draw charts either. The
timing helpers return plain numbers, and you can plot or print them however
you like.