"""Yearly temperature records for a city, read from a CSV file."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from os import PathLike
from typing import Iterable, Union

_UNWANTED = "\"' \t\n"
_CELLS_PER_LINE = 8


@dataclass(frozen=True)
class CityYear:
    """One year of a city's temperature data."""

    year: int
    num_days_below_32: int
    num_days_above_90: int
    average_temperature: float
    average_max: float
    average_min: float


class CityTemperatureData:
    """All the yearly records of one city, in consecutive year order."""

    def __init__(self, name: str, data: Iterable[CityYear]) -> None:
        self.name = name
        self._data = tuple(data)
        if not self._data:
            raise ValueError(f"no yearly data given for {name!r}")

    def __len__(self) -> int:
        return len(self._data)

    @property
    def first_year(self) -> int:
        """The year of the first record."""
        return self._data[0].year

    def __getitem__(self, year: int) -> CityYear:
        offset = year - self.first_year
        if not 0 <= offset < len(self._data):
            raise KeyError(year)
        return self._data[offset]

    def all_time_average(self) -> float:
        """Mean of the yearly average temperatures."""
        return sum(entry.average_temperature for entry in self._data) / len(self._data)

    def total_days_below_32(self) -> int:
        """Number of days below 32 degrees over all years."""
        return sum(entry.num_days_below_32 for entry in self._data)

    def total_days_above_90(self) -> int:
        """Number of days above 90 degrees over all years."""
        return sum(entry.num_days_above_90 for entry in self._data)


def clean(text: str) -> str:
    """Strip quotes and whitespace from a cell so it can be read as a number."""
    return "".join(ch for ch in text if ch not in _UNWANTED)


def read_line(line: str) -> CityYear:
    """Turn one CSV line into a CityYear; the first two cells are ignored."""
    cells = line.rstrip("\r\n").split(",")
    if len(cells) < _CELLS_PER_LINE:
        raise ValueError(f"expected {_CELLS_PER_LINE} cells, got {len(cells)}: {line!r}")
    _, _, year, below, above, average, high, low = (clean(cell) for cell in cells[:_CELLS_PER_LINE])
    return CityYear(
        year=int(year),
        num_days_below_32=int(below),
        num_days_above_90=int(above),
        average_temperature=float(average),
        average_max=float(high),
        average_min=float(low),
    )


def read_city(
    city_name: str,
    file_name: Union[str, PathLike],
    start_line: int,
    end_line: int,
) -> CityTemperatureData:
    """Read the lines from start_line to end_line (inclusive, zero-based) as one city."""
    if start_line < 0:
        raise ValueError("start_line must not be negative")
    if end_line < start_line:
        raise ValueError("end_line must not come before start_line")
    count = end_line - start_line + 1
    with open(file_name, encoding="utf-8") as handle:
        lines = list(islice(handle, start_line, end_line + 1))
    if len(lines) < count:
        raise ValueError(
            f"{file_name} ends before line {end_line}; read {len(lines)} of {count} lines"
        )
    return CityTemperatureData(city_name, (read_line(line) for line in lines))