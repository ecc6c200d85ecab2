"""Classic data structures, searches and sorts, a city temperature record reader, and timing helpers."""

__version__ = "0.1.0"
__all__ = [
    "citydata",
    "search",
    "containers",
    "collection_speed",
    "simple_sorts",
    "range_sorts",
]