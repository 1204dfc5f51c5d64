"""Classic algorithms and data structures: sorting, searching, arrays, numbers, patterns, graphs, lists and trees."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "graphs",
    "linked_lists",
    "numbers",
    "patterns",
    "searching",
    "sorting",
    "trees",
]