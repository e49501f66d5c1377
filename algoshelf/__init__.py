"""Classic algorithms: sorting, graphs, numbers, knapsack, backtracking, text and arrays."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "graphs",
    "knapsack",
    "linear_sorts",
    "numbers",
    "sorting",
    "text",
]