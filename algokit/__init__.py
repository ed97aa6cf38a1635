"""Classic searching, sorting, extrema, knapsack and minimum spanning tree algorithms."""

__version__ = "0.1.0"

__all__ = ["__version__"]