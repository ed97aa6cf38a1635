"""Command-line front end to the algorithms."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from algokit.extrema import min_max
from algokit.knapsack import knapsack
from algokit.prim import minimum_spanning_tree
from algokit.searching import binary_search, linear_search
from algokit.sorting import (
    bubble_sort,
    merge_sort,
    quick_sort_first,
    quick_sort_last,
    quick_sort_random,
    selection_sort,
)

SORTS = {
    "bubble": bubble_sort,
    "selection": selection_sort,
    "merge": merge_sort,
    "quick-first": quick_sort_first,
    "quick-last": quick_sort_last,
    "quick-random": quick_sort_random,
}


def _item(text: str) -> tuple[int, int]:
    profit, sep, weight = text.partition(":")
    try:
        if not sep:
            raise ValueError
        return int(profit), int(weight)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected PROFIT:WEIGHT, got {text!r}") from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algokit", description="Run a classic algorithm.")
    commands = parser.add_subparsers(dest="command", required=True)

    for name in ("linear-search", "binary-search"):
        search = commands.add_parser(name, help=f"{name.replace('-', ' ')} for a value")
        search.add_argument("target", type=int)
        search.add_argument("values", type=int, nargs="*")

    sort = commands.add_parser("sort", help="sort integers")
    sort.add_argument("--algorithm", choices=sorted(SORTS), default="bubble")
    sort.add_argument("values", type=int, nargs="*")

    extrema = commands.add_parser("min-max", help="smallest and largest value")
    extrema.add_argument("values", type=int, nargs="+")

    pack = commands.add_parser("knapsack", help="0/1 knapsack maximum profit")
    pack.add_argument("--capacity", type=int, required=True)
    pack.add_argument("items", type=_item, nargs="*", metavar="PROFIT:WEIGHT")

    mst = commands.add_parser("mst", help="minimum spanning tree of an adjacency matrix")
    mst.add_argument(
        "matrix",
        type=argparse.FileType("r"),
        nargs="?",
        default="-",
        help="vertex count followed by the matrix entries (default: stdin)",
    )
    return parser


def _read_matrix(text: str) -> list[list[int]]:
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError:
        raise ValueError("matrix input must be integers") from None
    if not numbers:
        raise ValueError("missing vertex count")
    size, entries = numbers[0], numbers[1:]
    if size < 0 or len(entries) != size * size:
        raise ValueError(f"expected {max(size, 0) ** 2} matrix entries, got {len(entries)}")
    return [entries[row * size:(row + 1) * size] for row in range(size)]


def _run(args: argparse.Namespace) -> None:
    if args.command in ("linear-search", "binary-search"):
        search = linear_search if args.command == "linear-search" else binary_search
        index = search(args.values, args.target)
        print("Value not found" if index is None else f"Value found at index {index}")
    elif args.command == "sort":
        print("Sorted list:", *SORTS[args.algorithm](args.values))
    elif args.command == "min-max":
        smallest, largest = min_max(args.values)
        print(f"Minimum value: {smallest}")
        print(f"Maximum value: {largest}")
    elif args.command == "knapsack":
        profits = [profit for profit, _ in args.items]
        weights = [weight for _, weight in args.items]
        print(f"Maximum profit: {knapsack(profits, weights, args.capacity)}")
    elif args.command == "mst":
        with args.matrix as source:
            matrix = _read_matrix(source.read())
        edges = minimum_spanning_tree(matrix)
        print("Edges in MST:")
        for edge in edges:
            print(edge)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and run the chosen command; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        _run(args)
    except ValueError as error:
        print(f"algokit: error: {error}", file=sys.stderr)
        return 1
    return 0