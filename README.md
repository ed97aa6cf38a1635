# algokit

A small collection of classic algorithms written in plain Python:

- **Searching** (`algokit.searching`): `linear_search` and `binary_search`
  over an ascending sequence.
- **Sorting** (`algokit.sorting`): `bubble_sort`, `selection_sort`,
  `merge_sort`, and three quicksort variants that pivot on the first element
  (`quick_sort_first`), the last element (`quick_sort_last`) or a randomly
  chosen element (`quick_sort_random`).
- **Extrema** (`algokit.extrema`): `min_max`, the smallest and largest value
  found in one pass.
- **0/1 knapsack** (`algokit.knapsack`): `knapsack`, the best total profit
  that fits within a weight capacity, by dynamic programming.
- **Prim's algorithm** (`algokit.prim`): `minimum_spanning_tree`, the edges
  of a minimum spanning tree of a graph given as an adjacency matrix.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Using the library

```python
import random

from algokit.searching import binary_search, linear_search
from algokit.sorting import merge_sort, quick_sort_random
from algokit.extrema import min_max
from algokit.knapsack import knapsack
from algokit.prim import minimum_spanning_tree

linear_search([4, 8, 15, 16], 15)     # 2
linear_search([4, 8, 15, 16], 5)      # None
binary_search([1, 3, 5, 7, 9], 7)     # 3

merge_sort([5, 2, 9, 1])              # [1, 2, 5, 9]
quick_sort_random([3, 1, 2], random.Random(0))   # [1, 2, 3]

min_max([7, -2, 11, 4])               # (-2, 11)

knapsack([60, 100, 120], [10, 20, 30], 50)   # 220

matrix = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]
for edge in minimum_spanning_tree(matrix):
    print(edge)   # e.g. "0 - 1 : 2"
```

Details worth knowing:

- Both searches return the index of the value, or `None` when it is absent.
  `linear_search` returns the first match; `binary_search` expects the
  sequence to be sorted ascending.
- Every sorting function accepts any iterable of mutually comparable values
  and returns a new ascending list; the argument is left untouched.
  `merge_sort` is stable. `quick_sort_random` draws pivots from the
  `random.Random` passed as `rng`; pass a seeded one for repeatable runs, or
  leave it out to use a fresh generator.
- `min_max` returns a `(smallest, largest)` tuple and raises `ValueError` for
  an empty input.
- `knapsack` uses each item at most once. It raises `ValueError` when
  `profits` and `weights` differ in length, or when the capacity or any
  weight is negative.
- `minimum_spanning_tree` treats a `0` entry as "no edge", grows the tree
  from vertex `0` and returns `Edge` objects (`source`, `target`, `weight`)
  in the order they were added. Ties go to the candidate met first, scanning
  reached vertices and then neighbours in index order. It raises
  `ValueError` if the matrix is not square or the graph is not connected.

## Command line

Installing the package provides the `algokit` command. All input is given as
arguments (or, for `mst`, as a file or standard input); the command does not
prompt for values.

```
$ algokit linear-search 15 4 8 15 16
Value found at index 2
$ algokit binary-search 4 1 3 5 7 9
Value not found
$ algokit sort --algorithm merge 5 2 9 1
Sorted list: 1 2 5 9
$ algokit min-max 7 -2 11 4
Minimum value: -2
Maximum value: 11
$ algokit knapsack --capacity 50 60:10 100:20 120:30
Maximum profit: 220
$ printf '3\n0 1 4\n1 0 2\n4 2 0\n' | algokit mst
Edges in MST:
0 - 1 : 1
1 - 2 : 2
```

- `linear-search TARGET [VALUES ...]` and `binary-search TARGET [VALUES ...]`
  search integer values.
- `sort [--algorithm NAME] [VALUES ...]` sorts integers; `NAME` is one of
  `bubble` (the default), `selection`, `merge`, `quick-first`, `quick-last`
  and `quick-random`.
- `min-max VALUES ...` needs at least one value.
- `knapsack --capacity N [PROFIT:WEIGHT ...]` takes each item as a
  profit and weight joined by a colon.
- `mst [FILE]` reads whitespace-separated integers from `FILE` (standard
  input by default): the vertex count followed by the matrix entries row by
  row.

Errors raised by the algorithms, such as a disconnected graph, are reported
as `algokit: error: ...` on standard error with exit status 1. See all
options with `algokit --help`.