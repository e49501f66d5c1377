# algoshelf

A small, dependency-free collection of classic algorithms written as plain
Python functions. It is meant for study and for quick use in scripts: each
function takes ordinary Python values and returns new ones, leaving its
arguments untouched.

## Installation

```
pip install algoshelf
```

To run the test suite, install the test extra and run pytest:

```
pip install "algoshelf[test]"
pytest
```

## What is on the shelf

| Module | Contents |
| --- | --- |
| `algoshelf.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `heap_sort`, `quick_sort`, `merge_sort`, `sort_descending`, `dutch_flag_sort` |
| `algoshelf.linear_sorts` | `counting_sort_chars`, `radix_sort`, `bin_radix_sort`, `three_way_merge_sort`, `three_way_merge_sort_descending` |
| `algoshelf.graphs` | `Edge`, `NegativeCycleError`, `bellman_ford`, `bfs`, `dfs`, `dijkstra` |
| `algoshelf.numbers` | `prime_factors`, `smallest_prime_factors`, `factorial`, `factorial_digits`, `fibonacci`, `fibonacci_number`, `reverse_digits`, `josephus`, `binary_sqrt`, `heron_area`, `quadratic_roots`, `make_change` |
| `algoshelf.knapsack` | `Item`, `fractional_knapsack`, `knapsack_01`, `greedy_01`, `compare_strategies`, `main` |
| `algoshelf.backtracking` | `solve_n_queens`, `hanoi_moves` |
| `algoshelf.text` | `concatenate`, `count_digits`, `swap_letter_case`, `infix_to_postfix` |
| `algoshelf.arrays` | `subarrays`, `subarray_sums`, `min_max`, `sorted_union`, `sorted_symmetric_difference`, `add_matrices`, `longest_nondecreasing_subsequence` |

A few notes on behaviour:

- `dutch_flag_sort` accepts only 0, 1 and 2 and raises `ValueError` otherwise.
- `radix_sort` and `bin_radix_sort` accept only non-negative integers;
  `counting_sort_chars` accepts only characters with codes 0 to 255.
- `bfs` and `dfs` treat edges as undirected and start at the smallest vertex.
- `bellman_ford` works on directed edges over vertices `0..n-1` and returns a
  list with `None` for unreachable vertices; `dijkstra` works on undirected
  edges over vertices `1..n` and returns a dict.
- `knapsack_01` truncates the capacity and item weights to integers.
- `solve_n_queens` returns the row of the queen in each column, or `None`
  when no placement exists; `hanoi_moves` yields `(from, to)` pairs.

## Examples

Sorting:

```python
from algoshelf.sorting import merge_sort, heap_sort

merge_sort([5, 2, 9, 1])            # [1, 2, 5, 9]
heap_sort([12, 11, 13, 5, 6, 7])    # [5, 6, 7, 11, 12, 13]
```

Shortest paths over a list of edges:

```python
from algoshelf.graphs import Edge, bellman_ford, NegativeCycleError

edges = [Edge(0, 1, 5), Edge(0, 2, 4), Edge(1, 3, 3), Edge(2, 1, 6), Edge(3, 2, 2)]
try:
    distances = bellman_ford(5, edges, 0)   # [0, 5, 4, 8, None]
except NegativeCycleError:
    print("the graph has a negative cycle")
```

Knapsack problems:

```python
from algoshelf.knapsack import Item, fractional_knapsack, knapsack_01

items = [Item(1, profit=3, weight=3), Item(2, profit=5, weight=4), Item(3, profit=8, weight=6)]
fractional_knapsack(items, 7)  # 9.25
knapsack_01(items, 7)          # 8
```

Number theory:

```python
from algoshelf.numbers import prime_factors, josephus

prime_factors(360)   # {2: 3, 3: 2, 5: 1}
josephus(10, 3)      # 4
```

## Command-line tool

An interactive knapsack solver is installed with the package. It reads the
items and a capacity from standard input, then lets you choose between the
fractional solution, the 0/1 dynamic-programming solution, or a comparison of
the 0/1 greedy and dynamic-programming results:

```
algoshelf-knapsack
```

## What the package does not do

The package offers no search functions over lists and no linked-list type;
use Python's `bisect` module, `list.index` and `collections.deque` for those.
The knapsack solver is the only command; there is no interactive game.