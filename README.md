# algokit

A small collection of classic algorithms and data structures in plain Python,
with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                | Contents |
|-----------------------|----------|
| `algokit.sorting`     | `merge_sort`, `quick_sort`, `insertion_sort`, `bubble_sort` |
| `algokit.graphs`      | `build_adjacency`, `bfs`, `dijkstra`, `has_cycle` |
| `algokit.linked_list` | `Node`, `from_values`, `to_values`, `reverse_list`, `add_two_lists` |
| `algokit.trie`        | `Trie` with `insert`, `search` and `starts_with` |
| `algokit.trees`       | `TreeNode`, `inorder_traversal` |
| `algokit.strings`     | `is_anagram`, `is_palindrome` |
| `algokit.numbers`     | `gcd`, `lcm`, `factorial`, `triangular_number`, `is_prime`, `is_perfect_square`, `hamming_weight`, `integer_sqrt`, `reverse_integer` |
| `algokit.arrays`      | `max_cake_area`, `two_sum_sorted`, `rotate`, `search_insert`, `max_subarray`, `merge_sorted` |
| `algokit.hanoi`       | `Move`, `tower_of_hanoi`, `main` |

The sorting functions accept any iterable and return a new list. The input
is left unchanged. `rotate` and `merge_sorted` also return new lists.

## Examples

Sorting:

```python
from algokit.sorting import merge_sort, quick_sort

merge_sort([12, 11, 13, 5, 6, 7])   # [5, 6, 7, 11, 12, 13]
quick_sort([2, 1, 5, 3, 9, 8])      # [1, 2, 3, 5, 8, 9]
```

`dijkstra` computes shortest distances from a source vertex over an adjacency
matrix, where `0` means "no edge". Unreachable vertices get `math.inf`:

```python
from algokit.graphs import dijkstra

graph = [
    [0, 4, 0],
    [4, 0, 8],
    [0, 8, 0],
]
dijkstra(graph, 0)   # [0, 4, 12]
```

`bfs` does a breadth-first traversal of an undirected graph given as an edge
list. Every component is covered:

```python
from algokit.graphs import build_adjacency, bfs, has_cycle

adjacency = build_adjacency(4, [(0, 1), (0, 2), (2, 3)])
bfs(4, adjacency)         # [0, 1, 2, 3]
has_cycle(4, adjacency)   # False
```

`add_two_lists` adds two numbers stored as linked lists of digits, least
significant digit first:

```python
from algokit.linked_list import from_values, to_values, add_two_lists

total = add_two_lists(from_values([7, 5, 9, 4, 6]), from_values([8, 4]))
to_values(total)   # [5, 0, 0, 5, 6]
```

`Trie` is a prefix tree over the lowercase letters `a` to `z`. Any other
character raises `ValueError`:

```python
from algokit.trie import Trie

trie = Trie()
trie.insert("apple")
trie.search("apple")       # True
trie.search("app")         # False
trie.starts_with("app")    # True
```

String checks:

```python
from algokit.strings import is_anagram, is_palindrome

is_anagram("listen", "silent")                      # True
is_palindrome("A man, a plan, a canal: Panama")     # True
```

Number and array helpers:

```python
from algokit.numbers import reverse_integer, integer_sqrt, hamming_weight
from algokit.arrays import two_sum_sorted, search_insert, max_subarray

reverse_integer(-123)          # -321 (0 when the result overflows 32 bits)
integer_sqrt(8)                # 2
hamming_weight(11)             # 3
two_sum_sorted([2, 7, 11, 15], 9)   # (1, 2), 1-based positions
search_insert([1, 3, 5, 6], 2)      # 1
max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
```

`two_sum_sorted` raises `ValueError` when no pair adds up to the target.
`max_subarray` raises `ValueError` for an empty sequence.

## Command line

Installing the package provides a command that prints the moves that solve
the Tower of Hanoi puzzle for rods `A`, `B` and `C`. The number of disks is
an optional argument and defaults to three:

```
algokit-hanoi
algokit-hanoi 4
```

Each line reads like `Move disk 1 from rod A to rod C`. The same moves are
available from Python through `algokit.hanoi.tower_of_hanoi`, which yields
`Move` records.