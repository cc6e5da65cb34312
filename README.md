# dsakit

A small library of classic data structures and algorithms in plain,
readable Python, for study, teaching and experimentation. It has no
dependencies outside the standard library.

## Installation

```
pip install dsakit
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.sorting` | `bead_sort`, `binary_insertion_sort`, `bogo_sort`, `bubble_sort`, `bubble_sort_until_sorted`, `bubble_sort_recursive`, `bucket_sort`, `cocktail_sort`, `comb_sort`, `counting_sort`, `cycle_sort`, `gnome_sort` |
| `dsakit.searching` | `binary_search_recursive`, `binary_search_iterative`, `exponential_search`, `fibonacci_search`, `boyer_moore_search`, `find_duplicate`, `staircase_search` |
| `dsakit.arrays` | `delete_at`, `Deletion` |
| `dsakit.graph` | `Graph` (adjacency matrix), `adjacency_matrix`, `format_adjacency_matrix`, `adjacency_list`, `format_adjacency_list` |
| `dsakit.linked_list` | `LinkedList` |
| `dsakit.doubly_linked_list` | `DoublyLinkedList` |
| `dsakit.circular_linked_list` | `CircularLinkedList` |
| `dsakit.circular_doubly_linked_list` | `CircularDoublyLinkedList` |
| `dsakit.dynamic_stack` | `DynamicStack` |
| `dsakit.priority_queue` | `AscendingPriorityQueue` |
| `dsakit.avl_tree` | `AVLNode`, `AVLTree` |
| `dsakit.bst` | `TreeNode`, `BinarySearchTree` |
| `dsakit.euler` | `degree`, `has_euler_path` |
| `dsakit.paths` | `find_path_bfs`, `find_path_dfs` |
| `dsakit.shortest_paths` | `bellman_ford`, `dijkstra`, `floyd_warshall`, `format_distances`, `format_distance_matrix`, `NegativeCycleError` |
| `dsakit.mst` | `kruskal`, `prim`, `WeightedEdge` |

## Sorting

Every sort takes an iterable and returns a new ascending list; the input is
left alone.

```python
from dsakit.sorting import bucket_sort, cocktail_sort, counting_sort

cocktail_sort([5, 1, 4, 2])       # [1, 2, 4, 5]
counting_sort([3, 0, 2, 3, 1])    # [0, 1, 2, 3, 3]
bucket_sort([29, 25, -1, 49, 9])  # [-1, 9, 25, 29, 49]
```

`bead_sort` and `counting_sort` accept only non-negative integers and raise
`ValueError` otherwise. `bucket_sort` uses 5 buckets of width 10 by default
and raises `ValueError` for a value that falls outside them. `bogo_sort`
takes an optional `random.Random` to make its shuffles repeatable.

## Searching

Searches over sorted sequences return an index, or `-1` when the target is
absent.

```python
from dsakit.searching import (
    binary_search_iterative,
    boyer_moore_search,
    find_duplicate,
    staircase_search,
)

binary_search_iterative([2, 3, 4, 10, 40], 10)             # 3
boyer_moore_search("AABCAB12AFAABCABFFEGABCAB", "CAB")     # [3, 13, 22]
find_duplicate([1, 1, 2, 3, 5, 8, 13])                     # 1
staircase_search([[10, 20], [15, 25]], 25)                 # [(1, 1)]
```

`boyer_moore_search` returns every start position and raises `ValueError`
for an empty pattern.

## Arrays

```python
from dsakit.arrays import delete_at

delete_at([4, 5, 6], 1)   # Deletion(remaining=[4, 6], removed=5)
```

A position outside the sequence raises `IndexError`.

## Linear structures

- `LinkedList` — singly linked, zero-based: `prepend`, `append`,
  `insert_at`, `pop_front`, `pop_back`, `remove_at`, `search` (index or
  `None`), `sort` (in place).
- `DoublyLinkedList` — one-based positions: `insert(value, position)`,
  `delete(position)`, and `in` for membership.
- `CircularLinkedList` — `extend(values)` and `delete(value)`, which raises
  `ValueError` when the value is not found.
- `CircularDoublyLinkedList` — `insert_at_head`, `insert_at_tail`,
  `delete_from_head`, `delete_from_tail`, and `get(index)`, which wraps
  around the ring.
- `DynamicStack(capacity)` — `push` returns the new top index; the
  `capacity` doubles when full and halves after a pop once at most half is
  used.
- `AscendingPriorityQueue` — `insert` keeps arrival order, `remove` takes
  out the smallest value.

All of them support `len()` and iteration. Removing from an empty structure
raises `IndexError`.

```python
from dsakit.dynamic_stack import DynamicStack
from dsakit.priority_queue import AscendingPriorityQueue

stack = DynamicStack(1)
stack.push(7)      # 0
stack.pop()        # 7

queue = AscendingPriorityQueue([12, 1, 14, 3])
queue.remove()     # 1
list(queue)        # [12, 14, 3]
```

## Trees

```python
from dsakit.avl_tree import AVLTree
from dsakit.bst import BinarySearchTree

tree = AVLTree([10, 20, 30])
tree.preorder()    # [20, 10, 30]
tree.insert(20)    # False, already present
tree.delete(10)

bst = BinarySearchTree([8, 3, 10])
3 in bst           # True
bst.height()       # 2
```

`AVLTree.delete` raises `KeyError` for a missing key; `AVLTree.find`
returns the node or `None`; `AVLTree.render` draws the tree sideways as
text. `BinarySearchTree.delete` ignores values that are not present.

## Graphs

```python
from dsakit.graph import Graph
from dsakit.paths import find_path_bfs, find_path_dfs
from dsakit.euler import has_euler_path

g = Graph(4)
g.insert_edge(0, 1)
g.insert_edge(1, 2)
g.insert_edge(2, 3)

find_path_bfs(g, 0, 3)      # [0, 1, 2, 3]
find_path_dfs(g, 0, 3)      # [0, 1, 2, 3]
has_euler_path(g, 0, 3)     # True
print(g.show())
```

The path finders return `None` when there is no path. Vertices outside the
graph raise `ValueError`.

## Shortest paths and spanning trees

Weighted edges are `(source, destination, weight)` triples; unreachable
vertices get `math.inf`.

```python
from dsakit.shortest_paths import bellman_ford, dijkstra, format_distances
from dsakit.mst import kruskal, prim

dijkstra(3, [(0, 1, 4), (1, 2, 1)], 0)     # [0, 4, 5]
print(format_distances(bellman_ford(3, [(0, 1, 4), (1, 2, -2)], 0)))

edges = [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)]
kruskal(4, edges)
# [WeightedEdge(source=2, dest=3, weight=4),
#  WeightedEdge(source=0, dest=3, weight=5),
#  WeightedEdge(source=0, dest=1, weight=10)]
```

`bellman_ford` raises `NegativeCycleError` (a `ValueError`) when a negative
weight cycle can be reached. `floyd_warshall` returns the all-pairs matrix,
which `format_distance_matrix` renders. `prim` takes an adjacency matrix in
which `0` means no edge and raises `ValueError` for a disconnected graph.

## What this package does not do

dsakit is a library only. It installs no command and offers no interactive
menus: you call the functions and classes from your own code. Nothing is
stored to files; every structure lives in memory.