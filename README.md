# algokit

Compact implementations of classic algorithms and data structures: graph
traversal and shortest paths, search trees, range-sum trees, heaps and
quicksort. They are written to be read as well as used. The package has no
runtime dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.graph` | `a_star`, `bfs`, `dfs`, `dijkstra`, `multi_source_bfs`, `prim_keys`, `format_adjacency` |
| `algokit.sorting` | `quick_sort`, plus the Lomuto `partition` step it is built on |
| `algokit.heaps` | `drain_ascending`, `drain_descending` (min-heap and max-heap ordering) |
| `algokit.bst` | `BinarySearchTree` |
| `algokit.avl` | `AVLTree`, a self-balancing search tree |
| `algokit.rbtree` | `RedBlackTree` and the node colour enum `Color` |
| `algokit.segment_tree` | `SegmentTree` for range-sum queries |
| `algokit.fenwick` | `FenwickTree` (binary indexed tree) for prefix sums |
| `algokit.dispatch` | emergency-dispatch helpers `dispatch_order`, `describe_code`, `multiples_of_ten`, and the `main` command |

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Graphs

Graphs are adjacency lists indexed by node number. Unweighted graphs hold
neighbour indices; weighted graphs hold `(neighbour, weight)` pairs.
Unreachable distances and keys are reported as `math.inf`.

```python
from algokit.graph import a_star, bfs, dfs, dijkstra, format_adjacency

weighted = [
    [(1, 2), (2, 4)],
    [(3, 7)],
    [(3, 1)],
    [(4, 3)],
    [(5, 2)],
    [],
]
print(a_star(0, 5, weighted))   # [0, 2, 3, 4, 5]
print(dijkstra(weighted, 0))    # [0, 2, 4, 5, 8, 10]

unweighted = [[1, 2], [3], [4], [], []]
print(dfs(0, unweighted))       # [0, 1, 3, 2, 4]
print(bfs(0, unweighted))       # [0, 1, 2, 3, 4]
print(format_adjacency(unweighted), end="")
# 0: 1 2
# 1: 3
# 2: 4
# 3:
# 4:
```

- `a_star` uses the difference between node indices as its heuristic. If the
  goal cannot be reached, the returned path holds the goal alone.
- `multi_source_bfs(adj, sources)` gives each node's edge count to the
  nearest source.
- `prim_keys(adj)` grows Prim's tree from node 0 over the directed edges given
  and returns, for each node, the weight of the edge that attached it.

## Sorting and heaps

```python
from algokit.sorting import quick_sort
from algokit.heaps import drain_ascending, drain_descending

print(quick_sort([10, 7, 8, 9, 1, 5]))       # [1, 5, 7, 8, 9, 10]
print(drain_ascending([10, 4, 15, 1]))       # [1, 4, 10, 15]
print(drain_descending([4, 10, 1, 15]))      # [15, 10, 4, 1]
```

`quick_sort` returns a new list; `partition(items, low, high)` works in place
and returns the pivot's final index.

## Search trees

All three trees accept initial values, support `len()`, `in` and iteration in
ascending order, and offer `inorder()` for a list of their contents.

```python
from algokit.avl import AVLTree
from algokit.bst import BinarySearchTree
from algokit.rbtree import RedBlackTree

tree = AVLTree([10, 20, 5, 4, 15])
print(tree.inorder())   # [4, 5, 10, 15, 20]
print(tree.height())    # 3

print(BinarySearchTree([10, 5, 15]).inorder())     # [5, 10, 15]
print(RedBlackTree([10, 20, 30, 15]).inorder())    # [10, 15, 20, 30]
```

`BinarySearchTree` and `AVLTree` keep duplicates (equal values go right);
`RedBlackTree` ignores a value that is already present.

## Range and prefix sums

```python
from algokit.fenwick import FenwickTree
from algokit.segment_tree import SegmentTree

segments = SegmentTree([1, 3, 5, 7, 9, 11])
print(segments.query(1, 3))   # 3 + 5 + 7 = 15

fenwick = FenwickTree(5)
fenwick.update(1, 4)
fenwick.update(3, 2)
print(fenwick.query(3))       # 6
```

`SegmentTree.query` takes 0-based inclusive bounds. `FenwickTree` positions
are 1-based; indices out of range raise `IndexError`.

## Dispatch helpers

```python
from algokit.dispatch import describe_code, dispatch_order, multiples_of_ten

print(describe_code(101))     # Ambulance - Medical Emergency
print(list(dispatch_order(["Ambulance", "Fire Truck", "Police Van"])))
print(multiples_of_ten(4))    # [0, 10, 20, 30]
```

`describe_code` raises `InvalidCodeError` (a `KeyError`) for codes other than
101 to 104; `multiples_of_ten` raises `ValueError` for a negative size.

## Command line

The package installs one command, `algokit-dispatch`, with four subcommands:

```
algokit-dispatch queue          # print Ambulance, Fire Truck, Police Van in order
algokit-dispatch lookup 103     # print the service for an emergency code
algokit-dispatch status AMB101  # print a unit's status from the built-in table
algokit-dispatch multiples 5    # print 0 10 20 30 40
```

If `lookup` is given no code, or `multiples` no size, the command asks for one.
An unknown code prints `Invalid Code!`; an unknown unit or a bad size is
reported on standard error with exit status 1.

## Limits

The emergency codes and unit statuses are fixed tables inside
`algokit.dispatch`; the command neither stores nor updates them.