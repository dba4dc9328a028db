# dsalgo

A collection of classic data structures and algorithms written in plain Python,
with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `dsalgo.recursion` | `ackermann`, `binomial`, `flood_fill` (with `Color`), `hanoi_tower` |
| `dsalgo.matrices` | dense `transpose` and `format_matrix`, `SparseMatrix` with `Term` entries |
| `dsalgo.polynomial` | `Polynomial` addition, formatting and `trimmed` |
| `dsalgo.stacks` | `ArrayStack`, `DynamicStack`, `LinkedStack` |
| `dsalgo.stack_apps` | `solve_maze`, `evaluate_postfix`, `priority`, `infix_to_postfix`, `check_brackets` |
| `dsalgo.queues` | `CircularQueue`, `LinearQueue`, `CircularDeque`, `LinkedQueue`, `simulate_buffer` |
| `dsalgo.linked_lists` | `SinglyLinkedList`, `ArrayList`, `CircularList`, `DoublyLinkedList`, `Playlist` |
| `dsalgo.trees` | `inorder`, `preorder`, `postorder`, `inorder_iterative`, `directory_size`, `evaluate_expression`, `count_nodes`, `count_leaves`, `height`, threaded trees |
| `dsalgo.search_trees` | `BinarySearchTree`, `AVLTree` |
| `dsalgo.heaps` | `MaxHeap`, `MinHeap`, `heap_sort`, `schedule_lpt` |
| `dsalgo.huffman` | `build_huffman_tree`, `huffman_codes` |
| `dsalgo.graphs` | `AdjacencyMatrixGraph`, `AdjacencyListGraph` with DFS and BFS |
| `dsalgo.graph_algorithms` | Dijkstra's `shortest_path`, `floyd`, `prim`, `spanning_tree_edges`, `topological_sort` |
| `dsalgo.sorting` | bubble, selection, insertion, shell, merge and quick sort; `is_sorted`, `sort_dictionary` |
| `dsalgo.searching` | sequential, sentinel, binary, indexed and interpolation search |
| `dsalgo.hashing` | `ChainedHashTable`, `LinearProbingTable`, `QuadraticProbingTable`, `transform`, `hash_string` |

## Installation

```
pip install .
```

## Examples

```python
from dsalgo.sorting import quick_sort
from dsalgo.stack_apps import infix_to_postfix, evaluate_postfix
from dsalgo.heaps import MaxHeap
from dsalgo.recursion import hanoi_tower

print(quick_sort([5, 3, 8, 1]))        # [1, 3, 5, 8]
print(infix_to_postfix("(2+3)*4+9"))   # 23+4*9+
print(evaluate_postfix("82/3-32*+"))   # 7

heap = MaxHeap()
for key in (10, 5, 30):
    heap.insert(key)
print(heap.delete_max())               # 30

print(list(hanoi_tower(2)))            # [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]
```

Weighted-graph algorithms take a square weight matrix, with `INF`
(`dsalgo.graph_algorithms.INF`, 100000) standing for "no edge":

```python
from dsalgo.graph_algorithms import INF, shortest_path, topological_sort

weights = [
    [0, 7, INF, INF, 3, 10, INF],
    [7, 0, 4, 10, 2, 6, INF],
    [INF, 4, 0, 2, INF, INF, INF],
    [INF, 10, 2, 0, 11, 9, 4],
    [3, 2, INF, 11, 0, INF, 5],
    [10, 6, INF, 9, INF, 0, INF],
    [INF, INF, INF, 4, 5, INF, 0],
]
print(shortest_path(weights, 0))       # [0, 5, 9, 11, 3, 10, 8]

# successor lists, one per vertex
print(topological_sort([[2, 3], [3, 4], [3, 5], [5], [5], []]))  # [1, 0, 4, 2, 3, 5]
```

Errors are raised as exceptions: popping an empty stack raises
`StackEmptyError`, adding to a full bounded queue raises `QueueFullError`,
adding a duplicate key to a search tree or hash table raises
`DuplicateKeyError`, and a cyclic graph passed to `topological_sort` raises
`CycleError`, whose `order` attribute holds the vertices removed before the
cycle was reached.

## What it does not do

`dsalgo` is a library only. It has no command-line program and reads no
input on its own; interactive behaviour such as stepping through a
`Playlist` is driven by calling `Playlist.handle_command` with each command.

## Running the tests

```
pip install ".[test]"
pytest
```