# structkit

A small collection of classic data structures and algorithms in plain Python,
with no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is included

| Module | Contents |
| --- | --- |
| `structkit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort` |
| `structkit.searching` | `linear_search`, `binary_search` |
| `structkit.recursion` | `count_up`, `reverse_recursive` |
| `structkit.linked_list` | `Node`, `LinkedList` |
| `structkit.list_filters` | `is_prime`, `delete_alternate`, `delete_even`, `delete_primes`, `even_index_values`, `even_values` |
| `structkit.circular_list` | `CircularList` |
| `structkit.linked_queue` | `LinkedQueue` |
| `structkit.bst` | `TreeNode`, `BinarySearchTree` |
| `structkit.bst_queries` | `kth_smallest`, `lowest_common_ancestor`, `common_parent_count`, `values_greater_than`, `sum_greater_than`, `total`, `left_subtree_size`, `is_bst`, `preorder`, `inorder`, `postorder` |
| `structkit.binary_tree` | `BinaryTree` |
| `structkit.graph_matrix` | `AdjacencyMatrix`, `WeightedGraph` |
| `structkit.graph_list` | `AdjacencyList` |
| `structkit.errors` | `CapacityError`, `EmptyError` |

The sorting functions take any iterable and return a new sorted list. The
search functions return an index, or `None` when the target is absent;
`binary_search` expects an ascending sequence.

## Errors

- `EmptyError` (a subclass of `IndexError`) is raised by `LinkedQueue.dequeue`
  and `LinkedQueue.peek` on an empty queue, and by
  `BinarySearchTree.minimum` and `BinarySearchTree.maximum` on an empty tree.
- `KeyError` is raised by `CircularList.delete` and `BinarySearchTree.delete`
  when the value is not present, and by `lowest_common_ancestor` and
  `common_parent_count` when no ancestor is found.
- `ValueError` is raised by `BinarySearchTree.second_highest` when the tree
  has fewer than two nodes.
- `IndexError` is raised by `kth_smallest` when the tree has fewer than `k`
  values, and by the graph classes for a vertex outside their range.

## Examples

Sorting and searching:

```python
from structkit.sorting import merge_sort
from structkit.searching import binary_search

data = merge_sort([9, 14, 4, 8, 7, 6])   # [4, 6, 7, 8, 9, 14]
binary_search(data, 8)                   # 3
```

Linked lists:

```python
from structkit.linked_list import LinkedList
from structkit.circular_list import CircularList
from structkit.list_filters import delete_primes

items = LinkedList([3, 1, 2])
items.sort()
items.render()            # '1 -> 2 -> 3 -> NULL'
list(delete_primes(items))  # [1]

ring = CircularList([10, 20, 30, 40])
ring.delete(20)
ring.render()             # '10 -> 30 -> 40 -> (Back to head)'
```

A queue:

```python
from structkit.linked_queue import LinkedQueue

queue = LinkedQueue()
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()           # 1
queue.render()            # 'Queue elements: 2 -> NULL'
```

A binary search tree:

```python
from structkit.bst import BinarySearchTree
from structkit.bst_queries import kth_smallest, lowest_common_ancestor

tree = BinarySearchTree([20, 10, 30, 5, 15, 25, 35])
list(tree)                           # [5, 10, 15, 20, 25, 30, 35]
tree.height()                        # 2
tree.second_highest()                # 30
kth_smallest(tree, 3)                # 15
lowest_common_ancestor(tree, 5, 15)  # 10
```

Graph traversal:

```python
from structkit.graph_matrix import AdjacencyMatrix
from structkit.graph_list import AdjacencyList

graph = AdjacencyMatrix(10)
for u, v in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3)]:
    graph.add_edge(u, v)
graph.bfs(0)              # [0, 1, 2, 3]
graph.dfs(0)              # [0, 1, 2, 3]
graph.dfs_iterative(0)    # [0, 2, 3, 1]

adjacency = AdjacencyList(5)
for source, destination in [(0, 1), (0, 2), (1, 2), (2, 3), (3, 4)]:
    adjacency.add_edge(source, destination)
adjacency.dfs(0)          # [0, 1, 2, 3, 4]
print(adjacency.render())
```

## What the package does not do

There is no stack type and no fixed-capacity (array-backed or circular) queue
in the package; the only queue is the unbounded `LinkedQueue`. `CapacityError`
is defined in `structkit.errors`, but no container in the package raises it.
The package is a library only: it installs no command.