# algokit

A small collection of classic algorithms and data structures in plain Python,
with no dependencies beyond the standard library.

## Installation

```
pip install algokit
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `iterative_merge_sort`, `quick_sort`, `hoare_quick_sort`, `kth_smallest` |
| `algokit.searching` | `linear_search`, `binary_search` |
| `algokit.arrays` | `reversed_values`, `left_rotate`, `move_zeros`, `max_hourglass_sum`, `wave_order`, `absolute_difference`, `split_equal_sums`, `multiply_matrices` |
| `algokit.numbers` | `is_armstrong`, `max_consecutive_ones`, `next_beautiful_year`, `factorial`, `fibonacci`, `is_prime` |
| `algokit.patterns` | `hollow_triangle`, `hollow_butterfly`, `descending_pattern`, `letters_only` |
| `algokit.graphs` | `Edge`, `DisjointSet`, `kruskal_mst`, `prim_mst` |
| `algokit.linked_lists` | `SinglyLinkedList`, `DoublyLinkedList` |
| `algokit.trees` | `TreeNode`, `BinarySearchTree`, `preorder`, `inorder`, `postorder`, `build_level_order`, `bottom_view` |

The sorting functions take any iterable and return a new sorted list; the
input is left untouched. `kth_smallest` counts from 1 and raises `ValueError`
when `k` is out of range. The search functions return an index or `None`.

## Examples

Sorting and searching:

```python
from algokit.sorting import merge_sort, kth_smallest
from algokit.searching import binary_search

data = [5, 1, 6, 2, 4, 3]
ordered = merge_sort(data)
print(ordered)                      # [1, 2, 3, 4, 5, 6]
print(kth_smallest(data, 4))        # 4
print(binary_search(ordered, 4))    # 3
```

Arrays and matrices:

```python
from algokit.arrays import left_rotate, move_zeros, multiply_matrices

print(left_rotate([1, 2, 3, 4, 5], 2))          # [3, 4, 5, 1, 2]
print(move_zeros([6, 0, 8, 2, 3, 0, 4, 0, 1]))  # [6, 8, 2, 3, 4, 1, 0, 0, 0]
print(multiply_matrices([[1, 2], [3, 4]], [[5, 6], [7, 8]]))  # [[19, 22], [43, 50]]
```

Number helpers:

```python
from algokit.numbers import is_armstrong, factorial, fibonacci

print(is_armstrong(153))    # True
print(is_armstrong(1253))   # False
print(factorial(5))         # 120
print(fibonacci(6))         # [0, 1, 1, 2, 3, 5]
```

Text patterns are returned as lists of lines:

```python
from algokit.patterns import hollow_triangle

print("\n".join(hollow_triangle(4)))
```

Minimum spanning trees:

```python
from algokit.graphs import Edge, kruskal_mst

edges = [Edge(0, 1, 10), Edge(0, 2, 6), Edge(0, 3, 5), Edge(1, 3, 15), Edge(2, 3, 4)]
for edge in kruskal_mst(4, edges):
    print(edge)    # "2 -- 3 == 4", "0 -- 3 == 5", "0 -- 1 == 10"
```

`prim_mst` takes an adjacency matrix where `0` means no edge, grows the tree
from vertex 0 and raises `ValueError` if the graph is not connected.

Linked lists:

```python
from algokit.linked_lists import SinglyLinkedList, DoublyLinkedList

items = SinglyLinkedList([20, 4, 15, 85])
items.reverse()
print(items)         # 85 15 4 20

chain = DoublyLinkedList([1, 2, 4])
chain.insert(3, 3)
print(chain)         # 1<=>2<=>3<=>4
```

Trees:

```python
from algokit.trees import BinarySearchTree, build_level_order, bottom_view

tree = BinarySearchTree((50, 30, 20, 40, 70, 60, 80))
print(tree.inorder())   # [20, 30, 40, 50, 60, 70, 80]
print(40 in tree)       # True

root = build_level_order([1, 2, 3, -1, -1, -1, -1])
print(bottom_view(root))   # [2, 1, 3]
```

## What the package does not do

algokit is a library only: it installs no command-line programs and has no
interactive games. It does not provide Tower of Hanoi move generation, a
sudoku solver or a number-guessing game.

## Running the tests

```
pip install "algokit[test]"
pytest
```