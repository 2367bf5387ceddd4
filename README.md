# algokit

Small implementations of classic algorithms and data structures that depend
on nothing outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Sorting (`algokit.sorting`)

Each function takes an iterable and returns a new list in ascending order.
The input is left as it was.

- `merge_sort(values)`: a stable merge sort
- `quick_sort(values)`: quicksort that uses the last element as the pivot
- `counting_sort(values)`: for non-negative integers only. It raises
  `ValueError` for a negative value and `TypeError` for a value that is not an integer
- `selection_sort(values)`
- `bubble_sort(values)`: stops early after a pass that makes no swaps
- `insertion_sort(values)`
- `cocktail_shaker_sort(values)`: bubble sort that runs in both directions

```python
from algokit.sorting import merge_sort, counting_sort

merge_sort([5, 2, 9, 1])     # [1, 2, 5, 9]
counting_sort([3, 0, 2, 3])  # [0, 2, 3, 3]
```

## Searching (`algokit.searching`)

- `binary_search(values, key)`: an index of `key` in an ascending sequence
- `first_occurrence(values, key)` and `last_occurrence(values, key)`: the
  leftmost and rightmost index of `key` in an ascending sequence
- `find_pivot(values)`: the index of the smallest element in a rotated
  ascending sequence. For a sequence that is not rotated it returns the last index
- `peak_index(values)`: the index of the peak in a sequence that rises and then falls
- `search_rotated(values, key)`: the index of `key` in a rotated ascending sequence
- `prefix_sums(values)`: `[0, v0, v0 + v1, ...]`
- `range_sum(prefix, left, right)`: the sum over the 1-based inclusive range
  `left..right`, taken from a `prefix_sums` table

The search functions raise `ValueError` when the key is absent.
`find_pivot` and `peak_index` raise `ValueError` for an empty sequence.
`range_sum` raises `IndexError` for a range that falls outside the table.

```python
from algokit.searching import binary_search, prefix_sums, range_sum, find_pivot, search_rotated

binary_search([1, 2, 3, 4, 5, 6], 5)  # 4
prefix = prefix_sums([1, 2, 3, 4])    # [0, 1, 3, 6, 10]
range_sum(prefix, 2, 3)               # 5
find_pivot([11, 17, 20, 1, 4])        # 3
search_rotated([11, 17, 20, 1, 4], 4) # 4
```

## Binary search tree (`algokit.bst`)

`BinarySearchTree(values=())` is an unbalanced tree. Smaller values go to the
left, and equal or larger values go to the right, so duplicates are kept.
It supports `insert(value)`, `delete(value)`, `in`, `len()` and iteration in
ascending order. `delete` removes one occurrence and returns whether it removed
anything. `in_order()`, `pre_order()` and `post_order()` return generators.

```python
from algokit.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 40, 60])
tree.delete(30)          # True
list(tree.in_order())    # [40, 50, 60]
list(tree.pre_order())   # [50, 40, 60]
list(tree.post_order())  # [40, 60, 50]
30 in tree               # False
```

## Singly linked list (`algokit.linked_list`)

`SinglyLinkedList(values=())` supports `append(value)`, `pop()` (which
removes from the tail), `popleft()` (which removes from the head), `len()` and
iteration. Both pops raise `IndexError` when the list is empty.

```python
from algokit.linked_list import SinglyLinkedList

items = SinglyLinkedList([1, 2, 3])
items.pop()      # 3
items.popleft()  # 1
list(items)      # [2]
```

## Longest common subsequence (`algokit.lcs`)

- `lcs_table(x, y)`: the `(len(x) + 1) x (len(y) + 1)` table of the LCS lengths of prefixes
- `longest_common_subsequence(x, y)`: one longest common subsequence. It is a
  string when `x` is a string and a list otherwise
- `common_element(first, second)`: the last element of `second` that also
  occurs in `first`, or `None` if there is no such element

```python
from algokit.lcs import longest_common_subsequence, common_element

len(longest_common_subsequence("ABCBDAB", "BDCABA"))  # 4
common_element([1, 2, 3], [5, 3, 2])                  # 2
```

## Breadth-first search (`algokit.bfs`)

`bfs_path(tree, start, goal)` takes adjacency lists as a mapping. It returns a
shortest path as a list of nodes, or `None` when `goal` cannot be reached.
A node that is missing from the mapping has no children. `sample_tree()`
returns a small binary tree in which A has the children B and C, B has D and E,
and C has F and G.

```python
from algokit.bfs import sample_tree, bfs_path

bfs_path(sample_tree(), "A", "G")  # ['A', 'C', 'G']
```

## What it does not do

`algokit` is a library only. It has no command-line program, so all input
comes from your own Python code.