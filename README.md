# dsalgo

A small collection of classic data structures and algorithms in plain
Python, with no third-party dependencies.

## Modules

- `dsalgo.avl` – `AVLTree`, a self-balancing search tree of distinct keys:
  `insert`, `delete`, `search` (returns the `AVLNode` or `None`), `in`,
  in-order iteration, `len`, `height()` (-1 when empty), `balance_factor()`
  and `to_brackets()`.
- `dsalgo.bst` – `BinarySearchTree` (equal values go left) with `in`,
  in-order iteration, `height()`, `minimum()`, `maximum()` and
  `in_order()`, `pre_order()`, `post_order()`, `level_order()`; plus
  `is_binary_search_tree(root)` for a tree of `BSTNode`s.
- `dsalgo.binary_tree` – functions over `TreeNode` trees: `from_layers`,
  `product`, `search`, `add`, `in_order`, `pre_order`, `post_order`,
  `is_ordered`, `to_brackets`, `parse_brackets` (for `(value(left)(right))`
  text) and `depth_of`.
- `dsalgo.heap` – a bounded `MinHeap` (`insert`, `peek`, `extract_min`,
  `MinHeap.from_iterable`), `heap_sort` (which leaves values in
  descending order) and `count_unmoved`.
- `dsalgo.stack` – a bounded `ArrayStack` (default capacity 101) and an
  unbounded `LinkedStack`.
- `dsalgo.stack_lists` – `ListStack`, a bounded stack of integer lists,
  and `run_commands` for `PUSH`/`POP` command lines.
- `dsalgo.hashing` – `ChainedHashTable`, integers chained by
  `item % buckets`, with an optional capacity and a `format()` listing.
- `dsalgo.graph` – `UndirectedGraph` with `bfs` and `dfs` returning visit
  order, `DegreeBoundedGraph` with an optional weight per edge, and
  `BoundedQueue`.
- `dsalgo.dijkstra` – `WeightedGraph.dijkstra(source)` over an
  `IndexedMinHeap`; unreachable vertices get `math.inf`.
  `format_distances` tabulates the result.
- `dsalgo.intersection` – `intersection(first, second)`, the sorted,
  de-duplicated common values, and `format_intersection`.
- `dsalgo.levels` – `level_extremes` and `tree_height` for a tree given
  as a table of `IndexedNode(value, left, right)` rows rooted at row 0.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from dsalgo.avl import AVLTree

tree = AVLTree()
for key in (10, 20, 30, 40, 50, 25):
    tree.insert(key)

print(list(tree))        # keys in ascending order
print(25 in tree)        # True
tree.delete(25)
print(len(tree), tree.height())
print(tree.to_brackets())
```

```python
from dsalgo.stack import ArrayStack, StackUnderflowError

stack = ArrayStack(capacity=3)
stack.push(1)
stack.push(2)
print(stack.top())       # 2
stack.pop()
stack.pop()
try:
    stack.pop()
except StackUnderflowError:
    print("nothing left to pop")
```

```python
from dsalgo.intersection import intersection

print(intersection([5, 1, 3, 3], [3, 5, 7]))   # [3, 5]
```

Errors are raised rather than signalled by sentinel values:
`StackOverflowError` and `StackUnderflowError` for stacks, `HeapFullError`
for a full heap and `IndexError` for an empty one, `QueueOverflowError` and
`QueueUnderflowError` for `BoundedQueue`, `EmptyTreeError` for the minimum
or maximum of an empty search tree, `OverflowError` when a
`DegreeBoundedGraph` vertex is at its maximum degree, and `IndexError` for
vertices out of range.

## Command-line tools

Each tool reads standard input (where it needs input) and writes to
standard output.

- `dsalgo-heap-sort` – reads a number of test cases; each case is a count
  followed by that many integers. For each case it prints how many values
  stay in the same position after heap sorting.
- `dsalgo-hash` – reads a number of test cases; each case is a bucket
  count, a key count and the keys. It prints the chained buckets of each
  table followed by a blank line.
- `dsalgo-dijkstra` – prints the shortest distances in a built-in
  nine-vertex example graph, from vertex 0 or from `--source N`
  (0 to 8).
- `dsalgo-intersection` – reads two lists of twenty integers and prints
  the values they share in ascending order, or `VAZIO` when there are
  none.
- `dsalgo-bst` – builds the example search tree 15, 10, 20, 25, 8, 12 and
  reports `Found` or `Not found` for a number given as an argument or
  read from standard input.
- `dsalgo-levels` – reads a node count followed by `value left right`
  rows (`-1` for no child) and prints the largest and smallest value on
  each level.
- `dsalgo-list-stack` – reads `PUSH` commands followed by numbers (on the
  same line, or the next non-blank one) and `POP` commands, printing each
  popped list or `EMPTY STACK`.

For example:

```
echo "1 5 1 2 3 4 5" | dsalgo-heap-sort
dsalgo-dijkstra --source 3
dsalgo-bst 12
```

## What it does not do

Everything lives in memory; nothing is saved to disk. `ChainedHashTable`
only stores and lists integers: it has no lookup by key and no removal.
The graph classes have no edge removal, and `dsalgo-dijkstra` works only
on its built-in example graph rather than reading a graph from input.