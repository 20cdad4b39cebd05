# adventtree

A red-black tree holding ordered items, and a small solver for the
"total distance between two lists" puzzle that sorts its inputs with it.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The tree

`adventtree.rbtree.RBTree` holds any objects that have a `less(than)`
method. Two items count as equal when neither is less than the other;
inserting an item equal to one already stored leaves the tree unchanged.

```python
from dataclasses import dataclass
from adventtree.rbtree import RBTree

@dataclass
class Entry:
    key: int
    text: str

    def less(self, than):
        return self.key < than.key

tree = RBTree()
for key, text in [(5, "e"), (3, "c"), (8, "h"), (1, "a")]:
    tree.insert(Entry(key, text))

len(tree)                         # 4
[e.key for e in tree]             # [1, 3, 5, 8]
tree.min().key, tree.max().key    # (1, 8)

tree.get(Entry(3, ""))            # Entry(key=3, text='c')
tree.insert_or_get(Entry(3, "x")) # the stored Entry(key=3, text='c')
tree.delete(Entry(3, ""))         # the removed item; None if absent
```

Ordered walks are generators:

- `ascend(pivot)` yields the items `x` for which `x.less(pivot)` is false,
  in ascending order;
- `descend(pivot)` yields the items `x` for which `pivot.less(x)` is false,
  in descending order;
- `ascend_range(ge, lt)` yields, in ascending order, the items `x` for which
  `x.less(lt)` is true and `x.less(ge)` is false.

With a strict `less` these are "at least pivot", "at most pivot" and
`[ge, lt)`.

For step-by-step walks, `first()` and `last()` return nodes (or `None`
when the tree is empty), and `next(node)` and `prev(node)` move between
them, returning `None` past either end. Each `Node` carries its `item`
and its `color` (`Color.RED` or `Color.BLACK`). `search(item)` returns
the node holding an equal item, and `search_le(item)` the node with the
greatest item not above `item`; both return `None` when there is none.

### Ready-made items

`adventtree.items` has three item types: `Int`, `Uint32` (wraps modulo
2**32 on construction) and `String`. Their `less` is non-strict (`<=`),
so no two of them ever count as equal: a tree of them keeps every
duplicate, which makes it a sorted multiset. The other side of this is
that `get`, `search` and `delete` do not find them by value. Comparing
two different item types raises `TypeError`.

```python
from adventtree.items import Int
from adventtree.rbtree import RBTree

tree = RBTree()
for value in (4, 1, 4, 2):
    tree.insert(Int(value))

list(tree)   # [1, 2, 4, 4]
```

## The puzzle solver

The input has two whitespace-separated integers per line. The solver
puts each column into its own tree of `Int` items, walks both in
ascending order side by side, and adds up the absolute differences.
Pairing stops where the shorter column ends. A field that is not a
decimal integer counts as 0; a line with fewer than two fields is an
error.

```
adventtree path/to/input.dat
```

Without an argument it reads `task-1/task-1.dat` from the current
directory. It prints `Hello world`, the size, minimum and maximum of
each column's tree, the number of pairs compared, and the total
distance. If the file cannot be read or a line is malformed, it prints
the error to standard error and exits with status 1.

From Python:

```python
from adventtree.task1 import read_trees, calculate_distance, run

tree1, tree2 = read_trees(["3 4", "4 3", "2 5"])
calculate_distance(tree1, tree2)   # 4

run("input.dat")   # prints the report and returns the distance
```

`read_trees` raises `ValueError` naming the line number of a line with
fewer than two fields.

## What it does not do

No puzzle input comes with the package; the file to read must be
supplied. Only this one puzzle is solved.