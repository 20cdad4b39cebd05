"""An ordered container built on a red-black tree.

Items order themselves through a ``less(than)`` method. Two items are
treated as equal when neither is less than the other; inserting an item
equal to one already present leaves the tree unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional, Protocol

__all__ = ["Color", "Item", "Node", "RBTree"]


class Item(Protocol):
    def less(self, than: Any) -> bool: ...


class Color(Enum):
    RED = True
    BLACK = False


@dataclass(eq=False)
class Node:
    """A tree node holding one item."""

    item: Any
    color: Color = Color.RED
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)
    parent: Optional[Node] = field(default=None, repr=False)


def _less(x: Item, y: Item) -> bool:
    return x.less(y)


class RBTree:
    """A red-black tree of items ordered by their ``less`` method."""

    def __init__(self) -> None:
        nil = Node(None, Color.BLACK)
        nil.left = nil.right = nil.parent = nil
        self._nil = nil
        self._root = nil
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        node = self._min(self._root)
        while node is not self._nil:
            yield node.item
            node = self._successor(node)

    # ----- public operations -------------------------------------------

    def insert(self, item: Any) -> Optional[Node]:
        """Insert ``item``; return its node, or the existing equal node."""
        if item is None:
            return None
        return self._insert(self._new_node(item))

    def insert_or_get(self, item: Any) -> Any:
        """Insert ``item`` and return it, or return the equal item already held."""
        if item is None:
            return None
        return self._insert(self._new_node(item)).item

    def delete(self, item: Any) -> Any:
        """Remove the item equal to ``item`` and return it, or None if absent."""
        if item is None:
            return None
        return self._delete(item)

    def get(self, item: Any) -> Any:
        """Return the held item equal to ``item``, or None."""
        if item is None:
            return None
        return self._search(item).item

    def search(self, item: Any) -> Optional[Node]:
        """Return the node holding an item equal to ``item``, or None."""
        return self._public(self._search(item))

    def search_le(self, item: Any) -> Optional[Node]:
        """Return the node with the greatest item not above ``item``, or None."""
        if self._root is self._nil:
            return None
        return self._public(self._search_le(item))

    def min(self) -> Any:
        """Return the smallest item, or None when empty."""
        return self._min(self._root).item

    def max(self) -> Any:
        """Return the largest item, or None when empty."""
        return self._max(self._root).item

    def ascend(self, pivot: Any) -> Iterator[Any]:
        """Yield items not less than ``pivot`` in ascending order."""
        yield from self._ascend(self._root, pivot)

    def descend(self, pivot: Any) -> Iterator[Any]:
        """Yield items not greater than ``pivot`` in descending order."""
        yield from self._descend(self._root, pivot)

    def ascend_range(self, ge: Any, lt: Any) -> Iterator[Any]:
        """Yield items in ``[ge, lt)`` in ascending order."""
        yield from self._ascend_range(self._root, ge, lt)

    def first(self) -> Optional[Node]:
        """Return the node with the smallest item, or None when empty."""
        return self._public(self._min(self._root))

    def last(self) -> Optional[Node]:
        """Return the node with the largest item, or None when empty."""
        return self._public(self._max(self._root))

    def next(self, node: Optional[Node]) -> Optional[Node]:
        """Return the in-order successor of ``node``, or None."""
        if node is None:
            return None
        return self._public(self._successor(node))

    def prev(self, node: Optional[Node]) -> Optional[Node]:
        """Return the in-order predecessor of ``node``, or None."""
        if node is None:
            return None
        return self._public(self._predecessor(node))

    # ----- internals ----------------------------------------------------

    def _new_node(self, item: Any) -> Node:
        nil = self._nil
        return Node(item, Color.RED, nil, nil, nil)

    def _public(self, node: Node) -> Optional[Node]:
        return None if node is self._nil else node

    def _rotate_left(self, x: Node) -> None:
        y = x.right
        if y is self._nil:
            return
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: Node) -> None:
        y = x.left
        if y is self._nil:
            return
        x.left = y.right
        if y.right is not self._nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.right = x
        x.parent = y

    def _insert(self, z: Node) -> Node:
        x = self._root
        y = self._nil
        while x is not self._nil:
            y = x
            if _less(z.item, x.item):
                x = x.left
            elif _less(x.item, z.item):
                x = x.right
            else:
                return x

        z.parent = y
        if y is self._nil:
            self._root = z
        elif _less(z.item, y.item):
            y.left = z
        else:
            y.right = z

        self._count += 1
        self._insert_fixup(z)
        return z

    def _insert_fixup(self, z: Node) -> None:
        while z.parent.color is Color.RED:
            grandparent = z.parent.parent
            if z.parent is grandparent.left:
                uncle = grandparent.right
                if uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    z = grandparent
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._rotate_left(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._rotate_right(z.parent.parent)
            else:
                uncle = grandparent.left
                if uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    z = grandparent
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._rotate_right(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._rotate_left(z.parent.parent)
        self._root.color = Color.BLACK

    def _min(self, x: Node) -> Node:
        if x is self._nil:
            return self._nil
        while x.left is not self._nil:
            x = x.left
        return x

    def _max(self, x: Node) -> Node:
        if x is self._nil:
            return self._nil
        while x.right is not self._nil:
            x = x.right
        return x

    def _search(self, item: Any) -> Node:
        p = self._root
        while p is not self._nil:
            if _less(p.item, item):
                p = p.right
            elif _less(item, p.item):
                p = p.left
            else:
                break
        return p

    def _search_le(self, item: Any) -> Node:
        p = n = self._root
        while n is not self._nil:
            if _less(n.item, item):
                p = n
                n = n.right
            elif _less(item, n.item):
                p = n
                n = n.left
            else:
                return n
        if _less(p.item, item):
            return p
        return self._predecessor(p)

    def _successor(self, x: Node) -> Node:
        if x is self._nil:
            return self._nil
        if x.right is not self._nil:
            return self._min(x.right)
        y = x.parent
        while y is not self._nil and x is y.right:
            x = y
            y = y.parent
        return y

    def _predecessor(self, x: Node) -> Node:
        if x is self._nil:
            return self._nil
        if x.left is not self._nil:
            return self._max(x.left)
        y = x.parent
        while y is not self._nil and x is y.left:
            x = y
            y = y.parent
        return y

    def _delete(self, item: Any) -> Any:
        z = self._search(item)
        if z is self._nil:
            return None
        removed = z.item

        if z.left is self._nil or z.right is self._nil:
            y = z
        else:
            y = self._successor(z)

        x = y.left if y.left is not self._nil else y.right

        # The sentinel's parent is set too; the fixup relies on it.
        x.parent = y.parent

        if y.parent is self._nil:
            self._root = x
        elif y is y.parent.left:
            y.parent.left = x
        else:
            y.parent.right = x

        if y is not z:
            z.item = y.item

        if y.color is Color.BLACK:
            self._delete_fixup(x)

        self._count -= 1
        return removed

    def _delete_fixup(self, x: Node) -> None:
        while x is not self._root and x.color is Color.BLACK:
            if x is x.parent.left:
                w = x.parent.right
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_left(x.parent)
                    w = x.parent.right
                if w.left.color is Color.BLACK and w.right.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.right.color is Color.BLACK:
                        w.left.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_right(w)
                        w = x.parent.right
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.right.color = Color.BLACK
                    self._rotate_left(x.parent)
                    x = self._root
            else:
                w = x.parent.left
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_right(x.parent)
                    w = x.parent.left
                if w.left.color is Color.BLACK and w.right.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.left.color is Color.BLACK:
                        w.right.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_left(w)
                        w = x.parent.left
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.left.color = Color.BLACK
                    self._rotate_right(x.parent)
                    x = self._root
        x.color = Color.BLACK

    def _ascend(self, x: Node, pivot: Any) -> Iterator[Any]:
        if x is self._nil:
            return
        if not _less(x.item, pivot):
            yield from self._ascend(x.left, pivot)
            yield x.item
        yield from self._ascend(x.right, pivot)

    def _descend(self, x: Node, pivot: Any) -> Iterator[Any]:
        if x is self._nil:
            return
        if not _less(pivot, x.item):
            yield from self._descend(x.right, pivot)
            yield x.item
        yield from self._descend(x.left, pivot)

    def _ascend_range(self, x: Node, inf: Any, sup: Any) -> Iterator[Any]:
        if x is self._nil:
            return
        if not _less(x.item, sup):
            yield from self._ascend_range(x.left, inf, sup)
            return
        if _less(x.item, inf):
            yield from self._ascend_range(x.right, inf, sup)
            return
        yield from self._ascend_range(x.left, inf, sup)
        yield x.item
        yield from self._ascend_range(x.right, inf, sup)