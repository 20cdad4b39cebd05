import random
from dataclasses import dataclass

from hypothesis import given, settings
from hypothesis import strategies as st

from adventtree.items import String, Uint32
from adventtree.rbtree import Color, RBTree


@dataclass(frozen=True)
class Key:
    value: object

    def less(self, than):
        return self.value < than.value


@dataclass(frozen=True)
class Record:
    id: int
    text: str

    def less(self, than):
        return self.id < than.id


@dataclass(frozen=True)
class Pair:
    key: int
    flag: bool

    def less(self, than):
        return self.key < than.key


def _black_height(tree, node):
    nil = tree._nil
    if node is nil:
        return 1
    if node.color is Color.RED:
        assert node.left.color is Color.BLACK
        assert node.right.color is Color.BLACK
    for child in (node.left, node.right):
        if child is not nil:
            assert child.parent is node
    left = _black_height(tree, node.left)
    right = _black_height(tree, node.right)
    assert left == right
    return left + (1 if node.color is Color.BLACK else 0)


def _check_invariants(tree):
    assert tree._root.color is Color.BLACK
    _black_height(tree, tree._root)


def test_insert_and_delete():
    tree = RBTree()
    for m in range(1000):
        tree.insert(Key(m))
    assert len(tree) == 1000
    for m in range(1000, 0, -1):
        tree.delete(Key(m))
    assert len(tree) == 1
    assert tree.get(Key(0)) == Key(0)
    _check_invariants(tree)


def test_insert_or_get():
    tree = RBTree()
    items = [Record(1, "this"), Record(2, "is"), Record(3, "a"), Record(4, "test")]
    for item in items:
        tree.insert(item)

    got = tree.insert_or_get(Record(items[0].id, "not"))
    assert got.text == items[0].text

    got = tree.insert_or_get(Record(5, "new"))
    assert got.text == "new"
    assert len(tree) == 5


def test_insert_string():
    tree = RBTree()
    tree.insert(String("go"))
    tree.insert(String("lang"))
    assert len(tree) == 2


def test_insert_dup():
    tree = RBTree()
    first = tree.insert(Key("go"))
    second = tree.insert(Key("go"))
    tree.insert(Key("go"))
    assert len(tree) == 1
    assert second is first


def test_descend():
    tree = RBTree()
    for m in range(10):
        tree.insert(Key(m))
    assert list(tree.descend(Key(1))) == [Key(1), Key(0)]
    assert list(tree.descend(Key(10))) == [Key(v) for v in range(9, -1, -1)]


def test_get():
    tree = RBTree()
    for v in (1, 2, 3):
        tree.insert(Key(v))
    assert tree.get(Key(100)) is None
    assert tree.get(Key(1)) == Key(1)


def test_ascend():
    tree = RBTree()
    for s in "abcd":
        tree.insert(Key(s))
    tree.delete(tree.min())
    assert list(tree.ascend(tree.min())) == [Key("b"), Key("c"), Key("d")]


def test_max():
    tree = RBTree()
    for s in ("z", "h", "a"):
        tree.insert(String(s))
    assert tree.max() == String("z")


def test_ascend_range():
    tree = RBTree()
    for s in ["a", "b", "c", "aa", "ab", "ac", "abc", "acb", "bac"]:
        tree.insert(Key(s))
    result = list(tree.ascend_range(Key("ab"), Key("b")))
    assert result == [Key("ab"), Key("abc"), Key("ac"), Key("acb")]


def test_ascend_stops_when_consumer_stops():
    tree = RBTree()
    for m in range(10):
        tree.insert(Key(m))
    taken = []
    for item in tree.ascend(Key(3)):
        taken.append(item)
        if len(taken) == 2:
            break
    assert taken == [Key(3), Key(4)]


@settings(max_examples=50, deadline=None)
@given(st.dictionaries(st.integers(min_value=0, max_value=2**32 - 1), st.booleans(), max_size=300))
def test_insert_and_delete_large(mapping):
    tree = RBTree()
    for k, v in mapping.items():
        tree.insert(Pair(k, v))
    for k, v in mapping.items():
        found = tree.get(Pair(k, v))
        assert found is not None and found.flag == v
    for k, v in mapping.items():
        if not v:
            assert tree.delete(Pair(k, v)) == Pair(k, v)
    for k, v in mapping.items():
        found = tree.get(Pair(k, v))
        if v:
            assert found is not None and found.flag == v
        else:
            assert found is None
    assert len(tree) == sum(mapping.values())
    _check_invariants(tree)


@settings(max_examples=50, deadline=None)
@given(st.sets(st.integers(min_value=0, max_value=2**32 - 1), max_size=300))
def test_index_large(keys):
    tree = RBTree()
    for k in keys:
        tree.insert(Uint32(k))
    node = tree.first()
    for k in sorted(keys):
        assert int(node.item) == k
        node = tree.next(node)
    assert node is None


def test_random_operations_keep_invariants():
    rng = random.Random(7)
    tree = RBTree()
    present = set()
    for _ in range(2000):
        value = rng.randrange(500)
        if rng.random() < 0.6:
            tree.insert(Key(value))
            present.add(value)
        else:
            removed = tree.delete(Key(value))
            if value in present:
                assert removed == Key(value)
                present.discard(value)
            else:
                assert removed is None
    _check_invariants(tree)
    assert len(tree) == len(present)
    assert [k.value for k in tree] == sorted(present)


def test_search_returns_node():
    tree = RBTree()
    for v in (5, 1, 9):
        tree.insert(Key(v))
    node = tree.search(Key(9))
    assert node.item == Key(9)
    assert tree.search(Key(4)) is None


def test_search_le():
    tree = RBTree()
    for v in (10, 20, 30):
        tree.insert(Key(v))
    assert tree.search_le(Key(25)).item == Key(20)
    assert tree.search_le(Key(20)).item == Key(20)
    assert tree.search_le(Key(35)).item == Key(30)
    assert tree.search_le(Key(5)) is None


def test_search_le_empty_tree():
    assert RBTree().search_le(Key(1)) is None


def test_prev_walks_backwards_from_last():
    tree = RBTree()
    values = [4, 8, 1, 7, 3]
    for v in values:
        tree.insert(Key(v))
    node = tree.last()
    seen = []
    while node is not None:
        seen.append(node.item.value)
        node = tree.prev(node)
    assert seen == sorted(values, reverse=True)


def test_next_and_prev_of_none():
    tree = RBTree()
    assert tree.next(None) is None
    assert tree.prev(None) is None


def test_empty_tree():
    tree = RBTree()
    assert len(tree) == 0
    assert tree.min() is None
    assert tree.max() is None
    assert tree.first() is None
    assert tree.last() is None
    assert list(tree) == []


def test_none_items_are_ignored():
    tree = RBTree()
    assert tree.insert(None) is None
    assert tree.insert_or_get(None) is None
    assert tree.delete(None) is None
    assert tree.get(None) is None
    assert len(tree) == 0


def test_delete_missing_returns_none():
    tree = RBTree()
    tree.insert(Key(1))
    assert tree.delete(Key(2)) is None
    assert len(tree) == 1


@given(st.lists(st.integers(), max_size=200))
def test_iteration_is_sorted_unique(values):
    tree = RBTree()
    for v in values:
        tree.insert(Key(v))
    assert [k.value for k in tree] == sorted(set(values))
    assert len(tree) == len(set(values))