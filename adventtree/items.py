"""Ready-made ordered item types for use with :class:`adventtree.rbtree.RBTree`.

Each type orders itself with ``less``. The comparison is deliberately
non-strict (``<=``), so a tree built from these items keeps duplicates
instead of merging them.
"""

from __future__ import annotations

__all__ = ["Int", "Uint32", "String"]

_UINT32_MASK = 0xFFFFFFFF


def _require_same(kind: type, than: object) -> None:
    if not isinstance(than, kind):
        raise TypeError(
            f"cannot compare {kind.__name__} with {type(than).__name__}"
        )


class Int(int):
    """A signed integer item."""

    __slots__ = ()

    def less(self, than: Int) -> bool:
        """Return True when this value is less than or equal to ``than``."""
        _require_same(Int, than)
        return int(self) <= int(than)


class Uint32(int):
    """An unsigned 32-bit integer item; construction wraps modulo 2**32."""

    __slots__ = ()

    def __new__(cls, value: int = 0) -> Uint32:
        return super().__new__(cls, int(value) & _UINT32_MASK)

    def less(self, than: Uint32) -> bool:
        """Return True when this value is less than or equal to ``than``."""
        _require_same(Uint32, than)
        return int(self) <= int(than)


class String(str):
    """A string item ordered lexicographically."""

    __slots__ = ()

    def less(self, than: String) -> bool:
        """Return True when this string sorts before or equal to ``than``."""
        _require_same(String, than)
        return str(self) <= str(than)