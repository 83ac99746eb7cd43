"""A sequence that is known to be sorted."""

from bisect import bisect_left
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from .errors import NotSortedError


class Sorted(Sequence):
    """
    Immutable sequence whose items are guaranteed to be in non-decreasing order.

    The order is checked once on construction, so lookups can binary search
    without re-validating on every call.

    Usage:
        Sorted(["a", "b", "c"])          # checks the order
        Sorted.new_sorted(["c", "a"])    # sorts first, cannot fail
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Any] = ()):
        items = tuple(items)
        for i in range(1, len(items)):
            if items[i] < items[i - 1]:
                raise NotSortedError(i)
        self._items = items

    @classmethod
    def new_sorted(cls, items: Iterable[Any]) -> "Sorted":
        """Sort the items and wrap them."""
        return cls(sorted(items))

    @classmethod
    def coerce(cls, items: "Sorted | Iterable[Any]") -> "Sorted":
        """Return `items` unchanged if already Sorted, otherwise sort them."""
        if isinstance(items, cls):
            return items
        return cls.new_sorted(items)

    def binary_search(self, item: Any) -> int:
        """
        Find the index of an item.

        Raises:
            ValueError: If the item is not present.
        """
        i = bisect_left(self._items, item)
        if i < len(self._items) and self._items[i] == item:
            return i
        raise ValueError(f"{item!r} is not in Sorted")

    def as_tuple(self) -> tuple:
        return self._items

    def __contains__(self, item: object) -> bool:
        i = bisect_left(self._items, item)
        return i < len(self._items) and self._items[i] == item

    def __getitem__(self, index):
        if isinstance(index, slice):
            # Forward slices keep the order, reversed ones do not
            if (index.step or 1) < 0:
                return self._items[index]
            result = Sorted.__new__(Sorted)
            result._items = self._items[index]
            return result
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sorted):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"Sorted({list(self._items)!r})"
