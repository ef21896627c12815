from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from operator import itemgetter

from sortedcontainers import SortedKeyList

from intervalmap.typings import KT, VT, SupportsLessThanT


class ReadonlyDict(Mapping[KT, VT]):
    """
    An immutable dictionary-like mapping that prevents modification after creation.

    Any attempt to modify the mapping (assignment, deletion) raises TypeError.

    Example::

        settings = ReadonlyDict({"trace_assignments": False})
        settings["trace_assignments"]  # False
        settings["trace_assignments"] = True
            # TypeError: 'ReadonlyDict' object does not support item assignment
    """

    __slots__ = "_data"

    def __init__(self, data: Mapping[KT, VT]) -> None:
        self._data = dict(data)

    def __getitem__(self, key: KT) -> VT:
        return self._data[key]

    def __iter__(self) -> Iterator[KT]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __setitem__(self, key: KT, value: VT) -> None:
        raise TypeError(
            f"{self.__class__.__name__!r} object does not support item assignment"
        )

    def __delitem__(self, key: KT) -> None:
        raise TypeError(
            f"{self.__class__.__name__!r} object does not support item deletion"
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented


def format_items(items: Iterable[tuple[object, object]]) -> str:
    """Render ``(key, value)`` pairs like a dict literal without hashing the keys."""
    return "{" + ", ".join(f"{key!r}: {value!r}" for key, value in items) + "}"


class SortedLookupDict(MutableMapping[SupportsLessThanT, VT]):
    """
    A mutable mapping kept sorted by key, with floor/ceiling/lower/higher lookups.

    Keys only need a strict total order through ``<``; they are never hashed,
    so ordered but unhashable objects (e.g. ``@dataclass(order=True)``
    instances) work. Items live in a ``SortedKeyList`` keyed on the item key,
    lookups and updates are logarithmic in the number of keys.

    Unlike a plain dict the neighbour queries return the whole ``(key, value)``
    item, since callers usually need to know which key answered.

    Example::

        lookup = SortedLookupDict({10: "b", 20: "a"})
        lookup.floor(15)  # (10, "b") (greatest key <= 15)
        lookup.ceiling(15)  # (20, "a") (smallest key >= 15)
        lookup.lower(10)  # None (nothing strictly below 10)
        lookup.higher(10)  # (20, "a")
        lookup[15] = "c"
        list(lookup)  # [10, 15, 20]
    """

    __slots__ = "_items"

    def __init__(
        self, data: Mapping[SupportsLessThanT, VT] | None = None
    ) -> None:
        items = data.items() if data is not None else ()
        self._items: SortedKeyList = SortedKeyList(items, key=itemgetter(0))

    def _index(self, key: SupportsLessThanT) -> int | None:
        """Position of the item stored under ``key``, or None."""
        pos = self._items.bisect_key_left(key)
        if pos < len(self._items) and not (key < self._items[pos][0]):
            return pos
        return None

    def __getitem__(self, key: SupportsLessThanT) -> VT:
        pos = self._index(key)
        if pos is None:
            raise KeyError(key)
        return self._items[pos][1]

    def __setitem__(self, key: SupportsLessThanT, value: VT) -> None:
        pos = self._index(key)
        if pos is not None:
            del self._items[pos]
        self._items.add((key, value))

    def __delitem__(self, key: SupportsLessThanT) -> None:
        pos = self._index(key)
        if pos is None:
            raise KeyError(key)
        del self._items[pos]

    def __iter__(self) -> Iterator[SupportsLessThanT]:
        return (key for key, _ in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return self._index(key) is not None  # type: ignore[arg-type]

    def _item_at(self, pos: int) -> tuple[SupportsLessThanT, VT] | None:
        if pos < 0 or pos >= len(self._items):
            return None
        return self._items[pos]

    def floor(self, key: SupportsLessThanT) -> tuple[SupportsLessThanT, VT] | None:
        """
        Returns the item with the greatest key <= the given key,
        or None if there is no such key.
        """
        return self._item_at(self._items.bisect_key_right(key) - 1)

    def ceiling(
        self, key: SupportsLessThanT
    ) -> tuple[SupportsLessThanT, VT] | None:
        """
        Returns the item with the smallest key >= the given key,
        or None if there is no such key.
        """
        return self._item_at(self._items.bisect_key_left(key))

    def lower(self, key: SupportsLessThanT) -> tuple[SupportsLessThanT, VT] | None:
        """
        Returns the item with the greatest key < the given key,
        or None if there is no such key.
        """
        return self._item_at(self._items.bisect_key_left(key) - 1)

    def higher(self, key: SupportsLessThanT) -> tuple[SupportsLessThanT, VT] | None:
        """
        Returns the item with the smallest key > the given key,
        or None if there is no such key.
        """
        return self._item_at(self._items.bisect_key_right(key))

    def first(self) -> tuple[SupportsLessThanT, VT] | None:
        return self._item_at(0)

    def last(self) -> tuple[SupportsLessThanT, VT] | None:
        return self._item_at(len(self._items) - 1)

    def range(
        self,
        start: SupportsLessThanT | None = None,
        end: SupportsLessThanT | None = None,
        inclusive: tuple[bool, bool] = (True, False),
    ) -> Iterator[tuple[SupportsLessThanT, VT]]:
        """
        Return an iterator over (key, value) pairs with keys between start and end.
        A bound of None is unbounded; ``inclusive`` defaults to [start, end).

        Example:
            >>> lookup = SortedLookupDict({1: "a", 3: "c", 5: "e", 7: "g"})
            >>> list(lookup.range(2, 6))  # [(3, "c"), (5, "e")]
            >>> list(lookup.range(3, 5, inclusive=(True, True)))  # [(3, "c"), (5, "e")]
        """
        return self._items.irange_key(start, end, inclusive=inclusive)

    def copy(self) -> SortedLookupDict[SupportsLessThanT, VT]:
        """Return a shallow copy."""
        other: SortedLookupDict[SupportsLessThanT, VT] = SortedLookupDict()
        other._items.update(self._items)
        return other

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({format_items(self._items)})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SortedLookupDict):
            return list(self._items) == list(other._items)
        if isinstance(other, Mapping):
            return list(self._items) == sorted(other.items(), key=itemgetter(0))
        return NotImplemented
