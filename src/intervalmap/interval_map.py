"""Piecewise-constant mapping over an ordered key space.

An :class:`IntervalMap` associates every key of an unbounded, totally ordered
domain with a value while only storing the keys at which the value changes.

Example::

    m = IntervalMap("A")
    m.assign(1, 3, "B")
    [m[k] for k in range(5)]  # ["A", "B", "B", "A", "A"]
    m.boundaries()  # ((1, 'B'), (3, 'A'))

Keys only need a strict total order through ``<`` and are never hashed;
values must support ``==``. The container is not synchronized, callers sharing
it across threads must lock around it.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from typing import Generic

from intervalmap.config import config
from intervalmap.exceptions import InvariantViolationError
from intervalmap.structures import SortedLookupDict, format_items
from intervalmap.typings import VT, SupportsLessThanT

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("LOG_LEVEL", logging.DEBUG))


class IntervalMap(Generic[SupportsLessThanT, VT]):
    """
    Maps half-open key ranges to values, storing only value changes.

    The boundary ``(k, v)`` means ``v`` holds on ``[k, next boundary)``. Keys
    below the first boundary map to the default value. The representation is
    kept canonical after every mutation:

    - the first boundary never carries the default value;
    - two consecutive boundaries never carry equal values.

    Since every assignment is bounded, a non-empty map always ends with a
    boundary that restores the default value.
    """

    __slots__ = ("_default", "_map", "_trace")

    def __init__(self, default_value: VT, trace: bool | None = None) -> None:
        """
        :param default_value: Value of every key until something is assigned.
        :param trace: Log each assignment at DEBUG level. Defaults to the
            ``trace_assignments`` setting.
        """
        self._default = default_value
        self._map: SortedLookupDict[SupportsLessThanT, VT] = SortedLookupDict()
        self._trace = config["trace_assignments"] if trace is None else trace

    @property
    def default_value(self) -> VT:
        return self._default

    def get_default_value(self) -> VT:
        return self._default

    def size(self) -> int:
        """Number of stored boundaries, not the size of the key domain."""
        return len(self._map)

    def __len__(self) -> int:
        return len(self._map)

    # --- Lookup ---

    def value_at(self, key: SupportsLessThanT) -> VT:
        """Return the value effective at ``key``."""
        item = self._map.floor(key)
        if item is None:
            return self._default
        return item[1]

    def __getitem__(self, key: SupportsLessThanT) -> VT:
        return self.value_at(key)

    # --- Canonicity ---

    def _first_violation(self) -> str | None:
        first = self._map.first()
        if first is None:
            return None
        if first[1] == self._default:
            return f"first boundary {first[0]!r} holds the default value {first[1]!r}"

        prev_key, prev_value = first
        for key, value in self._map.range(prev_key, inclusive=(False, True)):
            if value == prev_value:
                return (
                    f"boundaries {prev_key!r} and {key!r} both hold {value!r}"
                )
            prev_key, prev_value = key, value
        return None

    def is_canonical(self) -> bool:
        """True if no boundary is redundant."""
        return self._first_violation() is None

    def check_canonical(self) -> None:
        """Raises InvariantViolationError naming the first redundant boundary."""
        violation = self._first_violation()
        if violation is not None:
            raise InvariantViolationError(violation)

    # --- Assign ---

    def assign(
        self, key_begin: SupportsLessThanT, key_end: SupportsLessThanT, value: VT
    ) -> None:
        """
        Assign ``value`` to every key in ``[key_begin, key_end)``.

        Keys outside the range keep their value. An empty or inverted range
        (``not key_begin < key_end``) is ignored.
        """
        if not (key_begin < key_end):
            logger.debug(
                "Ignored empty range [%r, %r) for %r", key_begin, key_end, value
            )
            return

        if self._trace:
            logger.debug("Assigning %r to [%r, %r)", value, key_begin, key_end)

        if not self._map:
            if value != self._default:
                self._map[key_begin] = value
                self._map[key_end] = self._default
        else:
            self._assign_span(key_begin, key_end, value)

        if self._trace:
            logger.debug("%s", self.dump())

    def _assign_span(
        self, key_begin: SupportsLessThanT, key_end: SupportsLessThanT, value: VT
    ) -> None:
        boundaries = self._map
        last_key, _ = boundaries.last()
        if last_key < key_end:
            last_key = key_end

        # Collect first, mutate afterwards.
        doomed = [key for key, _ in boundaries.range(key_begin, key_end)]
        # The value just past the range must survive the deletions.
        pending: tuple[SupportsLessThanT, VT] | None = None
        if key_end not in boundaries:
            value_at_end = self.value_at(key_end)
            if value_at_end != value:
                pending = (key_end, value_at_end)

        if pending is not None:
            boundaries[pending[0]] = pending[1]
        for key in doomed:
            del boundaries[key]

        boundaries[key_begin] = value
        after = boundaries.higher(key_begin)
        if after is not None and after[1] == value:
            del boundaries[after[0]]
        before = boundaries.lower(key_begin)
        if before is not None and before[1] == value:
            del boundaries[key_begin]

        self._trim_front()
        self._trim_tail()
        if not boundaries:
            return

        _, tail_value = boundaries.last()
        if tail_value != self._default:
            boundaries[last_key] = self._default

    def _trim_front(self) -> None:
        while (first := self._map.first()) is not None and first[1] == self._default:
            del self._map[first[0]]

    def _trim_tail(self) -> None:
        # A default-valued tail is redundant only when nothing before it differs.
        while (last := self._map.last()) is not None and last[1] == self._default:
            before = self._map.lower(last[0])
            if before is not None and before[1] != self._default:
                break
            del self._map[last[0]]

    # --- Views ---

    def boundaries(self) -> tuple[tuple[SupportsLessThanT, VT], ...]:
        """Snapshot of the stored ``(key, value)`` boundaries in key order."""
        return tuple(self._map.range())

    def intervals(
        self,
    ) -> Iterator[tuple[SupportsLessThanT, SupportsLessThanT | None, VT]]:
        """
        Yield ``(start, end, value)`` for every stored boundary.

        ``end`` is the next boundary, or None for the last one, whose value
        extends to infinity.
        """
        items = self._map.range()
        current = next(items, None)
        while current is not None:
            following = next(items, None)
            end = None if following is None else following[0]
            yield current[0], end, current[1]
            current = following

    def copy(self) -> IntervalMap[SupportsLessThanT, VT]:
        other: IntervalMap[SupportsLessThanT, VT] = IntervalMap(
            self._default, trace=self._trace
        )
        other._map = self._map.copy()
        return other

    def dump(self) -> str:
        """Human readable rendering: the default value, then one line per boundary."""
        lines = [f"default: {self._default!r}", "boundaries:"]
        lines.extend(f"  {key!r} -> {value!r}" for key, value in self._map.range())
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IntervalMap):
            return self._default == other._default and self._map == other._map
        return NotImplemented

    def __repr__(self) -> str:
        boundaries = format_items(self._map.range())
        return f"{self.__class__.__name__}({self._default!r}, {boundaries})"
