"""Growable list of qualifying player names built during a single scan."""

from __future__ import annotations

import os
from bisect import bisect_right
from enum import Enum
from typing import Iterator, List, Optional

from .errors import CapacityExceeded


class Ordering(str, Enum):
    LEXIO = "lexio"
    UNORDERED = "unordered"


class RankedList:
    """Names inserted one at a time, kept byte-wise sorted in ``LEXIO`` mode.

    ``LEXIO`` insertion places the new name after every existing name that
    compares ``<=`` to it (comparing file-system encoded bytes), so the list is
    sorted after every insert. ``UNORDERED`` simply appends.
    """

    def __init__(self, order: Ordering | str = Ordering.LEXIO, capacity: Optional[int] = None):
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self.order = Ordering(order)
        self.capacity = capacity
        self._names: List[str] = []
        self._keys: List[bytes] = []

    def insert(self, name: str) -> int:
        """Insert ``name`` and return the index it landed at."""

        if self.capacity is not None and len(self._names) >= self.capacity:
            raise CapacityExceeded(
                f"Cannot insert {name!r}: ranked list is full ({self.capacity} names)",
                path=name,
            )

        if self.order is Ordering.UNORDERED:
            self._names.append(name)
            return len(self._names) - 1

        key = os.fsencode(name)
        index = bisect_right(self._keys, key)
        self._keys.insert(index, key)
        self._names.insert(index, name)
        return index

    @property
    def count(self) -> int:
        return len(self._names)

    def names(self) -> List[str]:
        return list(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __getitem__(self, index: int) -> str:
        return self._names[index]
