"""Sorting of indexed objects by one or more numeric keys."""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class SortObject:
    """An index paired with the values it is sorted by."""

    index: int
    values: tuple[Number, ...]


class Sort:
    """Collects indexed value tuples and sorts them lexicographically."""

    def __init__(self, width: int = 1) -> None:
        if width < 1:
            raise ValueError("At least one sort value per object is required.")
        self.width = width
        self._objects: list[SortObject] = []

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[SortObject]:
        return iter(self._objects)

    def add(self, index: int, values: Union[Number, Iterable[Number]]) -> None:
        """Add an object with ``index`` sorted by ``values``."""
        items = (values,) if isinstance(values, numbers.Number) else tuple(values)
        if len(items) != self.width:
            raise ValueError(f"Expected {self.width} sort values, got {len(items)}.")
        if not all(isinstance(v, numbers.Real) and not isinstance(v, bool) for v in items):
            raise TypeError("Can only sort numerical data types.")
        self._objects.append(SortObject(index, items))

    def sort_all(self, ascending: bool = True) -> None:
        """Sort by the values, first value first; descending order is the reversed ascending order."""
        self._objects.sort(key=lambda obj: obj.values)
        if not ascending:
            self._objects.reverse()

    def index(self, i: int) -> int:
        """Index of the ``i``-th object in the current order."""
        return self._objects[i].index

    def values(self, i: int) -> tuple[Number, ...]:
        """Values of the ``i``-th object in the current order."""
        return self._objects[i].values