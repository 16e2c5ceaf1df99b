"""A bidirectional mapping between values and small dense indices."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

E = TypeVar("E", bound=Hashable)


class Palette(Generic[E]):
    """Assigns each distinct value an index in order of first appearance."""

    def __init__(self) -> None:
        self._indices: dict[E, int] = {}
        self._values: list[E] = []

    def index(self, elem: E) -> int:
        """Return the index of ``elem``, registering it if it is new."""
        try:
            return self._indices[elem]
        except KeyError:
            self._values.append(elem)
            position = len(self._values) - 1
            self._indices[elem] = position
            return position

    def __getitem__(self, index: int) -> E:
        return self._values[index]

    def __iter__(self) -> Iterator[E]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, elem: object) -> bool:
        return elem in self._indices

    def __repr__(self) -> str:
        return f"Palette({self._values!r})"