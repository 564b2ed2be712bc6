"""A read-only sequence of values that compares equal to any matching iterable."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["Range", "make_range"]


class Range:
    """Values taken from an iterable, comparable element-wise with other iterables."""

    __slots__ = ("_items",)

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._items = tuple(iterable)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Iterable) or isinstance(other, (str, bytes)) and not self._items:
            if not isinstance(other, Iterable):
                return NotImplemented
        others = tuple(other)
        return len(others) == len(self._items) and all(
            mine == theirs for mine, theirs in zip(self._items, others)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Range({list(self._items)!r})"


def make_range(iterable: Iterable[Any]) -> Range:
    """Return a Range over the values of ``iterable``."""
    return Range(iterable)