"""Stepping through integer-valued enumerations, with optional wrapping.

An enumeration may define a member ``limit__``. When it equals the last
value, stepping wraps around; when it is one past the last value, it marks
the end for :func:`enum_values`. A member ``start__`` gives the first value
when it is not 0.
"""

from __future__ import annotations

import operator
from collections.abc import Iterator
from enum import Enum
from typing import TypeVar

__all__ = ["increment", "decrement", "enum_values"]

E = TypeVar("E", bound=Enum)

_LIMIT = "limit__"
_START = "start__"


def _value(member: Enum) -> int:
    return operator.index(member.value)


def _require_member(member: object) -> Enum:
    if not isinstance(member, Enum):
        raise TypeError(f"expected an enumeration member, got {type(member).__name__}")
    return member


def _special(enum_cls: type[Enum], name: str) -> Enum | None:
    return enum_cls.__members__.get(name)


def _begin_value(enum_cls: type[Enum]) -> int:
    start = _special(enum_cls, _START)
    return _value(start) if start is not None else 0


def increment(member: E) -> E:
    """Return the member after ``member``, wrapping past ``limit__`` if defined.

    Raises ValueError when the next value is not a member of the enumeration.
    """
    _require_member(member)
    enum_cls = type(member)
    val = _value(member) + 1
    limit = _special(enum_cls, _LIMIT)
    if limit is not None and val > _value(limit):
        start = _special(enum_cls, _START)
        if start is not None:
            return start  # type: ignore[return-value]
        val = 0
    return enum_cls(val)


def decrement(member: E) -> E:
    """Return the member before ``member``, wrapping to ``limit__`` if defined.

    Raises ValueError when the previous value is not a member of the enumeration.
    """
    _require_member(member)
    enum_cls = type(member)
    val = _value(member)
    limit = _special(enum_cls, _LIMIT)
    if val == _begin_value(enum_cls) and limit is not None:
        return limit  # type: ignore[return-value]
    return enum_cls(val - 1)


def enum_values(enum_cls: type[E]) -> Iterator[E]:
    """Iterate the members from the first value up to, not including, ``limit__``."""
    if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
        raise TypeError(f"expected an enumeration class, got {enum_cls!r}")
    limit = _special(enum_cls, _LIMIT)
    if limit is None:
        raise TypeError(f"{enum_cls.__name__} defines no {_LIMIT} member")
    first = _begin_value(enum_cls)
    end = _value(limit)

    def _walk() -> Iterator[E]:
        for val in range(first, end):
            yield enum_cls(val)

    return _walk()