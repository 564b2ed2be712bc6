"""Relational assertions that report both operands on failure."""

from __future__ import annotations

import operator
from collections.abc import Callable

from minicute.base import _make_failure
from minicute.to_string import diff_values

__all__ = [
    "assert_less",
    "assert_less_equal",
    "assert_greater",
    "assert_greater_equal",
    "assert_not_equal",
]


def _assert_relop(
    relop: Callable[[object, object], object],
    left: object,
    right: object,
    message: str,
) -> None:
    if relop(left, right):
        return
    raise _make_failure(message, 2, diff_values(left, right, "left", "right"))


def assert_less(left: object, right: object, message: str = "left < right") -> None:
    """Fail unless ``left < right``."""
    _assert_relop(operator.lt, left, right, message)


def assert_less_equal(
    left: object, right: object, message: str = "left <= right"
) -> None:
    """Fail unless ``left <= right``."""
    _assert_relop(operator.le, left, right, message)


def assert_greater(left: object, right: object, message: str = "left > right") -> None:
    """Fail unless ``left > right``."""
    _assert_relop(operator.gt, left, right, message)


def assert_greater_equal(
    left: object, right: object, message: str = "left >= right"
) -> None:
    """Fail unless ``left >= right``."""
    _assert_relop(operator.ge, left, right, message)


def assert_not_equal(
    left: object, right: object, message: str = "left != right"
) -> None:
    """Fail unless ``left != right``."""
    _assert_relop(operator.ne, left, right, message)