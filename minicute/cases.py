"""Named test cases, suites and helpers that build cases."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from minicute.to_string import type_name

__all__ = [
    "Case",
    "Suite",
    "repeated",
    "suite_case",
    "member_case",
    "simple_member_case",
    "context_member_case",
]


class Case:
    """A callable test with a name."""

    __test__ = False
    __slots__ = ("func", "name")

    def __init__(self, func: Callable[[], Any] | str, name: Any = None) -> None:
        if isinstance(func, str) and callable(name):
            func, name = name, func
        if not callable(func):
            raise TypeError(f"test must be callable, got {type_name(func)}")
        if name is None:
            name = getattr(func, "__qualname__", None) or type_name(func)
        self.func = func
        self.name = str(name)

    def __call__(self) -> None:
        self.func()

    def __repr__(self) -> str:
        return f"Case({self.name!r})"


def _as_case(item: Case | Callable[[], Any]) -> Case:
    return item if isinstance(item, Case) else Case(item)


class Suite(list):
    """An ordered list of cases."""

    def __init__(self, cases: Iterable[Case | Callable[[], Any]] = ()) -> None:
        super().__init__(_as_case(case) for case in cases)

    def __iadd__(self, other):
        if isinstance(other, Case) or callable(other):
            self.append(_as_case(other))
        else:
            self.extend(_as_case(case) for case in other)
        return self


def repeated(case: Case | Callable[[], Any], times: int) -> Case:
    """Return a case that runs ``case`` ``times`` times in a row."""
    inner = _as_case(case)

    def run() -> None:
        for _ in range(times):
            inner()

    return Case(run, f"{inner.name} {times} times repeated")


def suite_case(suite: Iterable[Case | Callable[[], Any]], name: str) -> Case:
    """Return a case running every case of ``suite``; the first failure stops it."""
    cases = [_as_case(case) for case in suite]

    def run() -> None:
        for case in cases:
            case()

    return Case(run, name)


def member_case(obj: object, method_name: str) -> Case:
    """Return a case calling ``method_name`` on the given object."""
    method = getattr(obj, method_name)
    return Case(method, f"{type_name(obj)}.{method_name}")


def simple_member_case(cls: type, method_name: str) -> Case:
    """Return a case that makes a fresh ``cls()`` and calls ``method_name`` on it."""
    getattr(cls, method_name)

    def run() -> None:
        getattr(cls(), method_name)()

    return Case(run, f"{type_name(cls)}.{method_name}")


def context_member_case(context: object, cls: type, method_name: str) -> Case:
    """Return a case that makes ``cls(context)`` and calls ``method_name`` on it."""
    getattr(cls, method_name)

    def run() -> None:
        getattr(cls(context), method_name)()

    return Case(run, f"{type_name(cls)}.{method_name}")