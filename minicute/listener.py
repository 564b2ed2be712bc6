"""Listeners that are told about the progress of a test run."""

from __future__ import annotations

from typing import Any

from minicute.base import TestFailure

__all__ = ["NullListener", "CountingListener"]


class NullListener:
    """A listener that ignores every event; it defines the listener protocol."""

    def begin(self, suite: Any, info: str, count: int) -> None:
        """Called before a suite of ``count`` cases starts."""

    def end(self, suite: Any, info: str) -> None:
        """Called after a suite has finished."""

    def start(self, case: Any) -> None:
        """Called before a single case runs."""

    def success(self, case: Any, message: str) -> None:
        """Called when a case passed."""

    def failure(self, case: Any, failure: TestFailure) -> None:
        """Called when a case raised a test failure."""

    def error(self, case: Any, what: str) -> None:
        """Called when a case raised any other exception."""


class CountingListener(NullListener):
    """Counts suites, cases and outcomes, and passes every event on."""

    def __init__(self, inner: NullListener | None = None) -> None:
        self.inner = inner if inner is not None else NullListener()
        self.number_of_tests = 0
        self.successful_tests = 0
        self.failed_tests = 0
        self.errors = 0
        self.number_of_suites = 0
        self.number_of_tests_in_suites = 0

    def begin(self, suite: Any, info: str, count: int) -> None:
        self.number_of_suites += 1
        self.number_of_tests_in_suites += count
        self.inner.begin(suite, info, count)

    def end(self, suite: Any, info: str) -> None:
        self.inner.end(suite, info)

    def start(self, case: Any) -> None:
        self.number_of_tests += 1
        self.inner.start(case)

    def success(self, case: Any, message: str) -> None:
        self.successful_tests += 1
        self.inner.success(case, message)

    def failure(self, case: Any, failure: TestFailure) -> None:
        self.failed_tests += 1
        self.inner.failure(case, failure)

    def error(self, case: Any, what: str) -> None:
        self.errors += 1
        self.inner.error(case, what)