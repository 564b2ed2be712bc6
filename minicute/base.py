"""Test failures and the basic assertions that raise them."""

from __future__ import annotations

import inspect

from minicute.to_string import backslash_quote_tab_newline

__all__ = ["TestFailure", "check", "fail"]


class TestFailure(Exception):
    """An assertion that did not hold, with the place it was made."""

    __test__ = False

    def __init__(self, reason: str, filename: str, lineno: int) -> None:
        super().__init__(reason)
        self.reason = reason
        self.filename = filename
        self.lineno = lineno

    def what(self) -> str:
        """Return the failure reason."""
        return self.reason

    def __str__(self) -> str:
        return self.reason


def _make_failure(message: str, stacklevel: int = 1, detail: str = "") -> TestFailure:
    """Build a failure located at the frame ``stacklevel`` levels above the caller."""
    frame = inspect.currentframe()
    try:
        target = frame.f_back if frame is not None else None
        for _ in range(stacklevel):
            if target is None:
                break
            target = target.f_back
        if target is None:
            prefix, filename, lineno = "", "", 0
        else:
            prefix = target.f_code.co_name + ": "
            filename = target.f_code.co_filename
            lineno = target.f_lineno
    finally:
        del frame
    reason = prefix + backslash_quote_tab_newline(message) + detail
    return TestFailure(reason, filename, lineno)


def check(condition: object, message: str = "assertion") -> None:
    """Raise TestFailure with ``message`` unless ``condition`` is true."""
    if not condition:
        raise _make_failure(message, 1)


def fail(message: str = "FAIL()") -> None:
    """Raise TestFailure unconditionally."""
    raise _make_failure(message, 1)