"""Rendering of values as text for assertion messages."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

__all__ = [
    "backslash_quote_tab_newline",
    "hexit",
    "type_name",
    "to_string",
    "diff_values",
]

_ESCAPES = str.maketrans({"\n": "\\n", "\t": "\\t", "\\": "\\\\", "\r": "\\r"})


def backslash_quote_tab_newline(text: str) -> str:
    """Escape newlines, tabs, carriage returns and backslashes."""
    return text.translate(_ESCAPES)


def hexit(value: int) -> str:
    """Render a non-negative integer in upper-case hexadecimal without prefix."""
    if value < 0:
        raise ValueError(f"hexit needs a non-negative value, got {value}")
    return format(value, "X")


def type_name(obj: object) -> str:
    """Return the readable name of a class, or of the class of an object."""
    cls = obj if isinstance(obj, type) else type(obj)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _render_bool(value: bool, boolalpha: bool) -> str:
    if boolalpha:
        return "true" if value else "false"
    return "1" if value else "0"


def _render_items(name: str, items: Iterable[str]) -> str:
    return name + "{" + ",".join("\n" + item for item in items) + "}"


def _render(value: object, boolalpha: bool = False) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return _render_bool(value, boolalpha)
    if isinstance(value, (bytes, bytearray)):
        return _render_items(type_name(value), ("0x" + hexit(b) for b in value))
    if isinstance(value, tuple) and type(value).__str__ is object.__str__:
        return _render_items(
            type_name(value), (_render(item, boolalpha=True) for item in value)
        )
    if isinstance(value, Mapping):
        return _render_items(
            type_name(value),
            (
                f"[{_render(key, boolalpha)} -> {_render(val, boolalpha)}]"
                for key, val in value.items()
            ),
        )
    cls = type(value)
    if cls.__str__ is not object.__str__:
        return str(value)
    if isinstance(value, Iterable):
        return _render_items(
            type_name(value), (_render(item, boolalpha) for item in value)
        )
    if cls.__repr__ is not object.__repr__:
        return repr(value)
    return f"no operator<<(ostream&, {type_name(value)})"


def to_string(value: object) -> str:
    """Render a value the way assertion messages show it."""
    return _render(value)


def diff_values(
    expected: object,
    actual: object,
    left: str = "expected",
    right: str = "but was",
) -> str:
    """Build the tab-separated comparison message for two values."""
    return (
        f" {left}:\t{backslash_quote_tab_newline(to_string(expected))}\t"
        f"{right}:\t{backslash_quote_tab_newline(to_string(actual))}\t"
    )