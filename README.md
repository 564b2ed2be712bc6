# minicute

A small unit-testing toolkit. It has assertions that report both sides
of a failed comparison, named test cases and suites, repeated and nested
cases, listeners that observe a run, a range type that compares with any
iterable, and helpers for stepping through enumerations with wrap-around.

## Installation

```
pip install minicute
```

## Assertions

`minicute.base` holds `TestFailure`, `check` and `fail`;
`minicute.relops` holds `assert_less`, `assert_less_equal`,
`assert_greater`, `assert_greater_equal` and `assert_not_equal`.

```python
from minicute.base import TestFailure, check, fail
from minicute.relops import assert_less

check(1 + 1 == 2, "arithmetic works")

try:
    assert_less(5, 3, "five < three")
except TestFailure as failure:
    print(failure.what())
    # "<calling function>: five < three left:\t5\tright:\t3\t"
    print(failure.filename, failure.lineno)
```

A failure's reason starts with the name of the function that made the
assertion, followed by the message with tabs, newlines, carriage returns
and backslashes escaped. `filename` and `lineno` give the place of the
assertion. `fail()` raises unconditionally, with the message `FAIL()`
unless another is given.

## Rendering values

`minicute.to_string` turns values into the text used in messages:

- `to_string(value)` — strings as they are, `True`/`False` as `1`/`0`,
  tuples, mappings, bytes and other iterables as the type name followed by
  their items in braces, one per line; objects without `__str__` or
  `__repr__` as `no operator<<(ostream&, <type name>)`.
- `diff_values(expected, actual, left="expected", right="but was")` —
  the tab-separated comparison text, e.g. `" expected:\t1\tbut was:\t2\t"`.
- `backslash_quote_tab_newline(text)`, `hexit(value)` (upper-case hex,
  non-negative values only) and `type_name(obj)`.

## Cases and suites

```python
from minicute.base import check
from minicute.cases import Case, Suite, repeated, suite_case

def test_addition():
    check(2 + 2 == 4, "2 + 2 == 4")

suite = Suite()
suite += Case(test_addition, "test_addition")
suite += repeated(Case(test_addition, "test_addition"), 3)
# the second case is named "test_addition 3 times repeated"

everything = suite_case(suite, "everything")
everything()   # runs every case in order; the first failure stops it
```

A `Case` takes a callable and an optional name (the callable's qualified
name by default); the name may also come first. `Suite` is a list of
cases; `+=` appends a case or a callable, or extends with an iterable of
them.

`member_case(obj, "method")` calls a method of an existing object,
`simple_member_case(cls, "method")` calls it on a fresh `cls()` each run,
and `context_member_case(context, cls, "method")` on a fresh
`cls(context)`. Their cases are named `<type name>.<method>`.

## Listeners

`minicute.listener.NullListener` defines the events of a run — `begin`,
`end`, `start`, `success`, `failure` and `error` — and ignores them all.
`CountingListener` counts `number_of_suites`, `number_of_tests_in_suites`,
`number_of_tests`, `successful_tests`, `failed_tests` and `errors`, and
passes every event on to the listener it wraps (a `NullListener` by
default).

## Ranges

```python
from minicute.value_range import make_range

assert make_range([1, 2, 3]) == (1, 2, 3)
assert make_range([1, 2]) != [1, 2, 3]
```

A `Range` holds the values of an iterable, supports `len()` and
iteration, and equals any iterable with the same elements in the same
order.

## Enum iteration

`minicute.enum_iter` steps through enumerations with integer values.
A member named `limit__` equal to the last value makes stepping wrap:

```python
import enum
from minicute.enum_iter import increment, decrement

class Color(enum.IntEnum):
    BLACK = 0
    BLUE = 1
    WHITE = 2
    limit__ = 2

increment(Color.BLUE)      # Color.WHITE
increment(Color.WHITE)     # wraps round to Color.BLACK
decrement(Color.BLACK)     # wraps round to Color.WHITE
```

A `limit__` one past the last value marks the end for `enum_values`:

```python
from minicute.enum_iter import enum_values

class Shade(enum.IntEnum):
    DARK = 0
    MID = 1
    LIGHT = 2
    limit__ = 3

list(enum_values(Shade))   # [Shade.DARK, Shade.MID, Shade.LIGHT]
```

A `start__` member gives a first value other than 0; wrapping then
returns to it. Stepping to a value that is not a member raises
`ValueError`; `enum_values` raises `TypeError` for an enumeration without
`limit__`.

## What it does not do

The package has no runner: nothing here executes a suite and reports to
a listener, and there is no command line and no XML or IDE output. Cases
and suites are called directly, and a listener must be driven by your own
code.

## Running the tests

```
pip install minicute[test]
pytest
```