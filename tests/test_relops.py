import inspect

import pytest

from minicute.base import TestFailure
from minicute.relops import (
    assert_greater,
    assert_greater_equal,
    assert_less,
    assert_less_equal,
    assert_not_equal,
)
from minicute.to_string import diff_values


@pytest.mark.parametrize(
    "func, left, right",
    [
        (assert_less, 1, 2),
        (assert_less_equal, 2, 2),
        (assert_greater, 3, 2),
        (assert_greater_equal, 2, 2),
        (assert_not_equal, 1, 2),
    ],
)
def test_holding_relations_return_none(func, left, right):
    assert func(left, right) is None


@pytest.mark.parametrize(
    "func, left, right",
    [
        (assert_less, 2, 2),
        (assert_less_equal, 3, 2),
        (assert_greater, 2, 2),
        (assert_greater_equal, 1, 2),
        (assert_not_equal, 2, 2),
    ],
)
def test_failing_relations_raise(func, left, right):
    with pytest.raises(TestFailure):
        func(left, right)


def test_failure_reason_contains_message_and_operands():
    with pytest.raises(TestFailure) as info:
        assert_less(5, 3, "m")
    expected = "test_failure_reason_contains_message_and_operands: m" + diff_values(
        5, 3, "left", "right"
    )
    assert info.value.reason == expected


def test_failure_location_is_caller():
    line = inspect.currentframe().f_lineno + 2
    with pytest.raises(TestFailure) as info:
        assert_greater(1, 2)
    assert info.value.filename == __file__
    assert info.value.lineno == line


def test_strings_compare_lexically():
    assert_less("Hello", "World")
    with pytest.raises(TestFailure) as info:
        assert_less("World", "Hello", "words")
    assert "left:\tWorld\t" in info.value.reason
    assert "right:\tHello\t" in info.value.reason


def test_message_escaped_in_reason():
    with pytest.raises(TestFailure) as info:
        assert_not_equal(1, 1, "x\ty")
    assert "x\\ty" in info.value.reason