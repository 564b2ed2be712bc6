import inspect

import pytest

from minicute.base import TestFailure, check, fail


def test_check_true_returns_nothing_and_false_raises():
    assert check(1 == 1, "fine") is None
    with pytest.raises(TestFailure):
        check(1 == 2, "broken")


def test_check_reason_has_function_prefix():
    with pytest.raises(TestFailure) as info:
        check(False, "broken")
    assert info.value.reason == "test_check_reason_has_function_prefix: broken"


def test_check_records_file_and_line():
    line = inspect.currentframe().f_lineno + 2
    with pytest.raises(TestFailure) as info:
        check(False, "here")
    assert info.value.filename == __file__
    assert info.value.lineno == line


def test_message_is_escaped():
    with pytest.raises(TestFailure) as info:
        check(False, "a\tb\nc\\d")
    assert info.value.reason.endswith(": a\\tb\\nc\\\\d")


def test_what_and_str_match_reason():
    failure = TestFailure("why", "file.py", 7)
    assert failure.what() == "why"
    assert str(failure) == "why"
    assert (failure.filename, failure.lineno) == ("file.py", 7)


def test_fail_default_message():
    with pytest.raises(TestFailure) as info:
        fail()
    assert info.value.reason == "test_fail_default_message: FAIL()"


def test_fail_custom_message_and_location():
    line = inspect.currentframe().f_lineno + 2
    with pytest.raises(TestFailure) as info:
        fail("custom")
    assert info.value.reason.endswith(": custom")
    assert info.value.lineno == line