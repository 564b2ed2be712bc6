import pytest

from minicute.value_range import Range, make_range


def test_equal_to_list_with_same_elements():
    assert make_range([1, 2, 3]) == [1, 2, 3]


def test_not_equal_when_lengths_differ():
    assert (make_range([1, 2, 3]) == [1, 2]) is False
    assert (make_range([1, 2]) == [1, 2, 3]) is False


def test_not_equal_when_elements_differ():
    assert (make_range([1, 2, 3]) == [1, 5, 3]) is False


def test_equal_to_other_range_and_generator():
    values = [4, 5, 6]
    assert Range(values) == Range(tuple(values))
    assert Range(values) == (v for v in values)


def test_len_and_reiteration():
    values = ["a", "b", "c"]
    rng = make_range(iter(values))
    assert len(rng) == len(values)
    assert list(rng) == values
    assert list(rng) == values


def test_empty_ranges_are_equal():
    assert make_range([]) == []
    assert len(make_range(())) == 0


def test_not_equal_to_non_iterable():
    assert (make_range([1]) == 1) is False
    assert (make_range([1]) != 1) is True


def test_range_is_unhashable():
    with pytest.raises(TypeError):
        hash(make_range([1, 2]))