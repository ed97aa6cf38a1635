import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.searching import binary_search, linear_search


def test_linear_search_finds_first_occurrence():
    assert linear_search([4, 7, 7, 1], 7) == 1


def test_linear_search_missing_value():
    assert linear_search([4, 7, 1], 9) is None


def test_linear_search_empty():
    assert linear_search([], 3) is None


def test_binary_search_finds_value():
    values = [1, 3, 5, 7, 9, 11]
    for index, value in enumerate(values):
        assert binary_search(values, value) == index


@pytest.mark.parametrize("target", [0, 4, 12])
def test_binary_search_missing_value(target):
    assert binary_search([1, 3, 5, 7, 9, 11], target) is None


def test_binary_search_empty():
    assert binary_search([], 5) is None


@given(st.lists(st.integers(-50, 50)), st.integers(-50, 50))
def test_linear_search_agrees_with_membership(values, target):
    index = linear_search(values, target)
    if target in values:
        assert index == values.index(target)
    else:
        assert index is None


@given(st.lists(st.integers(-50, 50)), st.integers(-50, 50))
def test_binary_search_on_sorted_input(values, target):
    values = sorted(values)
    index = binary_search(values, target)
    if target in values:
        assert values[index] == target
    else:
        assert index is None