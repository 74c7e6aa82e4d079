import pytest
from hypothesis import given
from hypothesis import strategies as st

from drills.numbers import combination, factorial, is_even


@given(st.integers(min_value=-10**6, max_value=10**6))
def test_parity_alternates(n):
    assert is_even(n) != is_even(n + 1)
    assert is_even(2 * n) is True


def test_factorial_of_zero():
    assert factorial(0) == 1


@given(st.integers(min_value=1, max_value=30))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_combination_r_greater_than_n():
    with pytest.raises(ValueError):
        combination(3, 4)


@given(st.integers(min_value=0, max_value=25), st.data())
def test_combination_symmetry(n, data):
    r = data.draw(st.integers(min_value=0, max_value=n))
    assert combination(n, r) == combination(n, n - r)
    assert combination(n, 0) == 1


@given(st.integers(min_value=1, max_value=25))
def test_combination_one(n):
    assert combination(n, 1) == n


@given(st.integers(min_value=2, max_value=25), st.data())
def test_combination_pascal(n, data):
    r = data.draw(st.integers(min_value=1, max_value=n - 1))
    assert combination(n, r) == combination(n - 1, r - 1) + combination(n - 1, r)