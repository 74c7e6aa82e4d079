from hypothesis import given
from hypothesis import strategies as st

from drills.digits import add_digit_arrays, plus_one


def _to_int(digits):
    return int("".join(map(str, digits))) if digits else 0


def _digits(number):
    return [int(ch) for ch in str(number)]


def test_plus_one_all_nines():
    assert plus_one([9]) == [1, 0]
    assert plus_one([9, 9, 9]) == [1, 0, 0, 0]


def test_plus_one_simple():
    assert plus_one([1, 2, 3]) == [1, 2, 4]


def test_plus_one_does_not_modify_input():
    digits = [4, 9]
    plus_one(digits)
    assert digits == [4, 9]


@given(st.integers(0, 10**30))
def test_plus_one_round_trip(number):
    assert _to_int(plus_one(_digits(number))) == number + 1


def test_plus_one_empty_is_one():
    assert plus_one([]) == [1]


def test_add_digit_arrays_carry_out():
    assert add_digit_arrays([9, 9, 9], [1]) == [1, 0, 0, 0]


def test_add_digit_arrays_empty():
    assert add_digit_arrays([], []) == []
    assert add_digit_arrays([3, 4], []) == [3, 4]


@given(st.integers(0, 10**25), st.integers(0, 10**25))
def test_add_digit_arrays_round_trip(a, b):
    assert _to_int(add_digit_arrays(_digits(a), _digits(b))) == a + b


@given(st.integers(0, 10**25), st.integers(0, 10**25))
def test_add_digit_arrays_is_commutative(a, b):
    assert add_digit_arrays(_digits(a), _digits(b)) == add_digit_arrays(_digits(b), _digits(a))


@given(st.integers(1, 10**25), st.integers(1, 10**25))
def test_add_digit_arrays_all_digits_in_range(a, b):
    result = add_digit_arrays(_digits(a), _digits(b))
    assert all(0 <= d <= 9 for d in result)
    assert result[0] != 0