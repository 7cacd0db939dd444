import pytest
from hypothesis import given
from hypothesis import strategies as st

from roadnet.bisection import bisection_method


def test_nonnegative_derivative_at_left_end_returns_left_end():
    assert bisection_method(lambda x: 1.0, 0, 1) == 0


def test_nonpositive_derivative_at_right_end_returns_right_end():
    assert bisection_method(lambda x: -1.0, 0, 1) == 1


@given(st.floats(min_value=0.001, max_value=0.999))
def test_finds_interior_minimum(target):
    result = bisection_method(lambda x: 2 * (x - target), 0, 1)
    assert abs(result - target) <= 1e-12


@given(st.floats(min_value=-100, max_value=100), st.floats(min_value=1, max_value=50))
def test_result_stays_in_interval(target, width):
    a, b = -width, width
    result = bisection_method(lambda x: x - target, a, b, epsilon=1e-9)
    assert a <= result <= b
    assert abs(result - min(max(target, a), b)) <= 1e-6


def test_invalid_interval_raises():
    with pytest.raises(ValueError):
        bisection_method(lambda x: x, 1, 0)


def test_invalid_epsilon_raises():
    with pytest.raises(ValueError):
        bisection_method(lambda x: x, 0, 1, epsilon=0)