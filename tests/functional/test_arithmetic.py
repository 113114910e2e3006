import pytest

from arrowkit.core.enums import Parity
from arrowkit.core.exceptions import ArrowkitError, DivisionByZero
from arrowkit.functional.arithmetic import (
    add,
    check_even,
    divide,
    factorial,
    is_positive,
    multiplier,
    multiply,
    operate,
    power,
    square,
    subtract,
    sum_all,
)


def test_basic_operations():
    assert add(3, 7) == 10
    assert subtract(10, 3) == 7
    assert multiply(3, 4) == 12
    assert square(5) == 25


def test_divide():
    assert divide(8, 2) == 4
    assert divide(12, 3) == 4
    assert divide(1, 4) == 0.25


@pytest.mark.parametrize("dividend", [8, 0, -3.5])
def test_divide_by_zero_raises(dividend):
    with pytest.raises(DivisionByZero) as exc_info:
        divide(dividend, 0)

    err = exc_info.value
    assert err.dividend == dividend
    assert err.divisor == 0
    assert str(dividend) in str(err)


def test_division_by_zero_is_catchable_as_builtin():
    with pytest.raises(ZeroDivisionError):
        divide(1, 0.0)
    with pytest.raises(ArrowkitError):
        divide(1, 0)


def test_power_defaults_to_square():
    assert power(5) == 25
    assert power(3, 4) == 81
    assert power(2, exponent=10) == 1024


def test_sum_all_variadic():
    assert sum_all(1, 2, 3) == 6
    assert sum_all() == 0
    assert sum_all(*[2, 4, 4, 7]) == 17


@pytest.mark.parametrize(
    "n, expected", [(-3, 1), (0, 1), (1, 1), (5, 120), (6, 720)]
)
def test_factorial(n, expected):
    assert factorial(n) == expected


def test_predicates():
    assert is_positive(3)
    assert not is_positive(-5)
    assert not is_positive(0)
    assert check_even(4) is Parity.EVEN
    assert check_even(5) is Parity.ODD
    assert str(check_even(5)) == "Odd"


def test_operate_applies_callback():
    assert operate(5, 3, lambda x, y: x + y) == 8
    assert operate(5, 3, multiply) == 15


def test_multiplier_returns_reusable_closure():
    double = multiplier(2)
    triple = multiplier(3)
    assert double(10) == 20
    assert double(7) == 14
    assert triple(10) == 30


def test_pure_functions_are_repeatable():
    for fn, args in [(add, (2, 3)), (divide, (9, 3)), (power, (3, 3))]:
        assert fn(*args) == fn(*args)
