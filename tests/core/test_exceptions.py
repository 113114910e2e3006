from arrowkit.core import ArrowkitError, DivisionByZero, EmptyReduceError


def test_division_by_zero_attributes():
    err = DivisionByZero(10, 0)
    assert err.dividend == 10
    assert err.divisor == 0
    assert "10 / 0" in str(err)
    assert isinstance(err, ArrowkitError)
    assert isinstance(err, ZeroDivisionError)


def test_empty_reduce_error():
    err = EmptyReduceError("find_max")
    assert err.operation == "find_max"
    assert "find_max()" in str(err)
    assert isinstance(err, ArrowkitError)
    assert isinstance(err, ValueError)


def test_errors_are_distinct_kinds():
    assert not issubclass(EmptyReduceError, DivisionByZero)
    assert not issubclass(DivisionByZero, EmptyReduceError)
