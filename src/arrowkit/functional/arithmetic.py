"""Arithmetic primitives.

Small, pure numeric helpers. Each function depends only on its arguments and
can be freely passed around as a callback (e.g. to :func:`operate` or to the
folds in :mod:`arrowkit.functional.sequences`).

Failure semantics:
    :func:`divide` raises :class:`~arrowkit.core.exceptions.DivisionByZero`
    for a zero divisor instead of returning ``inf`` or a sentinel string.
    Every other function is total over numbers.

Examples:
    >>> from arrowkit.functional.arithmetic import divide, power, multiplier
    >>> divide(8, 2)
    4.0
    >>> power(5)
    25
    >>> double = multiplier(2)
    >>> double(10)
    20
"""

import typing as tp

from arrowkit.core.enums import Parity
from arrowkit.core.exceptions import DivisionByZero
from arrowkit.logger.logger import logger

__all__ = [
    "add",
    "subtract",
    "multiply",
    "divide",
    "square",
    "power",
    "sum_all",
    "factorial",
    "is_positive",
    "check_even",
    "operate",
    "multiplier",
]

Number = tp.Union[int, float]


def add(a: Number, b: Number) -> Number:
    return a + b


def subtract(a: Number, b: Number) -> Number:
    return a - b


def multiply(a: Number, b: Number) -> Number:
    return a * b


def divide(a: Number, b: Number) -> float:
    """Divide ``a`` by ``b``.

    Args:
        a: Dividend.
        b: Divisor.

    Returns:
        The true quotient ``a / b``.

    Raises:
        DivisionByZero: If ``b`` is zero.
    """
    if b == 0:
        logger.debug(f"divide() rejected zero divisor for dividend {a}")
        raise DivisionByZero(a, b)
    return a / b


def square(n: Number) -> Number:
    return n * n


def power(base: Number, exponent: Number = 2) -> Number:
    """Raise ``base`` to ``exponent`` (squares by default)."""
    return base**exponent


def sum_all(*numbers: Number) -> Number:
    """Sum any number of positional arguments, starting from 0."""
    total: Number = 0
    for number in numbers:
        total += number
    return total


def factorial(n: int) -> int:
    """Return ``n!``; any ``n <= 1`` yields 1."""
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def is_positive(n: Number) -> bool:
    return n > 0


def check_even(n: int) -> Parity:
    return Parity.of(n)


def operate(
    a: tp.Any, b: tp.Any, operation: tp.Callable[[tp.Any, tp.Any], tp.Any]
) -> tp.Any:
    """Apply a binary ``operation`` to ``a`` and ``b``."""
    return operation(a, b)


def multiplier(m: Number) -> tp.Callable[[Number], Number]:
    """Return a function that multiplies its argument by ``m``."""

    def _scale(n: Number) -> Number:
        return n * m

    return _scale
