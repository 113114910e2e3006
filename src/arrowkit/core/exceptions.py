"""Error kinds raised by the Arrowkit functional utilities.

Every error derives from :class:`ArrowkitError` so callers can catch the whole
family at once, and also from the closest built-in exception so code written
against plain Python semantics keeps working.
"""

__all__ = ["ArrowkitError", "DivisionByZero", "EmptyReduceError"]


class ArrowkitError(Exception):
    """Base class for all Arrowkit errors."""


class DivisionByZero(ArrowkitError, ZeroDivisionError):
    """Raised when a division is attempted with a zero divisor.

    Attributes:
        dividend: The numerator that was passed in.
        divisor: The offending (zero) denominator.
    """

    def __init__(self, dividend, divisor):
        self.dividend = dividend
        self.divisor = divisor
        super().__init__(f"Division by zero not allowed: {dividend} / {divisor}")


class EmptyReduceError(ArrowkitError, ValueError):
    """Raised when folding an empty sequence without an initial value."""

    def __init__(self, operation: str = "reduce"):
        self.operation = operation
        super().__init__(f"{operation}() of empty sequence with no initial value")
