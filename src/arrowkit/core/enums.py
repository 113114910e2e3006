"""Enumerations used throughout the Arrowkit package."""

from enum import Enum


class Parity(Enum):
    """Parity of an integer."""

    EVEN = "Even"
    ODD = "Odd"

    @classmethod
    def of(cls, number: int) -> "Parity":
        """Return the parity of ``number``."""
        return cls.EVEN if number % 2 == 0 else cls.ODD

    def __str__(self) -> str:
        return self.value
