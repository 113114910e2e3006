"""Core records, enums and errors shared by the functional utilities."""

from arrowkit.core.enums import Parity
from arrowkit.core.exceptions import ArrowkitError, DivisionByZero, EmptyReduceError
from arrowkit.core.models import (
    Address,
    Employee,
    Item,
    Profile,
    Student,
    User,
    create_user,
)

__all__ = [
    "Parity",
    "ArrowkitError",
    "DivisionByZero",
    "EmptyReduceError",
    "Address",
    "Employee",
    "Item",
    "Profile",
    "Student",
    "User",
    "create_user",
]
