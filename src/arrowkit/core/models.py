"""Fixed-shape records for the data used by the functional examples.

Object literals such as ``{ name, age }`` become frozen pydantic models with a
known set of fields. Being frozen, they can be passed through the pure helpers
in :mod:`arrowkit.functional` without any risk of being modified along the way.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .types import Age, Amount, Name

__all__ = [
    "User",
    "Item",
    "Student",
    "Employee",
    "Address",
    "Profile",
    "create_user",
]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class User(_Record):
    """A named person with an age."""

    name: Name = Field(..., description="Display name of the user.")
    age: Age = Field(..., description="Age in whole years.")


class Item(_Record):
    """A product with a price."""

    name: Name
    price: Amount


class Student(_Record):
    name: Name
    marks: Amount


class Employee(_Record):
    name: Name
    salary: Amount


class Address(_Record):
    city: Optional[str] = None


class Profile(_Record):
    """Loosely populated user profile.

    Every field has a default so partially known users can still be built,
    e.g. ``Profile()`` or ``Profile(address=Address(city="Skardu"))``.
    """

    name: str = "Unknown"
    age: Age = 0
    address: Optional[Address] = None


def create_user(name: str, age: int) -> User:
    """Build a :class:`User` record from its two fields."""
    return User(name=name, age=age)
