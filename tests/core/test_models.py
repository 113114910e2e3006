import pytest
from pydantic import ValidationError

from arrowkit.core.models import Address, Employee, Item, Profile, User, create_user


def test_create_user():
    user = create_user("Ali", 22)
    assert isinstance(user, User)
    assert user.name == "Ali"
    assert user.age == 22
    assert user.model_dump() == {"name": "Ali", "age": 22}


def test_user_rejects_negative_age():
    with pytest.raises(ValidationError):
        create_user("Ali", -1)


def test_user_rejects_empty_name():
    with pytest.raises(ValidationError):
        User(name="", age=3)


def test_records_are_frozen():
    item = Item(name="Book", price=100)
    with pytest.raises(ValidationError):
        item.price = 5


def test_amount_must_be_non_negative():
    with pytest.raises(ValidationError):
        Employee(name="Ali", salary=-10)


def test_profile_defaults():
    profile = Profile()
    assert profile.name == "Unknown"
    assert profile.age == 0
    assert profile.address is None

    nested = Profile(address={"city": "Skardu"})
    assert nested.address == Address(city="Skardu")
