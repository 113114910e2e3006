"""String helpers and lookups over partially populated user data."""

import re
import typing as tp
from collections.abc import Mapping

from arrowkit.core.models import Profile

__all__ = [
    "greet",
    "to_upper",
    "reverse",
    "count_vowels",
    "get_city",
    "display_user",
]

_VOWELS = re.compile(r"[aeiou]", re.IGNORECASE)

ProfileLike = tp.Union[Profile, tp.Mapping[str, tp.Any], None]


def greet(name: str = "Guest") -> str:
    return f"Hello, {name}!"


def to_upper(text: str) -> str:
    return text.upper()


def reverse(text: str) -> str:
    return text[::-1]


def count_vowels(text: str) -> int:
    """Count ``a e i o u`` in either case."""
    return len(_VOWELS.findall(text))


def _lookup(obj: tp.Any, key: str) -> tp.Any:
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def get_city(profile: ProfileLike) -> str:
    """Return ``profile.address.city`` or ``"Unknown"``.

    Any missing link in the chain (no profile, no address, no or empty city)
    falls back to ``"Unknown"``. Accepts :class:`Profile` records as well as
    plain mappings such as ``{"address": {"city": "Skardu"}}``.
    """
    city = _lookup(_lookup(profile, "address"), "city")
    return city or "Unknown"


def display_user(profile: ProfileLike) -> str:
    """Format a profile as ``"name (age)"`` with defaults for missing fields."""
    if profile is None:
        profile = Profile()
    elif isinstance(profile, Mapping):
        profile = Profile(**{k: v for k, v in profile.items() if v is not None})
    return f"{profile.name} ({profile.age})"
