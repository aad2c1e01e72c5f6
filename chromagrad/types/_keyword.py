from enum import Enum
from typing import Type, TypeVar

from ..errors import UnsupportedModeError

E = TypeVar("E", bound=Enum)


def parse_keyword(enum_cls: Type[E], value, kind: str) -> E:
    """Resolve a case-insensitive ``-``/``_`` keyword to a member of ``enum_cls``."""
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise UnsupportedModeError(f"Invalid {kind}: {value!r}")
    key = value.strip().lower().replace("_", "-")
    for member in enum_cls:
        if member.value == key:
            return member
    choices = ", ".join(m.value for m in enum_cls)
    raise UnsupportedModeError(f"Invalid {kind}: {value!r} (expected one of: {choices})")
