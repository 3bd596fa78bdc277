"""
Display text for enum members.

Enums used as URL segments or signature values register an explicit
member -> text table. Registration validates the table up front, so a
missing description fails at import time instead of producing a wrong URL.

Example:
    @describable({'V1': 'v1', 'V2': 'v2.0'})
    class ApiVersion(Enum):
        V1 = 1
        V2 = 2

    display_text(ApiVersion.V2)  # 'v2.0'
"""

from enum import Enum
from typing import Dict, Mapping, Optional, Type

from .exceptions import ConfigurationError, UndescribedMemberError

_registry: Dict[Type[Enum], Dict[str, str]] = {}


def register_descriptions(enum_cls: Type[Enum], descriptions: Mapping, strict: bool = True):
    """
    Register display text for the members of enum_cls.

    Args:
        enum_cls: Enum class to describe
        descriptions: Mapping keyed by member or member name
        strict: Require text for every member

    Returns:
        enum_cls, so the call can be used as a decorator body

    Raises:
        ConfigurationError: If enum_cls is not an Enum or a key is not a member
        UndescribedMemberError: If strict and some members have no text
    """
    if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
        raise ConfigurationError(f"{enum_cls!r} is not an Enum class")

    table = {}
    for key, text in descriptions.items():
        name = key.name if isinstance(key, Enum) else key
        if name not in enum_cls.__members__:
            raise ConfigurationError(f"{enum_cls.__name__} has no member {name!r}")
        table[name] = text

    if strict:
        missing = [name for name in enum_cls.__members__ if not table.get(name)]
        if missing:
            raise UndescribedMemberError(enum_cls, missing)

    _registry[enum_cls] = table
    return enum_cls


def describable(descriptions: Mapping, strict: bool = True):
    """Class decorator form of register_descriptions."""
    def decorator(enum_cls):
        return register_descriptions(enum_cls, descriptions, strict=strict)
    return decorator


def describe(member: Enum) -> Optional[str]:
    """Registered display text for member, or None."""
    table = _registry.get(type(member))
    if table is None:
        return None
    return table.get(member.name) or None


def display_text(member: Enum) -> str:
    """Display text for member, falling back to its name."""
    text = describe(member)
    return text if text is not None else member.name
