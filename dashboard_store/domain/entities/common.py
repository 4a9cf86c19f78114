"""Enumerations shared by several record types."""

from enum import Enum


class ActivityStatus(str, Enum):
    """Account state for customers and dashboard users."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"


def coerce_enum(instance: object, attribute: str, enum_type: type[Enum]) -> None:
    """Replace ``instance.<attribute>`` with its enum member, in place.

    Works on frozen dataclasses. Raises ``ValueError`` for values outside
    the enumeration.
    """
    object.__setattr__(instance, attribute, enum_type(getattr(instance, attribute)))
