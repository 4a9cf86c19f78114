"""Domain entity for customers."""

from dataclasses import dataclass

from .common import ActivityStatus, coerce_enum


@dataclass(frozen=True)
class Customer:
    """A customer of the business, with lifetime spend and last order date."""

    id: str
    name: str
    email: str
    status: ActivityStatus
    spent: float
    last_order: str  # ISO date

    def __post_init__(self) -> None:
        coerce_enum(self, "status", ActivityStatus)
