"""Domain entity for payment transactions."""

from dataclasses import dataclass
from enum import Enum

from .common import coerce_enum


class TransactionStatus(str, Enum):
    COMPLETED = "Completed"
    PENDING = "Pending"
    FAILED = "Failed"


@dataclass(frozen=True)
class Transaction:
    """A single payment made by a customer."""

    id: str
    date: str  # ISO date
    customer: str
    amount: float
    status: TransactionStatus
    payment_method: str  # free text, e.g. "Credit Card", "PayPal"

    def __post_init__(self) -> None:
        coerce_enum(self, "status", TransactionStatus)
