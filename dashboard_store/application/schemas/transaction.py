"""Pydantic schemas for the Transaction collection."""

from pydantic import Field

from dashboard_store.domain.entities import TransactionStatus

from .base import IsoDate, Number, RecordSchema, today_iso


class TransactionCreate(RecordSchema):
    """Schema for recording a new transaction."""

    date: IsoDate = Field(default_factory=today_iso)
    customer: str = ""
    amount: Number = 0.0
    status: TransactionStatus = TransactionStatus.PENDING
    payment_method: str = ""


class TransactionRecord(RecordSchema):
    """Persisted shape of a transaction under the ``transactions`` key."""

    id: str = Field(min_length=1)
    date: IsoDate
    customer: str
    amount: Number
    status: TransactionStatus
    payment_method: str
