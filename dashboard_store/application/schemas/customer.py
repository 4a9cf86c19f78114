"""Pydantic schemas for the Customer collection."""

from pydantic import Field

from dashboard_store.domain.entities import ActivityStatus

from .base import IsoDate, Number, RecordSchema, today_iso


class CustomerCreate(RecordSchema):
    """Schema for creating a new customer — every field has a form default."""

    name: str = ""
    email: str = ""
    status: ActivityStatus = ActivityStatus.ACTIVE
    spent: Number = 0.0
    last_order: IsoDate = Field(default_factory=today_iso)


class CustomerRecord(RecordSchema):
    """Persisted shape of a customer under the ``customers`` key."""

    id: str = Field(min_length=1)
    name: str
    email: str
    status: ActivityStatus
    spent: Number
    last_order: IsoDate
