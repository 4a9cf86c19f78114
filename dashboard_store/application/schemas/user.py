"""Pydantic schemas for the User collection."""

from pydantic import Field

from dashboard_store.domain.entities import ActivityStatus, UserRole

from .base import IsoDate, RecordSchema, today_iso


class UserCreate(RecordSchema):
    """Schema for inviting a new dashboard user."""

    name: str = ""
    email: str = ""
    role: UserRole = UserRole.VIEWER
    status: ActivityStatus = ActivityStatus.ACTIVE
    last_login: IsoDate = Field(default_factory=today_iso)


class UserRecord(RecordSchema):
    """Persisted shape of a user under the ``users`` key."""

    id: str = Field(min_length=1)
    name: str
    email: str
    role: UserRole
    status: ActivityStatus
    last_login: IsoDate


class SessionUser(RecordSchema):
    """The ``user`` value written by the login gate."""

    email: str
    name: str
