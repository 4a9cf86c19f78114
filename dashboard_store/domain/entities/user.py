"""Domain entity for dashboard users."""

from dataclasses import dataclass
from enum import Enum

from .common import ActivityStatus, coerce_enum


class UserRole(str, Enum):
    ADMIN = "Admin"
    EDITOR = "Editor"
    VIEWER = "Viewer"


@dataclass(frozen=True)
class User:
    """A person with access to the admin dashboard."""

    id: str
    name: str
    email: str
    role: UserRole
    status: ActivityStatus
    last_login: str  # ISO date

    def __post_init__(self) -> None:
        coerce_enum(self, "role", UserRole)
        coerce_enum(self, "status", ActivityStatus)
