"""Application service for the dashboard's cosmetic login gate.

This is not authentication: any address containing "@" with a password of
six or more characters is accepted, and nothing in the stores checks the
flag. It only remembers who "signed in" so a presenter can greet them.
"""

import logging

from pydantic import ValidationError

from dashboard_store.application.interfaces import KeyValueStorage
from dashboard_store.application.schemas import SessionUser
from dashboard_store.domain.exceptions import LoginError

logger = logging.getLogger(__name__)

LOGGED_IN_KEY = "isLoggedIn"
USER_KEY = "user"
MIN_PASSWORD_LENGTH = 6


class LoginService:
    """Stores the logged-in flag and the session user through the storage port."""

    def __init__(self, storage: KeyValueStorage):
        self._storage = storage

    def login(self, email: str, password: str) -> SessionUser:
        if not email or not password:
            raise LoginError("Please enter both email and password")
        if "@" not in email or len(password) < MIN_PASSWORD_LENGTH:
            raise LoginError("Invalid email or password")

        user = SessionUser(email=email, name=email.split("@")[0])
        self._storage.save(LOGGED_IN_KEY, "true")
        self._storage.save(USER_KEY, user.model_dump())
        logger.info("Signed in as %s", user.email)
        return user

    def logout(self) -> None:
        self._storage.clear(LOGGED_IN_KEY)
        self._storage.clear(USER_KEY)
        logger.info("Signed out")

    def is_logged_in(self) -> bool:
        return self._storage.load(LOGGED_IN_KEY) == "true"

    def current_user(self) -> SessionUser | None:
        """The stored session user, or None when signed out or unreadable."""
        if not self.is_logged_in():
            return None
        raw = self._storage.load(USER_KEY)
        if raw is None:
            return None
        try:
            return SessionUser.model_validate(raw)
        except ValidationError:
            logger.warning("Ignoring malformed session user under '%s'", USER_KEY)
            return None
