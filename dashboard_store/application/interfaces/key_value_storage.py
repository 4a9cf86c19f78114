"""Abstract storage interface (port) for named JSON collections."""

from abc import ABC, abstractmethod
from typing import Any


class KeyValueStorage(ABC):
    """Port for durable key → JSON blob storage — implemented in the infrastructure layer.

    Values are opaque JSON documents; every ``save`` replaces the whole value.
    """

    @abstractmethod
    def load(self, key: str) -> Any | None:
        """Return the decoded value under ``key``.

        Returns None when the key is absent or the stored value is not valid
        JSON; callers treat both cases the same way.
        """
        ...

    @abstractmethod
    def save(self, key: str, value: Any) -> None:
        """Overwrite the value under ``key``."""
        ...

    @abstractmethod
    def clear(self, key: str) -> bool:
        """Remove ``key``. Returns True if it existed, False otherwise."""
        ...
