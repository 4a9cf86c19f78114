"""The object a presenter holds for one application session.

It owns one ``EntityStore`` per collection plus the login gate, so nothing
lives in module-level state. Build it through
``dashboard_store.infrastructure.dependencies.open_dashboard_session``.
"""

import logging
from types import TracebackType
from typing import Any

from dashboard_store.application.interfaces import KeyValueStorage
from dashboard_store.application.services.entity_definitions import (
    CUSTOMERS,
    PRODUCTS,
    TRANSACTIONS,
    USERS,
)
from dashboard_store.application.services.entity_store import EntityStore
from dashboard_store.application.services.login_service import LoginService
from dashboard_store.domain.entities import Customer, Product, Transaction, User

logger = logging.getLogger(__name__)


class DashboardSession:
    """Owns the four entity stores for the lifetime of one session."""

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        strict_mutations: bool = False,
        id_length: int = 7,
        id_max_attempts: int = 16,
    ):
        options: dict[str, Any] = {
            "strict_mutations": strict_mutations,
            "id_length": id_length,
            "id_max_attempts": id_max_attempts,
        }
        self._storage = storage
        self.customers: EntityStore[Customer] = EntityStore(CUSTOMERS, storage, **options)
        self.products: EntityStore[Product] = EntityStore(PRODUCTS, storage, **options)
        self.transactions: EntityStore[Transaction] = EntityStore(TRANSACTIONS, storage, **options)
        self.users: EntityStore[User] = EntityStore(USERS, storage, **options)
        self.login = LoginService(storage)
        self._closed = False

    @property
    def stores(self) -> dict[str, EntityStore[Any]]:
        """Stores keyed by their storage key."""
        return {
            store.key: store
            for store in (self.customers, self.products, self.transactions, self.users)
        }

    @property
    def closed(self) -> bool:
        return self._closed

    def store_for(self, key: str) -> EntityStore[Any]:
        try:
            return self.stores[key]
        except KeyError:
            raise KeyError(f"Unknown collection '{key}'") from None

    def initialize(self) -> "DashboardSession":
        """Seed or load every collection."""
        for store in self.stores.values():
            store.initialize()
        logger.info("Dashboard session ready (%s)", ", ".join(self.stores))
        return self

    def close(self) -> None:
        for store in self.stores.values():
            store.close()
        self._closed = True

    def __enter__(self) -> "DashboardSession":
        return self.initialize()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
