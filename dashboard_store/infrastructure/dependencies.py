"""Dependency wiring — connects infrastructure adapters to the application layer."""

from dashboard_store.application.interfaces import KeyValueStorage
from dashboard_store.application.services import DashboardSession
from dashboard_store.config import Settings, get_settings
from dashboard_store.infrastructure.logging.log_config import setup_logging
from dashboard_store.infrastructure.storage.local_json_storage import LocalJsonStorage


def get_storage(settings: Settings | None = None) -> LocalJsonStorage:
    """Provides the JSON-file storage rooted at ``settings.data_dir``."""
    settings = settings or get_settings()
    return LocalJsonStorage(settings.data_dir)


def open_dashboard_session(
    settings: Settings | None = None,
    storage: KeyValueStorage | None = None,
    *,
    configure_logging: bool = True,
) -> DashboardSession:
    """Provides an initialized DashboardSession with its stores wired up.

    Pass ``storage`` to use another adapter than the JSON files.
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings)

    session = DashboardSession(
        storage or get_storage(settings),
        strict_mutations=settings.strict_mutations,
        id_length=settings.id_length,
        id_max_attempts=settings.id_max_attempts,
    )
    return session.initialize()
