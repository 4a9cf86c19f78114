from .entity_definitions import (
    ALL_DEFINITIONS,
    CUSTOMERS,
    PRODUCTS,
    TRANSACTIONS,
    USERS,
    EntityDefinition,
)
from .entity_query import matches_filters, matches_term, search
from .entity_store import EntityStore
from .login_service import LoginService
from .dashboard_session import DashboardSession

__all__ = [
    "ALL_DEFINITIONS",
    "CUSTOMERS",
    "PRODUCTS",
    "TRANSACTIONS",
    "USERS",
    "EntityDefinition",
    "matches_filters",
    "matches_term",
    "search",
    "EntityStore",
    "LoginService",
    "DashboardSession",
]
