"""Query/filter engine — derives a list view from search text and discrete filters.

Pure functions: the input sequence is never mutated and result order is
always the input order (no ranking).
"""

from collections.abc import Iterable, Mapping, Sequence
from enum import Enum
from typing import TypeVar

from dashboard_store.domain.entities.query import ALL
from dashboard_store.domain.exceptions import UnknownFilterFieldError

R = TypeVar("R")


def _as_text(value: object) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return "" if value is None else str(value)


def matches_term(record: object, term: str, searchable_fields: Iterable[str]) -> bool:
    """Case-insensitive substring match against ANY of ``searchable_fields``.

    An empty term matches everything.
    """
    if not term:
        return True
    needle = term.lower()
    return any(needle in _as_text(getattr(record, name, "")).lower() for name in searchable_fields)


def matches_filters(record: object, filters: Mapping[str, str]) -> bool:
    """True when every non-``ALL`` filter equals the record's field value."""
    for name, wanted in filters.items():
        if wanted == ALL:
            continue
        if _as_text(getattr(record, name, None)) != _as_text(wanted):
            return False
    return True


def search(
    records: Iterable[R],
    term: str = "",
    filters: Mapping[str, str] | None = None,
    *,
    searchable_fields: Sequence[str],
    filter_fields: Sequence[str] | None = None,
    entity_type: str = "Record",
) -> list[R]:
    """Return the records matching ``term`` AND every active filter.

    When ``filter_fields`` is given, filters on any other field raise
    ``UnknownFilterFieldError`` instead of silently matching nothing.
    """
    filters = dict(filters or {})
    if filter_fields is not None:
        allowed = tuple(filter_fields)
        for name in filters:
            if name not in allowed:
                raise UnknownFilterFieldError(entity_type, name, allowed)

    return [
        record
        for record in records
        if matches_term(record, term, searchable_fields) and matches_filters(record, filters)
    ]
