"""Domain value objects for list-view queries — search text plus discrete filters."""

from dataclasses import dataclass, field

ALL = "all"
"""Filter sentinel meaning "no constraint from this field"."""


@dataclass
class RecordQuery:
    """The search state a list view holds for one entity kind.

    ``filters`` maps a filterable field name (e.g. ``"status"``) to the
    required value, or to ``ALL``.
    """

    term: str = ""
    filters: dict[str, str] = field(default_factory=dict)

    def active_filters(self) -> dict[str, str]:
        """Return only the filters that actually constrain the result."""
        return {name: value for name, value in self.filters.items() if value != ALL}

    def with_filter(self, name: str, value: str) -> "RecordQuery":
        """Return a copy with one filter set (or reset, when ``value`` is ``ALL``)."""
        return RecordQuery(term=self.term, filters={**self.filters, name: value})
