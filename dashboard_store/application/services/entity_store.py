"""Generic entity store — one persisted, typed collection with CRUD and search.

The store owns the in-memory collection, seeds it from storage or from the
built-in sample set, and writes the whole collection back through the
``KeyValueStorage`` port after every mutation (write-through, no batching).
New records are prepended, so the default order is most-recent-first.
"""

import threading
from collections.abc import Callable, Mapping
from dataclasses import replace
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from dashboard_store.application.interfaces import KeyValueStorage
from dashboard_store.application.services.entity_definitions import EntityDefinition
from dashboard_store.application.services.entity_query import search
from dashboard_store.domain.entities.query import RecordQuery
from dashboard_store.domain.exceptions import EntityNotFoundError
from dashboard_store.domain.identifiers import MIN_ID_LENGTH, generate_unique_id
from dashboard_store.infrastructure.logging.colored_logger import StoreLogger, StoreStage

E = TypeVar("E")

QUARANTINE_SUFFIX = ".quarantine"


class EntityStore(Generic[E]):
    """Owns one entity collection. Depends on the storage port (DI).

    Every operation runs inside a single re-entrant lock so that a
    read-modify-write never interleaves with another one.
    """

    def __init__(
        self,
        definition: EntityDefinition[E],
        storage: KeyValueStorage,
        *,
        strict_mutations: bool = False,
        id_length: int = MIN_ID_LENGTH,
        id_max_attempts: int = 16,
    ):
        self._definition = definition
        self._storage = storage
        self._strict = strict_mutations
        self._id_length = id_length
        self._id_max_attempts = id_max_attempts
        self._records: list[E] = []
        self._quarantined: list[Any] = []
        self._initialized = False
        self._lock = threading.RLock()
        self._log = StoreLogger(f"dashboard_store.store.{definition.storage_key}")

    # ── Introspection ───────────────────────────────────────────────

    @property
    def definition(self) -> EntityDefinition[E]:
        return self._definition

    @property
    def key(self) -> str:
        return self._definition.storage_key

    @property
    def quarantine_key(self) -> str:
        return self.key + QUARANTINE_SUFFIX

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def quarantined(self) -> list[Any]:
        """Raw records rejected while loading, in the order they were found."""
        return list(self._quarantined)

    def __len__(self) -> int:
        with self._lock:
            self._ensure_initialized()
            return len(self._records)

    # ── Lifecycle ───────────────────────────────────────────────────

    def initialize(self) -> list[E]:
        """Load the collection from storage, seeding it on first use.

        Idempotent: later calls return the current collection.
        """
        with self._lock:
            if not self._initialized:
                self._load_or_seed()
                self._initialized = True
            return list(self._records)

    def reset(self) -> list[E]:
        """Clear the storage key and reseed the collection from the sample set."""
        with self._lock:
            self._storage.clear(self.key)
            self._initialized = False
            self._records = []
            return self.initialize()

    def close(self) -> None:
        """Drop the in-memory collection. Storage is left untouched."""
        with self._lock:
            self._records = []
            self._quarantined = []
            self._initialized = False

    # ── Reads ───────────────────────────────────────────────────────

    def get(self, entity_id: str) -> E:
        with self._lock:
            self._ensure_initialized()
            index = self._index_of(entity_id)
            if index is None:
                raise EntityNotFoundError(self._definition.name, entity_id)
            return self._records[index]

    def filter(self, predicate: Callable[[E], bool]) -> list[E]:
        """Return the records satisfying ``predicate``, in collection order."""
        with self._lock:
            self._ensure_initialized()
            return [record for record in self._records if predicate(record)]

    def count(self, predicate: Callable[[E], bool] | None = None) -> int:
        """Number of records, or of those satisfying ``predicate``."""
        with self._lock:
            self._ensure_initialized()
            if predicate is None:
                return len(self._records)
            return sum(1 for record in self._records if predicate(record))

    def list_records(self, term: str = "", filters: Mapping[str, str] | None = None) -> list[E]:
        """The list view: free-text ``term`` AND every non-"all" discrete filter."""
        with self._lock:
            self._ensure_initialized()
            return search(
                self._records,
                term,
                filters,
                searchable_fields=self._definition.searchable_fields,
                filter_fields=self._definition.filter_fields,
                entity_type=self._definition.name,
            )

    def search(self, query: RecordQuery) -> list[E]:
        return self.list_records(query.term, query.filters)

    def preview(self, draft: E | Mapping[str, Any] | Any) -> E:
        """Apply the derived-field rules to a form draft without storing it.

        ``draft`` is either an existing entity being edited or create input;
        create input gets an empty id.
        """
        if isinstance(draft, self._definition.entity_type):
            return self._definition.apply_rules(draft)
        data = self._definition.validate_create(draft)
        return self._definition.apply_rules(self._definition.build("", data))

    # ── Mutations ───────────────────────────────────────────────────

    def create(self, data: Mapping[str, Any] | Any) -> E:
        """Create a record from ``data`` (the create schema or a mapping)."""
        with self._lock:
            self._ensure_initialized()
            payload = self._definition.validate_create(data)
            entity_id = generate_unique_id(
                {record.id for record in self._records},
                length=self._id_length,
                max_attempts=self._id_max_attempts,
            )
            entity = self._normalize(self._definition.build(entity_id, payload))

            records = [entity, *self._records]
            self._persist(records)
            self._records = records

            self._log.event(StoreStage.CREATE, f"Created {self._definition.name}", id=entity_id)
            return entity

    def update(self, entity: E) -> E | None:
        """Replace the record whose id matches ``entity.id`` with ``entity``.

        Immutable fields keep their stored values and derived fields are
        recomputed. An unknown id raises ``EntityNotFoundError`` in strict
        mode and is a logged no-op (returning None) otherwise.
        """
        with self._lock:
            self._ensure_initialized()
            entity_id = entity.id
            index = self._index_of(entity_id)
            if index is None:
                self._handle_missing(StoreStage.UPDATE, entity_id)
                return None

            current = self._records[index]
            pinned = {name: getattr(current, name) for name in self._definition.immutable_fields}
            if pinned:
                entity = replace(entity, **pinned)
            updated = self._normalize(entity)

            records = list(self._records)
            records[index] = updated
            self._persist(records)
            self._records = records

            self._log.event(StoreStage.UPDATE, f"Updated {self._definition.name}", id=entity_id)
            return updated

    def delete(self, entity_id: str) -> bool:
        """Remove the record with ``entity_id``. Returns False on a lenient miss."""
        with self._lock:
            self._ensure_initialized()
            index = self._index_of(entity_id)
            if index is None:
                self._handle_missing(StoreStage.DELETE, entity_id)
                return False

            records = self._records[:index] + self._records[index + 1:]
            self._persist(records)
            self._records = records

            self._log.event(StoreStage.DELETE, f"Deleted {self._definition.name}", id=entity_id)
            return True

    # ── Internals ───────────────────────────────────────────────────

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self._load_or_seed()
            self._initialized = True

    def _index_of(self, entity_id: str) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == entity_id:
                return index
        return None

    def _normalize(self, entity: E) -> E:
        """Validate through the record schema, then apply derived-field rules.

        The in-memory copy is always identical to what is persisted.
        """
        validated = self._coerce(entity)
        derived = self._definition.apply_rules(validated)
        return validated if derived is validated else self._coerce(derived)

    def _coerce(self, entity: E) -> E:
        return self._definition.from_record(self._definition.to_record(entity))

    def _persist(self, records: list[E]) -> None:
        payload = [self._definition.to_record(record) for record in records]
        with self._log.timed_step(StoreStage.PERSIST, f"Saved '{self.key}'", records=len(payload)):
            self._storage.save(self.key, payload)

    def _handle_missing(self, stage: tuple[str, str, str], entity_id: str) -> None:
        if self._strict:
            raise EntityNotFoundError(self._definition.name, entity_id)
        self._log.warning(
            stage,
            f"No {self._definition.name} with that id; ignored",
            id=entity_id,
        )

    def _load_or_seed(self) -> None:
        raw = self._storage.load(self.key)
        if raw is None:
            self._seed()
            return

        if not isinstance(raw, list):
            self._quarantine([raw], reason="stored value is not a JSON array")
            self._seed()
            return

        records, rejected = self._parse(raw)
        self._records = records
        self._log.event(
            StoreStage.LOAD,
            f"Loaded '{self.key}'",
            records=len(records),
            rejected=len(rejected),
        )
        if rejected:
            self._quarantine(rejected, reason="records failed validation")
            self._persist(records)

    def _seed(self) -> None:
        records = [self._normalize(entity) for entity in self._definition.seed()]
        self._persist(records)
        self._records = records
        self._log.event(StoreStage.SEED, f"Seeded '{self.key}' with sample data", records=len(records))

    def _parse(self, raw: list[Any]) -> tuple[list[E], list[Any]]:
        records: list[E] = []
        rejected: list[Any] = []
        seen: set[str] = set()
        for item in raw:
            try:
                entity = self._definition.from_record(item)
            except (ValidationError, ValueError, TypeError) as exc:
                self._log.detail("Rejected stored record", error=type(exc).__name__)
                rejected.append(item)
                continue
            if entity.id in seen:
                rejected.append(item)
                continue
            seen.add(entity.id)
            records.append(self._definition.apply_rules(entity))
        return records, rejected

    def _quarantine(self, items: list[Any], *, reason: str) -> None:
        existing = self._storage.load(self.quarantine_key)
        kept = existing if isinstance(existing, list) else []
        self._storage.save(self.quarantine_key, kept + items)
        self._quarantined.extend(items)
        self._log.warning(
            StoreStage.QUARANTINE,
            f"Moved {len(items)} stored item(s) aside: {reason}",
            key=self.quarantine_key,
        )
