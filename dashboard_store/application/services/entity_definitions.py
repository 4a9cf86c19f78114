"""Per-entity configuration for the generic EntityStore.

An ``EntityDefinition`` bundles everything that differs between the four
collections: storage key, record/create schemas, sample seed, searchable and
filterable fields, the derived-field rule and the fields that must never
change after creation.
"""

from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from dashboard_store.application import seeds
from dashboard_store.application.schemas import (
    CustomerCreate,
    CustomerRecord,
    ProductCreate,
    ProductRecord,
    RecordSchema,
    TransactionCreate,
    TransactionRecord,
    UserCreate,
    UserRecord,
    today_iso,
)
from dashboard_store.domain.entities import Customer, Product, Transaction, User
from dashboard_store.domain.exceptions import InvalidRecordError
from dashboard_store.domain.rules import apply_stock_status, stock_status

E = TypeVar("E")


@dataclass(frozen=True)
class EntityDefinition(Generic[E]):
    """Static description of one entity collection."""

    name: str
    storage_key: str
    entity_type: type[E]
    create_schema: type[RecordSchema]
    record_schema: type[RecordSchema]
    seed: Callable[[], list[E]]
    searchable_fields: tuple[str, ...]
    filter_fields: tuple[str, ...] = ()
    derive: Callable[[E], E] | None = None
    immutable_fields: tuple[str, ...] = ()
    builder: Callable[[str, RecordSchema], E] | None = field(default=None, repr=False)

    # ── Mapping ──────────────────────────────────────────────────────

    def build(self, entity_id: str, data: RecordSchema) -> E:
        """Assemble a new entity from validated create input."""
        if self.builder is not None:
            return self.builder(entity_id, data)
        return self.entity_type(id=entity_id, **data.model_dump())

    def apply_rules(self, entity: E) -> E:
        return self.derive(entity) if self.derive is not None else entity

    def validate_create(self, data: Any) -> RecordSchema:
        """Coerce caller input (schema instance or mapping) into the create schema."""
        if isinstance(data, self.create_schema):
            return data
        if isinstance(data, RecordSchema):
            data = data.model_dump()
        try:
            return self.create_schema.model_validate(data)
        except ValidationError as exc:
            raise InvalidRecordError(self.name, exc.errors(include_context=False)) from exc

    def to_record(self, entity: E) -> dict[str, Any]:
        """Validate ``entity`` and return its persisted (camelCase) form."""
        try:
            record = self.record_schema.model_validate(asdict(entity))
        except (ValidationError, TypeError) as exc:
            errors = exc.errors(include_context=False) if isinstance(exc, ValidationError) else [str(exc)]
            raise InvalidRecordError(self.name, errors) from exc
        return record.model_dump(by_alias=True)

    def from_record(self, raw: Any) -> E:
        """Parse one persisted record. Raises ``ValidationError`` when malformed."""
        record = self.record_schema.model_validate(raw)
        return self.entity_type(**record.model_dump())


# ── Builders ─────────────────────────────────────────────────────────


def _build_product(entity_id: str, data: RecordSchema) -> Product:
    values = data.model_dump()
    return Product(
        id=entity_id,
        status=stock_status(values["stock"]),
        created_at=today_iso(),
        **values,
    )


# ── Definitions ──────────────────────────────────────────────────────


CUSTOMERS: EntityDefinition[Customer] = EntityDefinition(
    name="Customer",
    storage_key="customers",
    entity_type=Customer,
    create_schema=CustomerCreate,
    record_schema=CustomerRecord,
    seed=seeds.sample_customers,
    searchable_fields=("name", "email"),
    filter_fields=("status",),
)

PRODUCTS: EntityDefinition[Product] = EntityDefinition(
    name="Product",
    storage_key="products",
    entity_type=Product,
    create_schema=ProductCreate,
    record_schema=ProductRecord,
    seed=seeds.sample_products,
    searchable_fields=("name", "description"),
    filter_fields=("category", "status"),
    derive=apply_stock_status,
    immutable_fields=("created_at",),
    builder=_build_product,
)

TRANSACTIONS: EntityDefinition[Transaction] = EntityDefinition(
    name="Transaction",
    storage_key="transactions",
    entity_type=Transaction,
    create_schema=TransactionCreate,
    record_schema=TransactionRecord,
    seed=seeds.sample_transactions,
    searchable_fields=("customer", "id"),
    filter_fields=("status",),
)

USERS: EntityDefinition[User] = EntityDefinition(
    name="User",
    storage_key="users",
    entity_type=User,
    create_schema=UserCreate,
    record_schema=UserRecord,
    seed=seeds.sample_users,
    searchable_fields=("name", "email"),
    filter_fields=("role", "status"),
)

ALL_DEFINITIONS: tuple[EntityDefinition[Any], ...] = (CUSTOMERS, PRODUCTS, TRANSACTIONS, USERS)
