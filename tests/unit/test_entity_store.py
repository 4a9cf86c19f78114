"""Unit tests for the generic EntityStore — seeding, CRUD, write-through and quarantine."""

import math
from dataclasses import replace
from datetime import date

import pytest

from dashboard_store.application.schemas import ProductCreate, UserCreate
from dashboard_store.application.seeds import sample_products
from dashboard_store.application.services import (
    CUSTOMERS,
    PRODUCTS,
    TRANSACTIONS,
    USERS,
    EntityStore,
)
from dashboard_store.domain.entities import (
    ActivityStatus,
    ProductCategory,
    ProductStatus,
    RecordQuery,
    TransactionStatus,
    UserRole,
)
from dashboard_store.domain.exceptions import (
    EntityNotFoundError,
    InvalidRecordError,
    UnknownFilterFieldError,
)


def _everything(_record) -> bool:
    return True


@pytest.fixture
def products(storage) -> EntityStore:
    store = EntityStore(PRODUCTS, storage)
    store.initialize()
    return store


# ── Seeding ──────────────────────────────────────────────────────────


def test_initialize_seeds_empty_storage_and_persists_seed(storage):
    store = EntityStore(PRODUCTS, storage)

    records = store.initialize()

    assert [p.name for p in records] == [p.name for p in sample_products()]
    assert storage.data["products"] == [PRODUCTS.to_record(p) for p in records]
    assert storage.save_calls == ["products"]


def test_initialize_loads_existing_collection_without_reseeding(storage):
    first = EntityStore(USERS, storage).initialize()
    storage.save_calls.clear()

    second = EntityStore(USERS, storage).initialize()

    assert second == first
    assert storage.save_calls == []


def test_initialize_is_idempotent(storage):
    store = EntityStore(CUSTOMERS, storage)
    first = store.initialize()
    assert store.initialize() == first
    assert len(first) == 10


def test_operations_initialize_lazily(storage):
    store = EntityStore(TRANSACTIONS, storage)
    assert not store.is_initialized
    assert len(store.filter(_everything)) == 5
    assert store.is_initialized


def test_persisted_records_use_camel_case_keys(storage):
    EntityStore(TRANSACTIONS, storage).initialize()
    first = storage.data["transactions"][0]
    assert set(first) == {"id", "date", "customer", "amount", "status", "paymentMethod"}


# ── Create ───────────────────────────────────────────────────────────


def test_create_prepends_record_with_fresh_id(products, storage):
    created = products.create(
        ProductCreate(name="Desk Lamp", description="LED lamp", price=39.5, category="Home", stock=12)
    )

    everything = products.filter(_everything)
    assert everything[0] == created
    assert len(created.id) == 7
    assert created.id not in {p.id for p in everything[1:]}
    assert created.name == "Desk Lamp"
    assert created.category == ProductCategory.HOME
    assert created.created_at == date.today().isoformat()
    assert storage.data["products"][0]["id"] == created.id
    assert len(storage.data["products"]) == 6


def test_create_accepts_mapping_with_defaults(storage):
    store = EntityStore(TRANSACTIONS, storage)

    created = store.create({"customer": "Ann Lee", "amount": 12.5, "paymentMethod": "PayPal"})

    assert created.payment_method == "PayPal"
    assert created.status == TransactionStatus.PENDING
    assert created.date == date.today().isoformat()


def test_create_accepts_empty_text_fields(storage):
    store = EntityStore(USERS, storage)
    created = store.create(UserCreate())
    assert created.name == ""
    assert created.role == UserRole.VIEWER
    assert created.status == ActivityStatus.ACTIVE


def test_create_rejects_out_of_enum_value_without_persisting(products, storage):
    storage.save_calls.clear()

    with pytest.raises(InvalidRecordError):
        products.create({"name": "Mystery", "category": "Groceries"})

    assert storage.save_calls == []
    assert len(products) == 5


@pytest.mark.parametrize(
    ("stock", "expected"),
    [
        (0, ProductStatus.OUT_OF_STOCK),
        (-2, ProductStatus.OUT_OF_STOCK),
        (1, ProductStatus.LOW_STOCK),
        (3, ProductStatus.LOW_STOCK),
        (5, ProductStatus.LOW_STOCK),
        (6, ProductStatus.IN_STOCK),
        (42, ProductStatus.IN_STOCK),
    ],
)
def test_create_derives_product_status_from_stock(products, storage, stock, expected):
    created = products.create({"name": "Widget", "stock": stock})
    assert created.status == expected
    assert storage.data["products"][0]["status"] == expected.value


def test_create_keeps_non_numeric_input_as_nan(products, storage):
    created = products.create({"name": "Odd", "price": "twelve", "stock": "abc"})

    assert math.isnan(created.price)
    assert math.isnan(created.stock)
    assert created.status == ProductStatus.IN_STOCK
    persisted = storage.data["products"][0]
    assert math.isnan(persisted["price"])
    assert math.isnan(persisted["stock"])
    assert persisted["status"] == "In Stock"


def test_create_with_nan_stock_is_in_stock(products, storage):
    created = products.create({"name": "Unknown", "stock": math.nan})

    assert created.status == ProductStatus.IN_STOCK
    assert math.isnan(storage.data["products"][0]["stock"])


def test_create_parses_numeric_text(products):
    created = products.create({"name": "Cable", "price": " 4.5 ", "stock": "3"})

    assert created.price == 4.5
    assert created.stock == 3
    assert created.status == ProductStatus.LOW_STOCK


# ── Update ───────────────────────────────────────────────────────────


def test_update_replaces_matching_record_in_place(products, storage):
    target = products.filter(_everything)[2]

    updated = products.update(replace(target, name="Bluetooth Speaker Mini", price=69.99))

    everything = products.filter(_everything)
    assert everything[2] == updated
    assert everything[2].name == "Bluetooth Speaker Mini"
    assert storage.data["products"][2]["price"] == 69.99


def test_update_twice_equals_update_once(products, storage):
    target = products.filter(_everything)[0]
    changed = replace(target, description="Refurbished")

    products.update(changed)
    once = products.filter(_everything)
    persisted_once = storage.data["products"]
    products.update(changed)

    assert products.filter(_everything) == once
    assert storage.data["products"] == persisted_once


def test_update_recomputes_stale_status(products, storage):
    target = products.filter(_everything)[0]
    assert target.status == ProductStatus.IN_STOCK

    updated = products.update(replace(target, stock=0))

    assert updated.status == ProductStatus.OUT_OF_STOCK
    assert storage.data["products"][0]["status"] == "Out of Stock"


def test_update_with_non_numeric_stock_stores_nan(products, storage):
    target = products.filter(_everything)[3]
    assert target.status == ProductStatus.OUT_OF_STOCK

    updated = products.update(replace(target, stock="abc"))

    assert math.isnan(updated.stock)
    assert updated.status == ProductStatus.IN_STOCK
    persisted = storage.data["products"][3]
    assert math.isnan(persisted["stock"])
    assert persisted["status"] == "In Stock"


def test_update_keeps_created_at(products):
    target = products.filter(_everything)[0]
    updated = products.update(replace(target, created_at="2030-01-01"))
    assert updated.created_at == target.created_at


def test_update_unknown_id_raises_in_strict_mode(storage):
    store = EntityStore(PRODUCTS, storage, strict_mutations=True)
    ghost = replace(store.initialize()[0], id="missing")
    storage.save_calls.clear()

    with pytest.raises(EntityNotFoundError):
        store.update(ghost)

    assert storage.save_calls == []


def test_update_unknown_id_is_noop_by_default(storage):
    store = EntityStore(PRODUCTS, storage)
    before = store.initialize()
    storage.save_calls.clear()

    result = store.update(replace(before[0], id="missing", name="Ghost"))

    assert result is None
    assert store.filter(_everything) == before
    assert storage.save_calls == []


# ── Delete ───────────────────────────────────────────────────────────


def test_delete_removes_record_everywhere(products, storage):
    victim = products.filter(_everything)[1]

    assert products.delete(victim.id) is True

    assert victim.id not in {p.id for p in products.filter(_everything)}
    assert products.list_records(victim.name) == []
    assert victim.id not in {raw["id"] for raw in storage.data["products"]}
    with pytest.raises(EntityNotFoundError):
        products.get(victim.id)


def test_delete_unknown_id_raises_in_strict_mode(storage):
    store = EntityStore(USERS, storage, strict_mutations=True)
    with pytest.raises(EntityNotFoundError):
        store.delete("missing")


def test_delete_unknown_id_returns_false_by_default(storage):
    store = EntityStore(USERS, storage)
    store.initialize()
    storage.save_calls.clear()

    assert store.delete("missing") is False
    assert storage.save_calls == []


# ── Queries & previews ───────────────────────────────────────────────


def test_list_records_combines_term_and_filters(products):
    result = products.list_records("wireless", {"category": "Electronics", "status": "all"})
    assert [p.name for p in result] == ["Wireless Headphones", "Wireless Mouse"]


def test_search_with_record_query(storage):
    users = EntityStore(USERS, storage)
    query = RecordQuery(term="", filters={"role": "Editor", "status": "Active"})
    assert [u.name for u in users.search(query)] == ["Jane Smith", "Emily Davis"]


def test_list_records_rejects_unknown_filter_field(products):
    with pytest.raises(UnknownFilterFieldError):
        products.list_records("", {"price": "10"})


def test_count_tallies_customer_activity(storage):
    customers = EntityStore(CUSTOMERS, storage)

    total = customers.count()
    active = customers.count(lambda c: c.status == ActivityStatus.ACTIVE)
    inactive = customers.count(lambda c: c.status == ActivityStatus.INACTIVE)

    assert total == 10
    assert active + inactive == total
    assert active == len(customers.list_records("", {"status": "Active"}))


def test_preview_derives_status_without_persisting(products, storage):
    storage.save_calls.clear()

    draft = products.preview({"name": "Draft", "stock": 2})

    assert draft.status == ProductStatus.LOW_STOCK
    assert draft.id == ""
    assert storage.save_calls == []
    assert len(products) == 5


def test_preview_of_edited_entity(products):
    target = products.filter(_everything)[0]
    assert products.preview(replace(target, stock=4)).status == ProductStatus.LOW_STOCK


# ── Defensive loading ────────────────────────────────────────────────


def _user(**overrides):
    raw = {
        "id": "u1",
        "name": "Ada",
        "email": "ada@example.com",
        "role": "Admin",
        "status": "Active",
        "lastLogin": "2023-05-01",
    }
    raw.update(overrides)
    return raw


def test_invalid_stored_records_are_quarantined(storage_factory):
    storage = storage_factory(
        {
            "users": [
                _user(),
                _user(id="u2", role="Owner"),
                "garbage",
                _user(name="Duplicate"),
                _user(id="u3", lastLogin="yesterday"),
            ]
        }
    )
    store = EntityStore(USERS, storage)

    records = store.initialize()

    assert [u.id for u in records] == ["u1"]
    assert len(store.quarantined) == 4
    assert storage.data["users.quarantine"] == store.quarantined
    assert storage.data["users"] == [USERS.to_record(records[0])]


def test_non_array_blob_is_quarantined_and_reseeded(storage_factory):
    storage = storage_factory({"customers": {"oops": 1}})
    store = EntityStore(CUSTOMERS, storage)

    records = store.initialize()

    assert len(records) == 10
    assert storage.data["customers.quarantine"] == [{"oops": 1}]


def test_stale_derived_status_is_corrected_on_load(storage_factory):
    raw = PRODUCTS.to_record(sample_products()[0])
    raw["stock"] = 0
    storage = storage_factory({"products": [raw]})

    (product,) = EntityStore(PRODUCTS, storage).initialize()

    assert product.status == ProductStatus.OUT_OF_STOCK


def test_reset_restores_sample_data(products):
    products.create({"name": "Temporary"})
    records = products.reset()
    assert [p.name for p in records] == [p.name for p in sample_products()]
