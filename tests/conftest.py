"""Shared fixtures: an in-memory storage fake for the KeyValueStorage port."""

import json
from typing import Any

import pytest

from dashboard_store.application.interfaces import KeyValueStorage


class FakeStorage(KeyValueStorage):
    """In-memory fake storage; values are JSON round-tripped like the real adapter."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self.data: dict[str, Any] = {}
        self.save_calls: list[str] = []
        for key, value in (initial or {}).items():
            self.data[key] = json.loads(json.dumps(value))

    def load(self, key: str) -> Any | None:
        if key not in self.data:
            return None
        return json.loads(json.dumps(self.data[key]))

    def save(self, key: str, value: Any) -> None:
        self.save_calls.append(key)
        self.data[key] = json.loads(json.dumps(value))

    def clear(self, key: str) -> bool:
        if key not in self.data:
            return False
        del self.data[key]
        return True


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def storage_factory():
    """Build a FakeStorage pre-loaded with raw JSON values."""
    return FakeStorage
