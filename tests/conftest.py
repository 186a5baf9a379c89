"""Shared pytest fixtures for the string analyzer tests."""

import pytest
from fastapi.testclient import TestClient

from string_analyzer import crud
from string_analyzer.main import create_app
from string_analyzer.storage import InMemoryStore


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def seeded_store(store: InMemoryStore) -> InMemoryStore:
    """Store holding a small mix of palindromes, phrases and plain words."""
    for value in ["abc", "level", "racecar", "hello world", "A man a plan", "zebra"]:
        crud.create_string(store, value)
    return store


@pytest.fixture
def client(store: InMemoryStore) -> TestClient:
    return TestClient(create_app(store=store))
