"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from ledger_api.api import create_app
from ledger_api.models import AccountFields, TransactionFields
from ledger_api.store import AccountStore, LedgerEngine


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def store() -> AccountStore:
    """Fresh store for each test."""
    return AccountStore()


@pytest.fixture
def engine(store: AccountStore) -> LedgerEngine:
    """Engine bound to the test store."""
    return LedgerEngine(store)


@pytest.fixture
def sample_fields() -> AccountFields:
    """Sample account fields."""
    return AccountFields(
        name="Maria Silva",
        national_id="123.456.789-09",
        email="maria@example.com",
        age=32,
    )


@pytest.fixture
def other_fields() -> AccountFields:
    """Account fields with keys distinct from ``sample_fields``."""
    return AccountFields(
        name="João Souza",
        national_id="987.654.321-00",
        email="joao@example.com",
        age=45,
    )


@pytest.fixture
def income() -> TransactionFields:
    return TransactionFields(title="Salário", value=Decimal("1200"), kind="income")


@pytest.fixture
def outcome() -> TransactionFields:
    return TransactionFields(title="Aluguel", value=Decimal("1000"), kind="outcome")


@pytest.fixture
def client(store: AccountStore) -> TestClient:
    """HTTP client around an app serving the test store."""
    return TestClient(create_app(store=store))
