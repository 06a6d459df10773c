from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from finance_tracker.core.entities import LedgerEntry, TransactionType
from finance_tracker.core.ledger import InMemoryLedger
from finance_tracker.database import Base
from finance_tracker.main import create_app
from finance_tracker.models import budget, finance  # noqa: F401
from finance_tracker.services.budget_store import BudgetStore


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(session_factory):
    budget_store = BudgetStore(session_factory)
    yield budget_store
    budget_store.close()


@pytest.fixture
def client(session_factory):
    app = create_app(session_factory=session_factory)
    with TestClient(app) as test_client:
        yield test_client


def _expense(category, amount, day, type=TransactionType.EXPENSE):
    return LedgerEntry(category=category, amount=Decimal(str(amount)), date=day, type=type)


@pytest.fixture
def food_ledger():
    return InMemoryLedger([
        _expense("Food", 50, date(2024, 1, 10)),
        _expense("Food", 30, date(2024, 2, 5)),
        _expense("Food", 1000, date(2024, 1, 15), type=TransactionType.INCOME),
    ])
