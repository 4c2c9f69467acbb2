"""Shared pytest fixtures for the Tiles Ledger tests."""

from __future__ import annotations

import os
from datetime import date
from typing import Callable, Iterator

# Point the application at SQLite before any app module reads the settings.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.application.services import purchase_service, stock_ledger  # noqa: E402
from app.domain.models.purchase import Purchase  # noqa: E402
from app.domain.models.sale import Sale  # noqa: E402
from app.domain.models.store import Store  # noqa: E402
from app.domain.schemas.purchase import PurchaseCreate  # noqa: E402
from app.infrastructure.database import Base, get_db  # noqa: E402
from app.infrastructure.repositories.purchase_repository import SQLAlchemyPurchaseRepository  # noqa: E402
from app.infrastructure.repositories.sale_repository import SQLAlchemySaleRepository  # noqa: E402
from app.infrastructure.repositories.store_repository import SQLAlchemyStoreRepository  # noqa: E402
from app.main import app  # noqa: E402

SALE_DATE = date(2025, 7, 25)


@pytest.fixture
def engine():
    """A fresh in-memory database per test; StaticPool keeps one shared connection."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def session_factory(engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def other_db(session_factory) -> Iterator[Session]:
    """A second session on the same database, acting as a concurrent request."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def _reset_reversal_counter() -> Iterator[None]:
    stock_ledger.skipped_reversals.clear()
    yield
    stock_ledger.skipped_reversals.clear()


@pytest.fixture
def stores(db) -> SQLAlchemyStoreRepository:
    return SQLAlchemyStoreRepository(db, Store)


@pytest.fixture
def purchases(db) -> SQLAlchemyPurchaseRepository:
    return SQLAlchemyPurchaseRepository(db, Purchase)


@pytest.fixture
def sales(db) -> SQLAlchemySaleRepository:
    return SQLAlchemySaleRepository(db, Sale)


@pytest.fixture
def client(session_factory) -> Iterator[TestClient]:
    """HTTP client whose requests each get their own session on the test database."""

    def _get_test_db() -> Iterator[Session]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def record_purchase(db, purchases, stores) -> Callable[..., Purchase]:
    """Record a purchase through the service; 12x12 inch tiles make one foot per piece."""

    def _record(
        product_code: str = "gt-1212",
        *,
        caton: float = 0,
        pcs: float = 0,
        height: float = 12,
        width: float = 12,
        per_caton_to_pcs: float = 10,
        company: str = "rak",
        day: date = SALE_DATE,
    ) -> Purchase:
        body = PurchaseCreate(
            product_code=product_code,
            company=company,
            caton=caton,
            pcs=pcs,
            height=height,
            width=width,
            per_caton_to_pcs=per_caton_to_pcs,
            date=day,
        )
        return purchase_service.create_purchase(db, purchases, stores, body)

    return _record


@pytest.fixture
def store_feet(db) -> Callable[[str], float | None]:
    """Current feet on a store row, read back from the database."""

    def _feet(product_code: str) -> float | None:
        db.expire_all()
        row = db.query(Store).filter(Store.product_code == product_code).first()
        return row.feet if row else None

    return _feet
