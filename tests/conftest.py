# tests/conftest.py

"""
Shared fixtures. The suite runs against an in-memory SQLite database, so
DATABASE_URL has to be set before anything from catalog_service is imported.
Tables are dropped and recreated for every test.
"""
import logging
import os
from decimal import Decimal

os.environ["DATABASE_URL"] = "sqlite://"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from catalog_service.db import Base, SessionLocal, engine  # noqa: E402
from catalog_service.main import app  # noqa: E402
from catalog_service.models import Product  # noqa: E402
from catalog_service.repository import ProductRepository  # noqa: E402
from catalog_service.service import ProductService  # noqa: E402

# Suppress noisy logs from SQLAlchemy/FastAPI during tests for cleaner output
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
logging.getLogger("fastapi").setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def reset_database():
    """Start every test from empty tables."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def service(db_session):
    return ProductService(ProductRepository(db_session))


@pytest.fixture
def add_products(db_session):
    """Insert products directly, bypassing the API. Takes (name, description, price) tuples."""

    def _add(*rows):
        products = [
            Product(name=name, description=description, price=Decimal(str(price)))
            for name, description, price in rows
        ]
        db_session.add_all(products)
        db_session.commit()
        for product in products:
            db_session.refresh(product)
        return products

    return _add


@pytest.fixture
def client():
    """
    TestClient for the FastAPI application; entering it runs the startup
    handler that creates the tables.
    """
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
