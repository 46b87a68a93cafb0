"""Pytest configuration and shared fixtures."""

import os
import tempfile
from pathlib import Path
from typing import Generator

# Configure the application before any campuscoffee module is imported
_config_dir = tempfile.mkdtemp(prefix="campuscoffee-test-")
os.environ["CAMPUSCOFFEE_CONFIG_FILE"] = str(Path(_config_dir) / "config.json")
os.environ["CAMPUSCOFFEE_DATABASE_URL"] = "sqlite://"
os.environ["CAMPUSCOFFEE_LOG_TO_FILE"] = "0"
os.environ.pop("CAMPUSCOFFEE_STORAGE", None)
os.environ.pop("CAMPUSCOFFEE_DEBUG", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from campuscoffee.config import get_config
from campuscoffee.db import models  # noqa: F401  registers the tables
from campuscoffee.db.database import Base, get_db
from campuscoffee.domain.models import CampusType, Pos, PosType, User
from campuscoffee.repositories.dependencies import (
    get_memory_pos_data_service,
    get_memory_user_data_service,
)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Fast tests without external resources")
    config.addinivalue_line("markers", "integration: Tests that use a database")


@pytest.fixture
def test_engine():
    """In-memory SQLite engine shared by all sessions of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def test_db(test_engine):
    """Session factory bound to the test engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session(test_db):
    """Create a database session for one test."""
    session = test_db()
    yield session
    session.close()


@pytest.fixture
def sqlalchemy_client(test_db, monkeypatch) -> Generator[TestClient, None, None]:
    """Test client backed by the SQLAlchemy data services."""
    from campuscoffee.main import app

    monkeypatch.setattr(get_config().app, "storage", "sqlalchemy")

    def override_get_db():
        db = test_db()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def memory_client(monkeypatch) -> Generator[TestClient, None, None]:
    """Test client backed by fresh in-memory data services."""
    from campuscoffee.main import app

    monkeypatch.setattr(get_config().app, "storage", "memory")
    get_memory_pos_data_service.cache_clear()
    get_memory_user_data_service.cache_clear()

    with TestClient(app) as test_client:
        yield test_client

    get_memory_pos_data_service.cache_clear()
    get_memory_user_data_service.cache_clear()


@pytest.fixture(params=["memory", "sqlalchemy"])
def client(request) -> TestClient:
    """Test client for each storage backend."""
    return request.getfixturevalue(f"{request.param}_client")


@pytest.fixture
def sample_pos() -> Pos:
    """A point of sale that has not been persisted."""
    return Pos(
        name="Schmelzpunkt",
        description="Great waffles",
        type=PosType.CAFE,
        campus=CampusType.ALTSTADT,
        street="Hauptstraße",
        house_number="90",
        postal_code=69117,
        city="Heidelberg",
    )


@pytest.fixture
def another_pos() -> Pos:
    """A second point of sale with a different name."""
    return Pos(
        name="Bäcker Görtz",
        description="Bakery near the library",
        type=PosType.BAKERY,
        campus=CampusType.INF,
        street="Berliner Straße",
        house_number="43",
        postal_code=69120,
        city="Heidelberg",
    )


@pytest.fixture
def sample_user() -> User:
    """A user that has not been persisted."""
    return User(
        login_name="jane_doe",
        email_address="jane.doe@uni-heidelberg.de",
        first_name="Jane",
        last_name="Doe",
    )


@pytest.fixture
def pos_payload() -> dict:
    """JSON body for creating a POS through the API."""
    return {
        "name": "Café Botanik",
        "description": "Coffee next to the botanical garden",
        "type": "CAFE",
        "campus": "INF",
        "street": "Im Neuenheimer Feld",
        "house_number": "304",
        "postal_code": 69120,
        "city": "Heidelberg",
    }


@pytest.fixture
def user_payload() -> dict:
    """JSON body for creating a user through the API."""
    return {
        "login_name": "max_mustermann",
        "email_address": "max@uni-heidelberg.de",
        "first_name": "Max",
        "last_name": "Mustermann",
    }
