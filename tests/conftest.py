"""
Pytest configuration and shared fixtures for ratings tests.

This module provides test fixtures for:
- Database sessions (in-memory SQLite for fast tests)
- FastAPI test client
- Rating factories and seeding helpers
"""

import os

# The default engine must never touch a file during tests
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("USE_DB_REPOS", "true")

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from ratings.domain.entities.rating import Rating
from ratings.infrastructure.persistence import models
from ratings.infrastructure.persistence.db import Base, enable_sqlite_foreign_keys, get_db
from ratings.main import app

BASE_DATE = 1257894000000


# ==============================================================================
# DATABASE FIXTURES
# ==============================================================================

@pytest.fixture(scope="function")
def test_db_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_db_session(test_db_engine) -> Generator[Session, None, None]:
    """Create a database session for testing, with user 1 already stored."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_db_engine
    )

    session = TestingSessionLocal()
    session.add(models.User(id=1, email="test@test.com", first_name="Test", last_name="User"))
    session.commit()

    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def client(test_db_session) -> Generator[TestClient, None, None]:
    """Create a FastAPI test client with test database."""

    def override_get_db():
        try:
            yield test_db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ==============================================================================
# TEST DATA FACTORIES
# ==============================================================================

def make_rating(**overrides) -> Rating:
    """A complete rating as stored, fields overridable."""
    values = dict(
        id=999,
        active=True,
        anonymous=True,
        comment="",
        date=BASE_DATE,
        extra="{}",
        score=10,
        target=6345,
        user_id=1,
    )
    values.update(overrides)
    return Rating(**values)


@pytest.fixture
def rating_factory():
    return make_rating


@pytest.fixture
def seed(test_db_session):
    """Store rows and users directly, bypassing the repository."""

    def _seed(*rows):
        for row in rows:
            if isinstance(row, Rating):
                row = models.Rating(**row.to_dict())
            test_db_session.add(row)
        test_db_session.commit()
        # Later reads must hit the database, not the identity map
        test_db_session.expunge_all()

    return _seed


@pytest.fixture
def drop_ratings_table(test_db_engine):
    """Simulate a broken database."""

    def _drop():
        models.Rating.__table__.drop(bind=test_db_engine)

    return _drop


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables after each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# ==============================================================================
# MARKERS
# ==============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: Mark test as an integration test"
    )
