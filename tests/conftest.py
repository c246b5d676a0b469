"""Pytest fixtures and configuration for Sprint03 tests."""

import os

# Keep application startup off the on-disk default database
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from datetime import date
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from sprint03.database.database import Base, build_engine, get_db, init_db
from sprint03.database.nome_usuario_repository import NomeUsuarioRepository
from sprint03.models.nome_usuario import NomeUsuarioPayload


# Use in-memory SQLite database for tests
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def db_session():
    """Create a database session for testing.

    Uses an in-memory SQLite database that is created fresh for each test.
    """
    # StaticPool keeps the single in-memory connection alive across threads
    engine = build_engine(TEST_DATABASE_URL, poolclass=StaticPool, echo=False)
    init_db(engine_override=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def nome_usuario_repository(db_session: Session):
    """Create a NomeUsuarioRepository instance for testing."""
    return NomeUsuarioRepository(db_session)


@pytest.fixture
def sample_payload_base():
    """Base user fields, as JSON, that tests can override."""
    return {
        "name": "Murillo Ramos",
        "email": "murillo@example.com",
        "birthDate": "2005-07-14",
        "phoneNumber": "11999999999",
    }


@pytest.fixture
def sample_payload(sample_payload_base):
    """Create a sample NomeUsuarioPayload for testing."""
    return NomeUsuarioPayload(**sample_payload_base)


@pytest.fixture
def other_payload():
    """A second, distinct set of user fields."""
    return NomeUsuarioPayload(
        name="Usuário Atualizado",
        email="atualizado@example.com",
        phone_number="11888888888",
        birth_date=date(1990, 1, 1),
    )


@pytest.fixture
def test_client(db_session: Session):
    """Create a FastAPI test client with overridden database dependency."""
    from sprint03.api.app import app

    # Override the get_db dependency to use our test database session
    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Don't close the session here, let the fixture handle it

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as client:
        yield client

    # Clean up dependency overrides
    app.dependency_overrides.clear()
