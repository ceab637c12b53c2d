"""Pytest fixtures: an in-memory SQLite database and a TestClient bound to it.

Every test gets a fresh schema. Foreign keys are switched on for the
connection so cascades behave like they do on PostgreSQL.
"""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlalchemy.pool import StaticPool

import portfolio.models  # noqa: F401
from portfolio.db.session import enable_sqlite_foreign_keys, get_session
from portfolio.main import app
from portfolio.models import UserRole
from portfolio.services.user import UserService


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session: Session):
    """Factory creating users straight through the service layer."""
    service = UserService(session)

    def _make_user(email: str = "ada@example.com", full_name: str = "Ada Lovelace", role=UserRole.EDITOR):
        return service.create_user(full_name, email, "s3cret-pass", role=role)

    return _make_user
