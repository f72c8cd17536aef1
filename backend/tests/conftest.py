import os

# Must be set before users_api is imported: settings and the app engine are
# built at import time
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["AUTO_CREATE_TABLES"] = "false"

from datetime import datetime  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from users_api.database import get_session  # noqa: E402
from users_api.dependencies import get_user_service  # noqa: E402
from users_api.main import app  # noqa: E402
from users_api.models.user import User  # noqa: E402
from users_api.services.user_service import UserService  # noqa: E402

TEST_DATABASE_URL = "sqlite:///:memory:"

# ============================================================================
# Test Database Setup with StaticPool
# ============================================================================
# 1. sqlite:///:memory: with StaticPool so ALL sessions share the same DB
# 2. check_same_thread=False required for TestClient/threaded access
# 3. Tables created and dropped per test, not relying on app startup
# 4. App dependency overridden to use test_engine (see client_fixture)
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


def override_get_session():
    """Override session to use test engine"""
    with Session(test_engine) as session:
        yield session


@pytest.fixture(name="session", scope="function")
def session_fixture():
    """Provide a test database session on freshly created tables"""
    SQLModel.metadata.create_all(test_engine)

    with Session(test_engine) as session:
        yield session

    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Provide a test client with overridden database session

    Override MUST be set BEFORE TestClient() and stay in place for the
    entire duration so the app never uses its own engine.
    """
    app.dependency_overrides[get_session] = override_get_session

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture(name="mock_service")
def mock_service_fixture():
    """Replace the UserService behind the routes with a MagicMock"""
    service = MagicMock(spec=UserService)
    app.dependency_overrides[get_user_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


@pytest.fixture(name="mocked_client")
def mocked_client_fixture(mock_service):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_user():
    """Build unsaved User rows with fixed timestamps"""

    def _make(user_id=1, name="Alice", email="alice@example.com", age=42):
        stamp = datetime(2026, 1, 15, 12, 0, 0)
        return User(id=user_id, name=name, email=email, age=age, created_at=stamp, updated_at=stamp)

    return _make
