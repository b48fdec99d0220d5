import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from server.core import session as session_service  # noqa: E402
from server.database import get_db  # noqa: E402
from server.main import app  # noqa: E402
from server.models import Base  # noqa: E402


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield sessionmaker(bind=engine, autoflush=False, autocommit=False)
    finally:
        engine.dispose()


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def alice(db_session):
    user, _ = session_service.register(db_session, "Alice", "a@x.com", "secret1")
    return user


@pytest.fixture()
def bob(db_session):
    user, _ = session_service.register(db_session, "Bob", "bob@example.com", "hunter22")
    return user


def widget(**overrides) -> dict:
    fields = {
        "name": "Widget",
        "sku": "W1",
        "category": "Tools",
        "quantity": 5,
        "price": 9.99,
        "description": "A small widget",
    }
    fields.update(overrides)
    return fields


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
