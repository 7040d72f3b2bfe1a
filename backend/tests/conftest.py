import os

# Point the app engine at SQLite before authlookup.core.database is imported.
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("INTERNAL_API_SECRET", "test_internal_secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from authlookup.core.base import Base
from authlookup.core import config as app_config

# Import models so they register with SQLAlchemy metadata.
from authlookup.models.user import User  # noqa: F401

from authlookup.core.database import get_db

INTERNAL_SECRET = "test_internal_secret"


@pytest.fixture(scope="session")
def db_engine():
    # In-memory SQLite for fast, isolated tests.
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture()
def db_session(db_engine):
    # The in-memory DB persists across tests with StaticPool; reset schema per test.
    Base.metadata.drop_all(bind=db_engine)
    Base.metadata.create_all(bind=db_engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def _reset_mutable_settings():
    """
    Tests sometimes tweak global settings (app_config.settings.*). Restore them
    after each test to avoid cross-test coupling.
    """
    keys = ["INTERNAL_API_SECRET"]
    original = {k: getattr(app_config.settings, k) for k in keys}
    app_config.settings.INTERNAL_API_SECRET = INTERNAL_SECRET
    try:
        yield
    finally:
        for k, v in original.items():
            setattr(app_config.settings, k, v)


@pytest.fixture()
def app(db_session):
    from authlookup.main import app as fastapi_app

    def override_get_db():
        yield db_session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture()
def users(db_session):
    """
    Two stored users: alice (admin + reviewer) and a locked, disabled bob.
    """
    alice = User(
        username="alice",
        email="alice@example.com",
        password_hash="$argon2id$v=19$m=65536,t=3,p=4$alice",
        roles="ADMIN,REVIEWER",
        is_active=True,
        is_locked=False,
    )
    bob = User(
        username="bob",
        email="bob@example.org",
        password_hash="$argon2id$v=19$m=65536,t=3,p=4$bob",
        roles="VIEWER",
        is_active=False,
        is_locked=True,
    )
    db_session.add_all([alice, bob])
    db_session.commit()
    db_session.refresh(alice)
    db_session.refresh(bob)
    return alice, bob


@pytest.fixture()
def client(app, users):
    with TestClient(app) as c:
        c.headers.update({"x-internal-token": INTERNAL_SECRET})
        yield c
