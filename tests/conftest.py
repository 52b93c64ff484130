"""Shared fixtures: every test gets its own in-memory database."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ["DATABASE_URL"] = "sqlite://"
# Keep hashing fast in tests.
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"

from app.config import Settings, reset_settings_cache  # noqa: E402
from app.infrastructure.database import (  # noqa: E402
    Base,
    build_engine,
    create_session_factory,
    initialize_database,
)
from app.main import create_app  # noqa: E402

reset_settings_cache()


@pytest.fixture()
def settings() -> Settings:
    return Settings(database_url="sqlite://", password_hash_rounds=1000)


@pytest.fixture()
def engine(settings: Settings):
    engine = build_engine(settings)
    initialize_database(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session(engine):
    db = create_session_factory(engine)()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(settings: Settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
