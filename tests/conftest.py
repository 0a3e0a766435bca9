"""Pytest fixtures for async FastAPI testing.

Loads `.env.test` before any application module reads settings, creates a
clean SQLite schema for the session, empties every table between tests and
provides an httpx `AsyncClient` plus a sync `BloodLinkClient` bound to the app.
"""
import os
import pathlib
import tempfile

import pytest
from dotenv import load_dotenv

ROOT = pathlib.Path(__file__).resolve().parent.parent
load_dotenv(dotenv_path=str(ROOT / ".env.test"))
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_bloodlink.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="bloodlink-uploads-"))


@pytest.fixture(scope="session")
def prepare_database():
    """Create clean schema for the test session."""
    from bloodlink.core.database import engine, Base

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    yield

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_database(prepare_database):
    """Listing endpoints return whole tables, so every test starts empty."""
    from bloodlink.core.database import engine, Base

    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())
    yield


@pytest.fixture
def db_session(prepare_database):
    """Yield a SQLAlchemy session for direct DB access in tests."""
    from bloodlink.core.database import SessionLocal

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def app():
    from bloodlink.main import create_app

    return create_app()


@pytest.fixture
async def async_client(app):
    """Provide an httpx AsyncClient configured with the FastAPI app."""
    from httpx import ASGITransport, AsyncClient

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client


@pytest.fixture
def api_client(app, tmp_path):
    """BloodLinkClient talking to the app in-process, with a throwaway session file."""
    from fastapi.testclient import TestClient
    from bloodlink.client import BloodLinkClient, SessionStore

    session = SessionStore(path=tmp_path / "session.json")
    with TestClient(app) as http:
        yield BloodLinkClient(session=session, http=http)


def registration_form(**overrides):
    form = {
        "name": "Dana Donor",
        "email": "dana@example.com",
        "password": "Secret123!",
        "location": "Sunnyvale",
        "accountType": "donor",
    }
    form.update(overrides)
    return form
