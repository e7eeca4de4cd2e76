import asyncio
import os
import sys
import tempfile

# Ensure the workerhub package is on sys.path for imports during tests
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Settings are read at import time, so the environment must be prepared first
_TEST_ROOT = tempfile.mkdtemp(prefix="workerhub-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_TEST_ROOT, 'app.db')}"
os.environ["UPLOAD_DIR"] = os.path.join(_TEST_ROOT, "uploads")
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from workerhub.core.database import Base, get_db
from workerhub.main import app

# Taipei 101
ORIGIN_LAT = 25.0330
ORIGIN_LNG = 121.5654


async def _create_tables(engine):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
def session_factory(tmp_path):
    """Session factory bound to a fresh SQLite database per test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    asyncio.run(_create_tables(engine))
    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    asyncio.run(engine.dispose())


@pytest.fixture
def client(session_factory):
    """TestClient whose requests use the per-test database."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def create_worker(client):
    """Register a worker, log in and return the worker JSON from the login response."""
    def _create(phone, category="plumber", latitude=ORIGIN_LAT, longitude=ORIGIN_LNG,
                password="secret123", available=False, **extra):
        payload = {
            "name": extra.get("name", f"Worker {phone}"),
            "phone": phone,
            "password": password,
            "category": category,
            "address": extra.get("address", "Taipei"),
            "latitude": latitude,
            "longitude": longitude,
        }
        resp = client.post("/register", json=payload)
        assert resp.status_code == 200, resp.text

        resp = client.post("/login", json={"phone": phone, "password": password})
        assert resp.status_code == 200, resp.text
        worker = resp.json()["worker"]

        if available:
            resp = client.post("/worker/availability", json={"workerId": worker["_id"], "isAvailable": True})
            assert resp.status_code == 200, resp.text
            worker = resp.json()["worker"]
        return worker

    return _create
