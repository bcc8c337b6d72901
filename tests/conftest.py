"""
Shared fixtures: a throwaway SQLite database per test, a row store over it,
and an HTTP client wired to the same database.
"""
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event

import darshan_admin.models  # noqa: F401  registers every table on Base.metadata
from darshan_admin.core.db import (
    Base,
    create_engine_from_url,
    create_session_factory,
    get_session_factory,
)
from darshan_admin.core.row_store import RowStore


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def engine(tmp_path):
    engine = create_engine_from_url(f"sqlite+aiosqlite:///{tmp_path / 'darshan.db'}")
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def row_store(session_factory):
    return RowStore(session_factory)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def async_client(session_factory):
    from darshan_admin.main import app

    app.dependency_overrides[get_session_factory] = lambda: session_factory
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


def _destination_text(lang: str, name: str) -> dict:
    return {
        "name": f"{name} ({lang})",
        "location": f"Uttar Pradesh ({lang})",
        "short_description": f"Holy city ({lang})",
        "detailed_description": f"One of the oldest living cities ({lang})",
    }


@pytest.fixture
def destination_draft_data():
    """Complete, valid destination form values for Varanasi"""
    return {
        "city": "Varanasi",
        "deity": "Shiva",
        "latitude": "25.3",
        "longitude": "83.0",
        "live_feed": "https://x/live",
        "sampradaya": "Shaiva",
        "translations": {
            lang: _destination_text(lang, "Kashi Vishwanath")
            for lang in ("en", "hi", "kn", "ml", "ta")
        },
        "images": ["https://x/img.jpg"],
    }


@pytest.fixture
def event_draft_data():
    """Build complete event form values for a destination id"""
    def build(destination_id: str, date: str = "2030-03-08") -> dict:
        return {
            "destination_id": destination_id,
            "start_time": "18:00",
            "end_time": "23:30",
            "date": date,
            "daily": False,
            "is_popular": True,
            "event_image": "https://x/shivaratri.jpg",
            "translations": {
                lang: {"name": f"Maha Shivaratri ({lang})", "description": f"Night vigil ({lang})"}
                for lang in ("en", "hi", "kn", "ml", "ta")
            },
        }
    return build
