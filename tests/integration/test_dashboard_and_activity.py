"""
Dashboard statistics and user activity views
"""
from datetime import date, datetime

import pytest

from darshan_admin.core.exceptions import StoreError
from darshan_admin.core.row_store import RowStore
from darshan_admin.models.activity import SavedPlace, UserRequest
from darshan_admin.models.destination import Destination
from darshan_admin.models.enums import Deity, Sampradaya
from darshan_admin.models.event import Event
from darshan_admin.models.user import User
from darshan_admin.services.dashboard_service import DashboardService
from darshan_admin.services.user_activity_service import UserActivityService


@pytest.fixture
async def seeded(db_session):
    db_session.add_all([
        User(id="U1", email="asha@example.com", display_name="Asha"),
        User(id="U2", email="ravi@example.com"),
        Destination(
            id="D1", city="Tirupati", deity=Deity.VISHNU, latitude=13.6, longitude=79.4,
            live_feed="https://x/tirupati", sampradaya=Sampradaya.VAISHNAVA,
            created_at=datetime(2025, 1, 1, 9, 0),
        ),
        Destination(
            id="D2", city="Madurai", deity=Deity.DEVI, latitude=9.9, longitude=78.1,
            live_feed="https://x/madurai", sampradaya=Sampradaya.SHAKTA,
            created_at=datetime(2025, 2, 1, 9, 0),
        ),
    ])
    await db_session.flush()
    db_session.add_all([
        Event(id="E-past", destination_id="D1", start_time="06:00", end_time="09:00",
              date=date(2025, 1, 10)),
        Event(id="E-soon", destination_id="D1", start_time="06:00", end_time="09:00",
              date=date(2025, 3, 1)),
        Event(id="E-later", destination_id="D2", start_time="18:00", end_time="21:00",
              date=date(2025, 4, 1)),
        UserRequest(user_id="U1", request="Add Srirangam", created_at=datetime(2025, 1, 5)),
        UserRequest(user_id="U2", request="Fix Madurai timings", created_at=datetime(2025, 2, 5)),
        SavedPlace(user_id="U1", destination_id="D1"),
        SavedPlace(user_id="U2", destination_id="D2"),
    ])
    await db_session.commit()


@pytest.mark.asyncio
async def test_dashboard_totals_and_lists(row_store, seeded):
    stats = await DashboardService(row_store).get_stats(today=date(2025, 2, 15))

    assert stats.total_destinations == 2
    assert stats.total_events == 3
    assert stats.total_requests == 2
    assert [d.id for d in stats.recent_destinations] == ["D2", "D1"]
    assert [e.id for e in stats.upcoming_events] == ["E-soon", "E-later"]
    assert [r.request for r in stats.recent_requests] == ["Fix Madurai timings", "Add Srirangam"]


@pytest.mark.asyncio
async def test_dashboard_respects_recent_limit(row_store, seeded):
    stats = await DashboardService(row_store, recent_limit=1).get_stats(today=date(2025, 1, 1))

    assert len(stats.recent_destinations) == 1
    assert [e.id for e in stats.upcoming_events] == ["E-past"]
    assert len(stats.recent_requests) == 1


@pytest.mark.asyncio
async def test_dashboard_falls_back_when_a_query_fails(session_factory, seeded):
    class NoCountStore(RowStore):
        async def count(self, model, *criteria):
            raise StoreError("count unavailable", collection=model.__tablename__, operation="count")

    stats = await DashboardService(NoCountStore(session_factory)).get_stats(today=date(2025, 2, 15))

    assert stats.total_destinations == 0
    assert stats.total_requests == 0
    assert len(stats.recent_destinations) == 2


@pytest.mark.asyncio
async def test_dashboard_on_empty_store(row_store):
    stats = await DashboardService(row_store).get_stats()
    assert stats.total_destinations == 0
    assert stats.upcoming_events == []


@pytest.mark.asyncio
async def test_requests_newest_first_with_user(row_store, seeded):
    requests = await UserActivityService(row_store).list_requests()

    assert [r.request for r in requests] == ["Fix Madurai timings", "Add Srirangam"]
    assert requests[1].user.display_name == "Asha"
    assert requests[0].user.email == "ravi@example.com"


@pytest.mark.asyncio
async def test_saved_places_with_user_and_destination(row_store, seeded):
    places = await UserActivityService(row_store).list_saved_places()

    assert [p.destination.city for p in places] == ["Madurai", "Tirupati"]
    assert places[1].user.id == "U1"
    assert places[1].destination.deity is Deity.VISHNU
