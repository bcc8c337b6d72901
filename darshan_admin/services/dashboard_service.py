"""
Dashboard Service - totals and short lists for the overview page
"""
import logging
from datetime import date
from typing import Awaitable, TypeVar

from darshan_admin.core.exceptions import StoreError
from darshan_admin.core.row_store import RowStore
from darshan_admin.models.activity import UserRequest
from darshan_admin.models.destination import Destination
from darshan_admin.models.event import Event
from darshan_admin.schemas.activity import (
    DashboardStats,
    RecentDestination,
    RecentRequest,
    UpcomingEvent,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DashboardService:
    """
    Builds the overview statistics. A failing query is logged and its
    section falls back to zero or an empty list.
    """

    def __init__(self, store: RowStore, recent_limit: int = 5):
        self.store = store
        self.recent_limit = recent_limit

    async def _or_default(self, query: Awaitable[T], default: T, section: str) -> T:
        try:
            return await query
        except StoreError as e:
            logger.error(f"Dashboard {section} query failed: {e.message}")
            return default

    async def get_stats(self, today: date = None) -> DashboardStats:
        """
        Args:
            today: Reference date for upcoming events (defaults to today)
        """
        today = today or date.today()
        limit = self.recent_limit

        total_destinations = await self._or_default(
            self.store.count(Destination), 0, "destination count"
        )
        total_events = await self._or_default(self.store.count(Event), 0, "event count")
        total_requests = await self._or_default(
            self.store.count(UserRequest), 0, "request count"
        )
        recent_destinations = await self._or_default(
            self.store.select(
                Destination, order_by=[Destination.created_at.desc()], limit=limit
            ),
            [],
            "recent destinations",
        )
        upcoming_events = await self._or_default(
            self.store.select(
                Event, Event.date >= today, order_by=[Event.date.asc()], limit=limit
            ),
            [],
            "upcoming events",
        )
        recent_requests = await self._or_default(
            self.store.select(
                UserRequest, order_by=[UserRequest.created_at.desc()], limit=limit
            ),
            [],
            "recent requests",
        )

        return DashboardStats(
            total_destinations=total_destinations,
            total_events=total_events,
            total_requests=total_requests,
            recent_destinations=[RecentDestination.model_validate(d) for d in recent_destinations],
            upcoming_events=[UpcomingEvent.model_validate(e) for e in upcoming_events],
            recent_requests=[RecentRequest.model_validate(r) for r in recent_requests],
        )
