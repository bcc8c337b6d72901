"""
Dependency providers for FastAPI routes.
"""
from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import async_sessionmaker

from darshan_admin.config.settings import get_settings
from darshan_admin.core.db import get_session_factory
from darshan_admin.core.row_store import RowStore
from darshan_admin.models.enums import Language
from darshan_admin.services import (
    DashboardService,
    DestinationService,
    EventService,
    UserActivityService,
)


def get_row_store(session_factory: async_sessionmaker = Depends(get_session_factory)) -> RowStore:
    return RowStore(session_factory)


def get_language(language: str = Query("en", description="Language for display names")) -> Language:
    return Language.from_code(language)


def get_destination_service(store: RowStore = Depends(get_row_store)) -> DestinationService:
    return DestinationService(store)


def get_event_service(store: RowStore = Depends(get_row_store)) -> EventService:
    return EventService(store)


def get_user_activity_service(store: RowStore = Depends(get_row_store)) -> UserActivityService:
    return UserActivityService(store)


def get_dashboard_service(store: RowStore = Depends(get_row_store)) -> DashboardService:
    return DashboardService(store, recent_limit=get_settings().dashboard.recent_limit)
