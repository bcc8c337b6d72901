"""
Read-only schemas for end-user activity and the overview page
"""
import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from darshan_admin.models.enums import Deity


class UserRead(BaseModel):
    id: str
    email: str
    display_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class UserRequestRead(BaseModel):
    id: int
    request: str
    created_at: dt.datetime
    user: UserRead

    model_config = ConfigDict(from_attributes=True)


class SavedPlaceDestination(BaseModel):
    id: str
    city: str
    deity: Deity

    model_config = ConfigDict(from_attributes=True)


class SavedPlaceRead(BaseModel):
    id: int
    user: UserRead
    destination: SavedPlaceDestination

    model_config = ConfigDict(from_attributes=True)


class RecentDestination(BaseModel):
    id: str
    city: str
    deity: Deity
    created_at: dt.datetime

    model_config = ConfigDict(from_attributes=True)


class UpcomingEvent(BaseModel):
    id: str
    destination_id: str
    start_time: str
    date: Optional[dt.date] = None

    model_config = ConfigDict(from_attributes=True)


class RecentRequest(BaseModel):
    id: int
    request: str
    created_at: dt.datetime

    model_config = ConfigDict(from_attributes=True)


class DashboardStats(BaseModel):
    """Totals and short lists shown on the overview page"""
    total_destinations: int = 0
    total_events: int = 0
    total_requests: int = 0
    recent_destinations: List[RecentDestination] = []
    upcoming_events: List[UpcomingEvent] = []
    recent_requests: List[RecentRequest] = []
