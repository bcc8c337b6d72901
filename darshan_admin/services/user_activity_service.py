"""User activity views: submitted requests and saved places."""
from typing import List

from sqlalchemy.orm import selectinload

from darshan_admin.core.row_store import RowStore
from darshan_admin.models.activity import SavedPlace, UserRequest
from darshan_admin.schemas.activity import SavedPlaceRead, UserRequestRead


class UserActivityService:
    def __init__(self, store: RowStore):
        self.store = store

    async def list_requests(self) -> List[UserRequestRead]:
        """Requests with the submitting user, newest first"""
        rows = await self.store.select(
            UserRequest,
            order_by=[UserRequest.created_at.desc()],
            options=[selectinload(UserRequest.user)],
        )
        return [UserRequestRead.model_validate(r) for r in rows]

    async def list_saved_places(self) -> List[SavedPlaceRead]:
        """Saved places with user and destination, highest id first"""
        rows = await self.store.select(
            SavedPlace,
            order_by=[SavedPlace.id.desc()],
            options=[selectinload(SavedPlace.user), selectinload(SavedPlace.destination)],
        )
        return [SavedPlaceRead.model_validate(r) for r in rows]
