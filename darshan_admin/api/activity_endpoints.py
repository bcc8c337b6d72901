"""
User activity endpoints - requests and saved places (read only)
"""
from fastapi import APIRouter, Depends

from darshan_admin.core.dependencies import get_user_activity_service
from darshan_admin.schemas.activity import SavedPlaceRead, UserRequestRead
from darshan_admin.schemas.base import Envelope
from darshan_admin.services.user_activity_service import UserActivityService

router = APIRouter(prefix="/activity", tags=["activity"])


@router.get("/requests", response_model=Envelope[list[UserRequestRead]])
async def list_user_requests(
    service: UserActivityService = Depends(get_user_activity_service),
):
    return Envelope(status="ok", data=await service.list_requests())


@router.get("/saved-places", response_model=Envelope[list[SavedPlaceRead]])
async def list_saved_places(
    service: UserActivityService = Depends(get_user_activity_service),
):
    return Envelope(status="ok", data=await service.list_saved_places())
