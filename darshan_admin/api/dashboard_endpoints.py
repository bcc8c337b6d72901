from fastapi import APIRouter, Depends

from darshan_admin.core.dependencies import get_dashboard_service
from darshan_admin.schemas.activity import DashboardStats
from darshan_admin.schemas.base import Envelope
from darshan_admin.services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=Envelope[DashboardStats])
async def get_dashboard(service: DashboardService = Depends(get_dashboard_service)):
    """
    Overview totals plus recent destinations, upcoming events and recent requests
    """
    return Envelope(status="ok", data=await service.get_stats())
