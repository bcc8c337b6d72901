# API endpoints and routers

from .destinations_endpoints import router as destinations_router
from .events_endpoints import router as events_router
from .activity_endpoints import router as activity_router
from .dashboard_endpoints import router as dashboard_router
from .health_endpoints import router as health_router

__all__ = [
    "destinations_router",
    "events_router",
    "activity_router",
    "dashboard_router",
    "health_router",
]
