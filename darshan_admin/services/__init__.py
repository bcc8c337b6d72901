# Business logic services

from .save_orchestrator import SaveOrchestrator, SaveResult, SaveState
from .destination_service import DestinationService, build_destination_workflow
from .event_service import EventService, build_event_workflow
from .dashboard_service import DashboardService
from .user_activity_service import UserActivityService

__all__ = [
    "SaveOrchestrator",
    "SaveResult",
    "SaveState",
    "DestinationService",
    "build_destination_workflow",
    "EventService",
    "build_event_workflow",
    "DashboardService",
    "UserActivityService",
]
