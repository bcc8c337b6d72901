"""
Event API endpoints - list, edit drafts, create, update, delete
"""
from fastapi import APIRouter, Depends, status

from darshan_admin.core.dependencies import get_event_service, get_language
from darshan_admin.models.enums import Language
from darshan_admin.schemas.base import Envelope, Message, SaveResponse
from darshan_admin.schemas.event import EventDraft, EventRead
from darshan_admin.services.event_service import EventService

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=Envelope[list[EventRead]])
async def list_events(
    language: Language = Depends(get_language),
    service: EventService = Depends(get_event_service),
):
    """
    List all events ordered by date
    """
    return Envelope(status="ok", data=await service.list_events(language))


@router.get("/draft", response_model=Envelope[EventDraft])
async def empty_event_draft():
    return Envelope(status="ok", data=EventDraft.empty())


@router.get("/{event_id}/draft", response_model=Envelope[EventDraft])
async def load_event_for_edit(
    event_id: str,
    service: EventService = Depends(get_event_service),
):
    """Current event and translations as an edit draft"""
    return Envelope(status="ok", data=await service.load_for_edit(event_id))


@router.post(
    "",
    response_model=Envelope[SaveResponse[EventDraft, EventRead]],
    status_code=status.HTTP_201_CREATED,
)
async def create_event(
    draft: EventDraft,
    language: Language = Depends(get_language),
    service: EventService = Depends(get_event_service),
):
    return Envelope(status="ok", data=await service.submit(draft, language=language))


@router.put("/{event_id}", response_model=Envelope[SaveResponse[EventDraft, EventRead]])
async def update_event(
    event_id: str,
    draft: EventDraft,
    language: Language = Depends(get_language),
    service: EventService = Depends(get_event_service),
):
    result = await service.submit(draft, editing_id=event_id, language=language)
    return Envelope(status="ok", data=result)


@router.delete("/{event_id}", response_model=Envelope[Message])
async def delete_event(
    event_id: str,
    service: EventService = Depends(get_event_service),
):
    await service.delete_event(event_id)
    return Envelope(status="ok", data=Message(message="Event deleted successfully"))
