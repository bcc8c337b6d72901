"""
Destination API endpoints - list, edit drafts, create, update, delete
"""
from fastapi import APIRouter, Depends, status

from darshan_admin.core.dependencies import get_destination_service, get_language
from darshan_admin.models.enums import Language
from darshan_admin.schemas.base import Envelope, Message, SaveResponse
from darshan_admin.schemas.destination import DestinationDraft, DestinationOption, DestinationRead
from darshan_admin.services.destination_service import DestinationService

router = APIRouter(prefix="/destinations", tags=["destinations"])


@router.get("", response_model=Envelope[list[DestinationRead]])
async def list_destinations(
    language: Language = Depends(get_language),
    service: DestinationService = Depends(get_destination_service),
):
    """
    List all destinations ordered by city

    - **language**: language of the display name (default en)
    """
    return Envelope(status="ok", data=await service.list_destinations(language))


@router.get("/options", response_model=Envelope[list[DestinationOption]])
async def list_destination_options(
    language: Language = Depends(get_language),
    service: DestinationService = Depends(get_destination_service),
):
    """Destination picker entries for the event form"""
    return Envelope(status="ok", data=await service.list_options(language))


@router.get("/draft", response_model=Envelope[DestinationDraft])
async def empty_destination_draft():
    """Empty draft for the create form"""
    return Envelope(status="ok", data=DestinationDraft.empty())


@router.get("/{destination_id}/draft", response_model=Envelope[DestinationDraft])
async def load_destination_for_edit(
    destination_id: str,
    service: DestinationService = Depends(get_destination_service),
):
    """Current destination, translations and images as an edit draft"""
    return Envelope(status="ok", data=await service.load_for_edit(destination_id))


@router.post(
    "",
    response_model=Envelope[SaveResponse[DestinationDraft, DestinationRead]],
    status_code=status.HTTP_201_CREATED,
)
async def create_destination(
    draft: DestinationDraft,
    language: Language = Depends(get_language),
    service: DestinationService = Depends(get_destination_service),
):
    """
    Create a destination with all translations and its images
    """
    return Envelope(status="ok", data=await service.submit(draft, language=language))


@router.put(
    "/{destination_id}",
    response_model=Envelope[SaveResponse[DestinationDraft, DestinationRead]],
)
async def update_destination(
    destination_id: str,
    draft: DestinationDraft,
    language: Language = Depends(get_language),
    service: DestinationService = Depends(get_destination_service),
):
    """
    Update a destination and its translations

    Images are not rewritten on update
    """
    result = await service.submit(draft, editing_id=destination_id, language=language)
    return Envelope(status="ok", data=result)


@router.delete("/{destination_id}", response_model=Envelope[Message])
async def delete_destination(
    destination_id: str,
    service: DestinationService = Depends(get_destination_service),
):
    await service.delete_destination(destination_id)
    return Envelope(status="ok", data=Message(message="Destination deleted successfully"))
