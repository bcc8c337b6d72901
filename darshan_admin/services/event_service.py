"""
Event Service - event CRUD through the save workflow
"""
from typing import Any, Dict, List, Optional, Union

from darshan_admin.core.row_store import RowStore
from darshan_admin.models.event import Event, EventTranslation
from darshan_admin.models.enums import Language
from darshan_admin.repositories import EntityRepository, TranslationSetRepository
from darshan_admin.schemas.base import SaveResponse
from darshan_admin.schemas.event import EventDraft, EventRead, EventRecord
from darshan_admin.services.destination_service import DestinationService
from darshan_admin.services.save_orchestrator import SaveOrchestrator


def build_event_workflow(store: RowStore) -> SaveOrchestrator:
    # Events have no dependent collection
    return SaveOrchestrator(
        kind="event",
        draft_type=EventDraft,
        record_type=EventRecord,
        entities=EntityRepository(store, Event, order_by=[Event.date.asc()]),
        translations=TranslationSetRepository(store, EventTranslation, parent_key="event_id"),
    )


class EventService:
    """Manages event create/edit/delete and list views"""

    def __init__(self, store: RowStore):
        self.store = store
        self.workflow = build_event_workflow(store)
        self.destinations = DestinationService(store)

    async def _to_reads(self, rows, language: Language) -> List[EventRead]:
        names = {d.id: d.name for d in await self.destinations.list_destinations(language)}
        return [
            EventRead.from_row(row, language, destination_name=names.get(row.destination_id))
            for row in rows
        ]

    async def list_events(self, language: Language = Language.EN) -> List[EventRead]:
        """All events ordered by date, with the destination name in ``language``"""
        return await self._to_reads(await self.workflow.list(), language)

    async def load_for_edit(self, event_id: str) -> EventDraft:
        return await self.workflow.load_for_edit(event_id)

    async def submit(
        self,
        draft: Union[EventDraft, Dict[str, Any]],
        editing_id: Optional[str] = None,
        language: Language = Language.EN,
    ) -> SaveResponse[EventDraft, EventRead]:
        """Create (no ``editing_id``) or update an event"""
        result = await self.workflow.submit(draft, editing_id)
        return SaveResponse[EventDraft, EventRead](
            entity_id=result.entity_id,
            created=result.created,
            draft=result.draft,
            items=await self._to_reads(result.items, language),
        )

    async def delete_event(self, event_id: str) -> None:
        await self.workflow.delete(event_id)
