"""
Destination Service - destination CRUD through the save workflow
"""
from typing import List, Optional, Union, Dict, Any

from darshan_admin.core.row_store import RowStore
from darshan_admin.models.destination import Destination, DestinationImage, DestinationTranslation
from darshan_admin.models.enums import Language
from darshan_admin.repositories import (
    DependentCollectionRepository,
    EntityRepository,
    TranslationSetRepository,
)
from darshan_admin.schemas.base import SaveResponse
from darshan_admin.schemas.destination import (
    DestinationDraft,
    DestinationOption,
    DestinationRead,
    DestinationRecord,
)
from darshan_admin.services.save_orchestrator import SaveOrchestrator


def build_destination_workflow(store: RowStore) -> SaveOrchestrator:
    return SaveOrchestrator(
        kind="destination",
        draft_type=DestinationDraft,
        record_type=DestinationRecord,
        entities=EntityRepository(store, Destination, order_by=[Destination.city]),
        translations=TranslationSetRepository(
            store, DestinationTranslation, parent_key="destination_id"
        ),
        dependents=DependentCollectionRepository(
            store, DestinationImage, parent_key="destination_id", value_column="hero_image"
        ),
    )


class DestinationService:
    """Manages destination create/edit/delete and list views"""

    def __init__(self, store: RowStore):
        self.store = store
        self.workflow = build_destination_workflow(store)

    async def list_destinations(self, language: Language = Language.EN) -> List[DestinationRead]:
        """All destinations ordered by city, named in ``language``"""
        rows = await self.workflow.list()
        return [DestinationRead.from_row(row, language) for row in rows]

    async def list_options(self, language: Language = Language.EN) -> List[DestinationOption]:
        """Destination picker entries for the event form"""
        return [
            DestinationOption(id=d.id, city=d.city, name=d.name)
            for d in await self.list_destinations(language)
        ]

    async def load_for_edit(self, destination_id: str) -> DestinationDraft:
        return await self.workflow.load_for_edit(destination_id)

    async def submit(
        self,
        draft: Union[DestinationDraft, Dict[str, Any]],
        editing_id: Optional[str] = None,
        language: Language = Language.EN,
    ) -> SaveResponse[DestinationDraft, DestinationRead]:
        """
        Create (no ``editing_id``) or update a destination.

        Images are only written on create.
        """
        result = await self.workflow.submit(draft, editing_id)
        return SaveResponse[DestinationDraft, DestinationRead](
            entity_id=result.entity_id,
            created=result.created,
            draft=result.draft,
            items=[DestinationRead.from_row(row, language) for row in result.items],
        )

    async def delete_destination(self, destination_id: str) -> None:
        await self.workflow.delete(destination_id)
