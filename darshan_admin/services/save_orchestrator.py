"""
Save workflow for multilingual entities.

One ``submit`` runs: validate -> write parent -> write every language ->
write dependent rows (create only) -> re-fetch the list. Each write is its own
store round trip. A store failure stops the sequence at that step; earlier
steps stay committed and nothing is retried. Resubmitting the same draft with
the entity id repairs a partial save.

An orchestrator runs one save at a time. Callers must not submit again while
a save is pending; doing so raises ``SaveInProgressError``.
"""
import enum
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Type

from pydantic import BaseModel

from darshan_admin.core.exceptions import (
    DraftValidationError,
    SaveFailedError,
    SaveInProgressError,
    StoreError,
)
from darshan_admin.core.validation import validate_draft
from darshan_admin.repositories import (
    DependentCollectionRepository,
    EntityRepository,
    TranslationSetRepository,
    WriteMode,
)

logger = logging.getLogger(__name__)


class SaveState(str, enum.Enum):
    """Save lifecycle; WRITING_* and REFRESHING make up persisting"""
    IDLE = "idle"
    VALIDATING = "validating"
    WRITING_PARENT = "writing_parent"
    WRITING_TRANSLATIONS = "writing_translations"
    WRITING_DEPENDENTS = "writing_dependents"
    REFRESHING = "refreshing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class SaveResult:
    entity_id: str
    created: bool
    draft: BaseModel
    items: List[Any] = field(default_factory=list)


class SaveOrchestrator:
    """
    Sequences validation and the repository writes for one entity kind.

    Args:
        kind: Entity kind used in logs and errors ("destination", "event")
        draft_type: Draft model with ``empty()`` and ``from_rows()``
        record_type: Normalized record model with ``parent_fields()``,
            ``translations`` and ``dependent_items()``
        entities: Parent row repository
        translations: Translation set repository
        dependents: Dependent collection repository, if the kind has one
    """

    def __init__(
        self,
        kind: str,
        draft_type: Type[BaseModel],
        record_type: Type[BaseModel],
        entities: EntityRepository,
        translations: TranslationSetRepository,
        dependents: Optional[DependentCollectionRepository] = None,
    ):
        self.kind = kind
        self.draft_type = draft_type
        self.record_type = record_type
        self.entities = entities
        self.translations = translations
        self.dependents = dependents
        self.state = SaveState.IDLE
        self.failed_step: Optional[SaveState] = None
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    def _transition(self, state: SaveState) -> None:
        logger.debug(f"{self.kind} save: {self.state.value} -> {state.value}")
        self.state = state

    def _fail(self, step: SaveState) -> None:
        self.failed_step = step
        self._transition(SaveState.FAILED)

    async def submit(self, draft: Any, editing_id: Optional[str] = None) -> SaveResult:
        """
        Validate and persist a draft.

        Args:
            draft: Draft model or mapping of form values
            editing_id: Id of the entity being edited; None or "" creates a new one

        Returns:
            SaveResult with the entity id, an empty draft and the refreshed list

        Raises:
            DraftValidationError: the draft is invalid; nothing was written
            SaveFailedError: a store call failed at ``step``
            SaveInProgressError: another save on this orchestrator is pending
        """
        if self._busy:
            raise SaveInProgressError(self.kind)
        self._busy = True
        try:
            return await self._run(draft, editing_id)
        finally:
            self._busy = False

    async def _run(self, draft: Any, editing_id: Optional[str]) -> SaveResult:
        self.failed_step = None
        self._transition(SaveState.VALIDATING)
        try:
            record = validate_draft(self.record_type, draft)
        except DraftValidationError as exc:
            self._fail(SaveState.VALIDATING)
            logger.info(
                f"{self.kind} draft rejected: {len(exc.field_errors)} field errors",
                extra={"field_errors": exc.field_errors},
            )
            raise

        creating = not editing_id
        entity_id = editing_id or None
        committed: List[str] = []
        step = SaveState.WRITING_PARENT
        try:
            self._transition(step)
            if creating:
                entity_id = await self.entities.create(record.parent_fields())
            else:
                await self.entities.update(editing_id, record.parent_fields())
            committed.append(step.value)

            step = SaveState.WRITING_TRANSLATIONS
            self._transition(step)
            await self.translations.upsert_all(
                entity_id,
                record.translations,
                mode=WriteMode.INSERT if creating else WriteMode.UPDATE,
            )
            committed.append(step.value)

            # Dependent rows are only written when creating
            if creating and self.dependents is not None:
                step = SaveState.WRITING_DEPENDENTS
                self._transition(step)
                await self.dependents.upsert_all(entity_id, record.dependent_items())
                committed.append(step.value)

            step = SaveState.REFRESHING
            self._transition(step)
            items = await self.entities.list()
        except StoreError as exc:
            self._fail(step)
            logger.error(
                f"{self.kind} save failed at {step.value}: {exc.message}",
                extra={
                    "entity_id": entity_id,
                    "step": step.value,
                    "language": getattr(exc, "language", None),
                    "committed_steps": committed,
                },
            )
            raise SaveFailedError(
                step.value, exc, entity_id=entity_id, committed_steps=committed
            ) from exc

        self._transition(SaveState.SUCCEEDED)
        logger.info(
            f"{self.kind} {'created' if creating else 'updated'}: {entity_id}",
            extra={"entity_id": entity_id},
        )
        return SaveResult(
            entity_id=entity_id,
            created=creating,
            draft=self.draft_type.empty(),
            items=items,
        )

    async def load_for_edit(self, entity_id: str) -> BaseModel:
        """
        Assemble an edit draft from the stored parent, translations and
        dependents. Languages without a stored row come back empty.

        Raises:
            EntityNotFoundError: if the entity does not exist
        """
        parent = await self.entities.get(entity_id)
        translations = await self.translations.fetch(entity_id)
        dependents = await self.dependents.fetch(entity_id) if self.dependents else []
        return self.draft_type.from_rows(parent, translations, dependents)

    async def delete(self, entity_id: str) -> None:
        await self.entities.delete(entity_id)
        logger.info(f"{self.kind} deleted: {entity_id}", extra={"entity_id": entity_id})

    async def list(self) -> List[Any]:
        return await self.entities.list()
