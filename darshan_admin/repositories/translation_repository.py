"""
Per-language text persistence for a parent entity
"""
import enum
import logging
from typing import Dict

from darshan_admin.core.exceptions import StoreError, TranslationWriteError
from darshan_admin.core.row_store import RowStore
from darshan_admin.models.enums import Language
from darshan_admin.schemas.translations import TranslationSet

logger = logging.getLogger(__name__)


class WriteMode(str, enum.Enum):
    """INSERT on the create path, UPDATE (by composite key) on the edit path"""
    INSERT = "insert"
    UPDATE = "update"


class TranslationSetRepository:
    """
    Replaces the full set of translations of one parent, one store call per
    language.
    """

    def __init__(self, store: RowStore, model, parent_key: str):
        self.store = store
        self.model = model
        self.parent_key = parent_key

    def _key(self, parent_id: str, language: Language):
        return [
            getattr(self.model, self.parent_key) == parent_id,
            self.model.language == language,
        ]

    async def upsert_all(
        self,
        parent_id: str,
        translations: TranslationSet,
        mode: WriteMode = WriteMode.INSERT,
    ) -> None:
        """
        Write every language of ``translations`` in enumeration order.

        Stops at the first failing language; languages already written stay
        committed.

        Raises:
            TranslationWriteError: carrying the language that failed
        """
        for language, text in translations.items():
            values = text.model_dump()
            try:
                if mode is WriteMode.UPDATE:
                    matched = await self.store.update(
                        self.model, self._key(parent_id, language), values
                    )
                    if matched:
                        continue
                    # Row missing after an earlier partial save
                    logger.info(
                        f"No {language.value} row for {parent_id} in {self.model.__tablename__}, inserting"
                    )
                await self.store.insert(
                    self.model,
                    {self.parent_key: parent_id, "language": language, **values},
                )
            except StoreError as exc:
                raise TranslationWriteError(language.value, exc) from exc

    async def fetch(self, parent_id: str) -> Dict[Language, object]:
        rows = await self.store.select(
            self.model, getattr(self.model, self.parent_key) == parent_id
        )
        return {Language(row.language): row for row in rows}
