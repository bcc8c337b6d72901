"""
Persistence for child rows without a language dimension (destination images)
"""
from typing import Any, List, Sequence

from darshan_admin.core.exceptions import DependentWriteError, StoreError
from darshan_admin.core.row_store import RowStore


class DependentCollectionRepository:
    def __init__(self, store: RowStore, model, parent_key: str, value_column: str):
        self.store = store
        self.model = model
        self.parent_key = parent_key
        self.value_column = value_column

    async def upsert_all(self, parent_id: str, items: Sequence[Any]) -> None:
        """
        Insert one row per item, stopping at the first failure. Items written
        before the failure stay committed.
        """
        for index, item in enumerate(items):
            try:
                await self.store.insert(
                    self.model, {self.parent_key: parent_id, self.value_column: item}
                )
            except StoreError as exc:
                raise DependentWriteError(index, item, exc) from exc

    async def fetch(self, parent_id: str) -> List[Any]:
        rows = await self.store.select(
            self.model,
            getattr(self.model, self.parent_key) == parent_id,
            order_by=[self.model.id],
        )
        return [getattr(row, self.value_column) for row in rows]
