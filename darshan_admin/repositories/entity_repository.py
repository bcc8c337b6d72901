"""
Parent entity persistence (destinations, events)
"""
from typing import Any, Dict, List, Sequence

from sqlalchemy.orm import selectinload

from darshan_admin.core.exceptions import EntityNotFoundError
from darshan_admin.core.row_store import RowStore


class EntityRepository:
    """Create, update, delete, get and list one kind of parent row"""

    def __init__(self, store: RowStore, model, order_by: Sequence[Any] = ()):
        self.store = store
        self.model = model
        self.order_by = order_by

    @property
    def collection(self) -> str:
        return self.model.__tablename__

    async def create(self, fields: Dict[str, Any]) -> str:
        """
        Insert one parent row

        Returns:
            The store-assigned identity
        """
        row = await self.store.insert(self.model, fields)
        return row.id

    async def update(self, entity_id: str, fields: Dict[str, Any]) -> None:
        """
        Overwrite the scalar fields of an existing row

        Raises:
            EntityNotFoundError: if no row has this id
        """
        matched = await self.store.update(self.model, [self.model.id == entity_id], fields)
        if not matched:
            raise EntityNotFoundError(self.collection, entity_id, operation="update")

    async def delete(self, entity_id: str) -> None:
        """
        Remove the parent row. Child rows are left to the store's
        referential policy.
        """
        matched = await self.store.delete(self.model, [self.model.id == entity_id])
        if not matched:
            raise EntityNotFoundError(self.collection, entity_id, operation="delete")

    async def get(self, entity_id: str):
        row = await self.store.select_one(self.model, self.model.id == entity_id)
        if row is None:
            raise EntityNotFoundError(self.collection, entity_id, operation="select")
        return row

    async def list(self) -> List[Any]:
        """All rows with their translations loaded, in list order"""
        return await self.store.select(
            self.model,
            order_by=self.order_by,
            options=[selectinload(self.model.translations)],
        )
