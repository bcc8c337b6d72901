"""
Generic row store client over SQLAlchemy's asyncio extension.

Every call opens its own session and commits before returning, so each call
is one independent round trip. Callers that chain several calls get no
atomicity across them.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from darshan_admin.core.exceptions import StoreError

logger = logging.getLogger(__name__)


class RowStore:
    """select / insert / update / delete / count per mapped model"""

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    async def select(
        self,
        model,
        *criteria,
        order_by: Sequence[Any] = (),
        limit: Optional[int] = None,
        options: Iterable[Any] = (),
    ) -> List[Any]:
        stmt = select(model).where(*criteria).options(*options)
        if order_by:
            stmt = stmt.order_by(*order_by)
        if limit is not None:
            stmt = stmt.limit(limit)
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                return list(result.scalars().unique().all())
        except SQLAlchemyError as e:
            raise self._store_error(model, "select", e) from e

    async def select_one(self, model, *criteria, options: Iterable[Any] = ()) -> Optional[Any]:
        rows = await self.select(model, *criteria, options=options, limit=1)
        return rows[0] if rows else None

    async def insert(self, model, values: Dict[str, Any]) -> Any:
        """Insert one row and return it with store-assigned columns loaded."""
        try:
            async with self._session_factory() as session:
                row = model(**values)
                session.add(row)
                await session.commit()
                await session.refresh(row)
                return row
        except SQLAlchemyError as e:
            raise self._store_error(model, "insert", e) from e

    async def update(self, model, criteria: Sequence[Any], values: Dict[str, Any]) -> int:
        """Overwrite columns on matching rows. Returns the number of rows matched."""
        # Keys are attribute names; column names may differ (Event.is_popular)
        stmt = update(model).where(*criteria).values(
            {getattr(model, key): value for key, value in values.items()}
        )
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                await session.commit()
                return result.rowcount
        except SQLAlchemyError as e:
            raise self._store_error(model, "update", e) from e

    async def delete(self, model, criteria: Sequence[Any]) -> int:
        stmt = delete(model).where(*criteria)
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                await session.commit()
                return result.rowcount
        except SQLAlchemyError as e:
            raise self._store_error(model, "delete", e) from e

    async def count(self, model, *criteria) -> int:
        stmt = select(func.count()).select_from(model).where(*criteria)
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                return result.scalar() or 0
        except SQLAlchemyError as e:
            raise self._store_error(model, "count", e) from e

    @staticmethod
    def _store_error(model, operation: str, exc: SQLAlchemyError) -> StoreError:
        collection = model.__tablename__
        logger.error(
            f"Row store {operation} on {collection} failed: {exc}",
            extra={"collection": collection, "operation": operation},
        )
        message = str(getattr(exc, "orig", None) or exc)
        return StoreError(message, collection=collection, operation=operation)
