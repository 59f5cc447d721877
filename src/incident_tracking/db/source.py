"""QueryableSource backed by a SQLAlchemy select statement."""

from collections.abc import Sequence
from typing import Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


class SelectSource(Generic[T]):
    """Counts and slices the rows of ``stmt`` on ``db``.

    ``stmt`` should select a single ORM entity and carry an ORDER BY, otherwise
    the database is free to return slices in any order::

        stmt = select(Incident).order_by(Incident.id)
        view = await from_source(SelectSource(db, stmt), page_index=2, page_size=10)
    """

    def __init__(self, db: AsyncSession, stmt: Select[tuple[T]]) -> None:
        self.db = db
        self.stmt = stmt

    async def count(self) -> int:
        """Return the number of rows the statement yields, ignoring its ordering."""
        subquery = self.stmt.order_by(None).subquery()
        result = await self.db.execute(select(func.count()).select_from(subquery))
        return result.scalar_one()

    async def slice(self, offset: int, limit: int) -> Sequence[T]:
        """Return up to ``limit`` rows starting at ``offset``.

        A negative offset (a page index below 1) or a limit below 1 matches no
        rows, so nothing is sent to the database.
        """
        if offset < 0 or limit < 1:
            return []
        result = await self.db.execute(self.stmt.offset(offset).limit(limit))
        return list(result.scalars().all())
