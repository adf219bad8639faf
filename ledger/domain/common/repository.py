"""Repository abstractions for domain services."""

from __future__ import annotations

from typing import ClassVar, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

ModelT = TypeVar("ModelT")


class AsyncRepository(Generic[ModelT]):
    """Base repository bound to one SQLAlchemy session and one mapped model.

    Repositories never commit; the caller owning the session decides where the
    transaction ends.
    """

    model: ClassVar[type]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def add(self, instance: ModelT) -> ModelT:
        self.session.add(instance)
        await self.session.flush()
        return instance

    async def count(self) -> int:
        stmt = select(func.count()).select_from(self.model)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
