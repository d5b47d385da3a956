"""SQLAlchemy Unit of Work: one session and one activity repository per ``async with``."""

from collections.abc import Callable
from datetime import date as Date
from types import TracebackType
from typing import Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.database.repositories.sqlalchemy_activity_repo import SQLAlchemyActivityRepository

logger = structlog.get_logger()


class SQLAlchemyUnitOfWork:
    """IUnitOfWork backed by an ``AsyncSession``.

    Leaving the block with an exception rolls back whatever was flushed;
    nothing is persisted without an explicit ``commit()``.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        clock: Callable[[], Date] = Date.today,
    ) -> None:
        self._session_factory = session_factory
        self._clock = clock
        self._session: Optional[AsyncSession] = None
        self._activities: Optional[SQLAlchemyActivityRepository] = None

    @property
    def activities(self) -> SQLAlchemyActivityRepository:
        if self._activities is None:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return self._activities

    async def commit(self) -> None:
        if self._session is None:
            raise RuntimeError("Cannot commit outside of the unit of work.")
        await self._session.commit()

    async def rollback(self) -> None:
        if self._session is not None:
            await self._session.rollback()

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        self._session = self._session_factory()
        self._activities = SQLAlchemyActivityRepository(self._session, clock=self._clock)
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        if self._session is None:
            return
        try:
            if exc_type is not None:
                logger.debug("unit_of_work_rolled_back", error_type=exc_type.__name__)
                await self.rollback()
        finally:
            await self._session.close()
            self._session = None
            self._activities = None
