"""Transaction scope port used by the activity service."""

from types import TracebackType
from typing import Protocol

from domain.repositories.activity_repository import IActivityRepository


class IUnitOfWork(Protocol):
    """Async context manager exposing the activity repository.

    Writes made through ``activities`` are only durable after ``commit()``.
    """

    @property
    def activities(self) -> IActivityRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...

    async def __aenter__(self) -> "IUnitOfWork": ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...
