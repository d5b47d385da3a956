"""Dependency injection factories for API v1."""

from collections.abc import Callable
from datetime import date as Date
from functools import lru_cache

from core.config import settings
from domain.services.activity_service import ActivityService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.notifications.logging_notifier import LoggingActivityNotifier


def get_uow_factory(
    clock: Callable[[], Date] = Date.today,
) -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for Unit of Work instances whose entities use ``clock``."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory, clock=clock)

    return factory


@lru_cache
def get_activity_notifier() -> LoggingActivityNotifier:
    """Get the deletion notifier instance."""
    return LoggingActivityNotifier(from_email=settings.notification_from_email)


@lru_cache
def get_activity_service() -> ActivityService:
    """Get Activity service instance."""
    clock = Date.today
    return ActivityService(
        get_uow_factory(clock),
        notifier=get_activity_notifier(),
        clock=clock,
    )
