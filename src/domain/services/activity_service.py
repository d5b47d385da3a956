"""Activity service layer: validation, persistence and deletion notices."""

from collections.abc import Callable
from datetime import date as Date

import structlog

from core.duration import parse_duration
from core.exceptions import ActivityInconsistencyError, ActivityNotFoundError
from domain.entities.activity import Activity, NewActivityRequest
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.activity_notifier import IActivityNotifier

logger = structlog.get_logger()


class ActivityService:
    """Service layer for Activity business logic.

    Each operation is a short sequential pipeline: every storage call is
    awaited before the next step starts, and the service keeps no state
    between calls.

    ``clock`` is the reference "today" for new activities. Repositories
    from ``uow_factory`` must rebuild entities with the same clock.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        notifier: IActivityNotifier,
        clock: Callable[[], Date] = Date.today,
    ) -> None:
        self._uow_factory = uow_factory
        self._notifier = notifier
        self._clock = clock

    async def get_all(self) -> list[Activity]:
        """Get all activities."""
        async with self._uow_factory() as uow:
            return await uow.activities.get_all()

    async def search(self, name: str) -> list[Activity]:
        """Get activities whose name contains ``name``, ignoring case."""
        async with self._uow_factory() as uow:
            return await uow.activities.search_by_name(name)

    async def get_by_id(self, activity_id: int) -> Activity:
        """Get a specific activity."""
        async with self._uow_factory() as uow:
            activity = await uow.activities.get(activity_id)
            if not activity:
                raise ActivityNotFoundError(activity_id)
            return activity

    async def create(self, request: NewActivityRequest) -> Activity:
        """Create a new activity and return it as read back from storage.

        Raises:
            DurationParseError: If ``request.duration`` is malformed.
            ActivityValidationError: If the activity fields are invalid.
            ActivityInconsistencyError: If storage accepted the activity
                but cannot return it.
        """
        minutes = parse_duration(request.duration)
        activity = Activity(
            name=request.name,
            minutes=minutes,
            date=request.date,  # type: ignore[arg-type]
            clock=self._clock,
        )

        async with self._uow_factory() as uow:
            activity_id = await uow.activities.save(activity)

            # Guard against a storage layer that reports success but keeps nothing.
            created = await uow.activities.get(activity_id)
            if not created:
                raise ActivityInconsistencyError(activity_id)

            await uow.commit()

        logger.info("activity_created", activity_id=activity_id, minutes=minutes)
        return created

    async def update(self, activity_id: int, request: NewActivityRequest) -> Activity:
        """Replace the fields of an existing activity.

        Nothing is written unless the duration parses and the new values
        pass entity validation.
        """
        async with self._uow_factory() as uow:
            activity = await uow.activities.get(activity_id)
            if not activity:
                raise ActivityNotFoundError(activity_id)

            minutes = parse_duration(request.duration)
            activity.update(request.name, minutes, request.date)  # type: ignore[arg-type]

            await uow.activities.update(activity)
            await uow.commit()

        logger.info("activity_updated", activity_id=activity_id, minutes=minutes)
        return activity

    async def delete(self, activity_id: int) -> None:
        """Delete an activity, then send exactly one deletion notice.

        The notice carries the activity as it was before deletion and is
        only sent once the deletion has been committed. If the activity is
        missing or the delete fails, no notice is sent.
        """
        async with self._uow_factory() as uow:
            activity = await uow.activities.get(activity_id)
            if not activity:
                raise ActivityNotFoundError(activity_id)

            await uow.activities.delete(activity_id)
            await uow.commit()

        activity.mark_deleted()
        logger.info("activity_deleted", activity_id=activity_id)

        await self._notifier.notify_deleted(activity)
