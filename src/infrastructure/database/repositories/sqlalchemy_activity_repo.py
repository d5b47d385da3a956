"""SQLAlchemy implementation of Activity repository."""

from collections.abc import Callable
from datetime import date as Date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import ActivityNotFoundError
from domain.entities.activity import Activity
from infrastructure.database.models import ActivityModel


class SQLAlchemyActivityRepository:
    """SQLAlchemy implementation of IActivityRepository.

    Rows are rebuilt into entities checked against ``clock``, which must be
    the reference date the service validated them with.
    """

    def __init__(self, session: AsyncSession, clock: Callable[[], Date] = Date.today) -> None:
        self._session = session
        self._clock = clock

    async def get(self, id: int) -> Activity | None:
        """Get an activity by ID."""
        model = await self._get_model(id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Activity]:
        """Get all activities."""
        stmt = select(ActivityModel).order_by(ActivityModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def search_by_name(self, pattern: str) -> list[Activity]:
        """Get activities whose name contains pattern, ignoring case."""
        stmt = (
            select(ActivityModel)
            .where(func.lower(ActivityModel.name).contains(pattern.lower(), autoescape=True))
            .order_by(ActivityModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def save(self, activity: Activity) -> int:
        """Insert a new activity and assign the generated ID to it."""
        model = self._to_model(activity)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        activity.assign_id(model.id)
        return model.id

    async def update(self, activity: Activity) -> None:
        """Update an existing activity."""
        model = await self._get_model(activity.id) if activity.id is not None else None
        if not model:
            raise ActivityNotFoundError(str(activity.id))

        model.name = activity.name
        model.minutes = activity.minutes
        model.date = activity.date

        await self._session.flush()

    async def delete(self, id: int) -> None:
        """Delete an activity."""
        model = await self._get_model(id)
        if not model:
            raise ActivityNotFoundError(id)

        await self._session.delete(model)
        await self._session.flush()

    async def _get_model(self, id: int) -> ActivityModel | None:
        stmt = select(ActivityModel).where(ActivityModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: ActivityModel) -> Activity:
        """Convert ORM model to domain entity."""
        return Activity(
            id=model.id,
            name=model.name,
            minutes=model.minutes,
            date=model.date,
            clock=self._clock,
        )

    def _to_model(self, entity: Activity) -> ActivityModel:
        """Convert domain entity to ORM model."""
        return ActivityModel(
            name=entity.name,
            minutes=entity.minutes,
            date=entity.date,
        )
