"""Unit tests for ActivityService."""

from datetime import date, timedelta
from unittest.mock import AsyncMock

import pytest

from core.exceptions import (
    ActivityInconsistencyError,
    ActivityNotFoundError,
    ActivityValidationError,
    DurationParseError,
)
from domain.entities.activity import Activity, NewActivityRequest
from domain.services.activity_service import ActivityService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def notifier() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def service(uow: FakeUnitOfWork, notifier: AsyncMock, today: date) -> ActivityService:
    return ActivityService(lambda: uow, notifier=notifier, clock=lambda: today)


# --- get_all / search / get_by_id ---


class TestQueries:
    @pytest.mark.asyncio
    async def test_get_all_returns_repository_result(
        self, service: ActivityService, uow: FakeUnitOfWork, stored_activity: Activity
    ) -> None:
        uow.activities.get_all.return_value = [stored_activity]

        result = await service.get_all()

        assert result == [stored_activity]
        uow.activities.get_all.assert_called_once_with()

    @pytest.mark.asyncio
    async def test_search_delegates_pattern_unchanged(
        self, service: ActivityService, uow: FakeUnitOfWork
    ) -> None:
        uow.activities.search_by_name.return_value = []

        result = await service.search("RuN")

        assert result == []
        uow.activities.search_by_name.assert_called_once_with("RuN")

    @pytest.mark.asyncio
    async def test_get_by_id_returns_activity(
        self, service: ActivityService, uow: FakeUnitOfWork, stored_activity: Activity
    ) -> None:
        uow.activities.get.return_value = stored_activity

        result = await service.get_by_id(7)

        assert result is stored_activity
        uow.activities.get.assert_called_once_with(7)

    @pytest.mark.asyncio
    async def test_get_by_id_raises_not_found(
        self, service: ActivityService, uow: FakeUnitOfWork
    ) -> None:
        uow.activities.get.return_value = None

        with pytest.raises(ActivityNotFoundError) as exc_info:
            await service.get_by_id(99)

        assert exc_info.value.details == {"activity_id": "99"}


# --- create ---


class TestCreate:
    @pytest.mark.asyncio
    async def test_parses_duration_saves_and_returns_refetched(
        self,
        service: ActivityService,
        uow: FakeUnitOfWork,
        yesterday: date,
        today: date,
    ) -> None:
        refetched = Activity(id=1, name="Swimming", minutes=120, date=yesterday, clock=lambda: today)
        uow.activities.save.return_value = 1
        uow.activities.get.return_value = refetched

        result = await service.create(NewActivityRequest("Swimming", "2h", yesterday))

        assert result is refetched
        saved = uow.activities.save.call_args[0][0]
        assert saved.name == "Swimming"
        assert saved.minutes == 120
        assert saved.date == yesterday
        uow.activities.get.assert_called_once_with(1)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_missing_row_after_save_raises_inconsistency(
        self, service: ActivityService, uow: FakeUnitOfWork, yesterday: date
    ) -> None:
        uow.activities.save.return_value = 5
        uow.activities.get.return_value = None

        with pytest.raises(ActivityInconsistencyError) as exc_info:
            await service.create(NewActivityRequest("Swimming", "30m", yesterday))

        assert exc_info.value.message == "Activity could not be created"
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_invalid_duration_never_reaches_storage(
        self, service: ActivityService, uow: FakeUnitOfWork, yesterday: date
    ) -> None:
        with pytest.raises(DurationParseError):
            await service.create(NewActivityRequest("Swimming", "1h2m", yesterday))

        uow.activities.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_name_never_reaches_storage(
        self, service: ActivityService, uow: FakeUnitOfWork, yesterday: date
    ) -> None:
        with pytest.raises(ActivityValidationError) as exc_info:
            await service.create(NewActivityRequest("   ", "30m", yesterday))

        assert exc_info.value.field == "name"
        uow.activities.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_future_date_checked_against_service_clock(
        self, service: ActivityService, uow: FakeUnitOfWork, today: date
    ) -> None:
        with pytest.raises(ActivityValidationError, match="Date cannot be in the future"):
            await service.create(NewActivityRequest("Swimming", "30m", today + timedelta(days=1)))

        uow.activities.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_today_is_accepted(
        self, service: ActivityService, uow: FakeUnitOfWork, today: date
    ) -> None:
        uow.activities.save.return_value = 1
        uow.activities.get.return_value = Activity(
            id=1, name="Yoga", minutes=30, date=today, clock=lambda: today
        )

        result = await service.create(NewActivityRequest("Yoga", "30m", today))

        assert result.date == today


# --- update ---


class TestUpdate:
    @pytest.mark.asyncio
    async def test_updates_fields_and_persists(
        self,
        service: ActivityService,
        uow: FakeUnitOfWork,
        stored_activity: Activity,
        today: date,
    ) -> None:
        uow.activities.get.return_value = stored_activity

        result = await service.update(7, NewActivityRequest("Cycling", "1d", today))

        assert result.name == "Cycling"
        assert result.minutes == 1440
        assert result.date == today
        uow.activities.update.assert_called_once_with(stored_activity)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_unknown_id_raises_before_parsing(
        self, service: ActivityService, uow: FakeUnitOfWork, today: date
    ) -> None:
        uow.activities.get.return_value = None

        # Duration is invalid too, but the missing activity is reported first.
        with pytest.raises(ActivityNotFoundError):
            await service.update(99, NewActivityRequest("Cycling", "bad", today))

        uow.activities.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_fields_leave_activity_untouched(
        self,
        service: ActivityService,
        uow: FakeUnitOfWork,
        stored_activity: Activity,
        today: date,
    ) -> None:
        uow.activities.get.return_value = stored_activity
        before = (stored_activity.name, stored_activity.minutes, stored_activity.date)

        with pytest.raises(ActivityValidationError):
            await service.update(7, NewActivityRequest("", "3h", today))

        uow.activities.update.assert_not_called()
        assert not uow.committed
        assert (stored_activity.name, stored_activity.minutes, stored_activity.date) == before

    @pytest.mark.asyncio
    async def test_invalid_duration_leaves_activity_untouched(
        self,
        service: ActivityService,
        uow: FakeUnitOfWork,
        stored_activity: Activity,
        today: date,
    ) -> None:
        uow.activities.get.return_value = stored_activity

        with pytest.raises(DurationParseError):
            await service.update(7, NewActivityRequest("Cycling", "3H", today))

        uow.activities.update.assert_not_called()
        assert stored_activity.name == "Running"
        assert stored_activity.minutes == 45

    @pytest.mark.asyncio
    async def test_storage_not_found_on_update_propagates(
        self,
        service: ActivityService,
        uow: FakeUnitOfWork,
        stored_activity: Activity,
        today: date,
    ) -> None:
        uow.activities.get.return_value = stored_activity
        uow.activities.update.side_effect = ActivityNotFoundError(7)

        with pytest.raises(ActivityNotFoundError):
            await service.update(7, NewActivityRequest("Cycling", "1h", today))

        assert not uow.committed


# --- delete ---


class TestDelete:
    @pytest.mark.asyncio
    async def test_unknown_id_never_deletes_or_notifies(
        self, service: ActivityService, uow: FakeUnitOfWork, notifier: AsyncMock
    ) -> None:
        uow.activities.get.return_value = None

        with pytest.raises(ActivityNotFoundError):
            await service.delete(99)

        uow.activities.delete.assert_not_called()
        notifier.notify_deleted.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_then_delete_then_notify(
        self,
        service: ActivityService,
        uow: FakeUnitOfWork,
        notifier: AsyncMock,
        stored_activity: Activity,
    ) -> None:
        calls: list[str] = []

        def record_get(activity_id: int) -> Activity:
            calls.append("get")
            return stored_activity

        def record_delete(activity_id: int) -> None:
            calls.append("delete")

        def record_notify(activity: Activity) -> None:
            calls.append("notify")

        uow.activities.get.side_effect = record_get
        uow.activities.delete.side_effect = record_delete
        notifier.notify_deleted.side_effect = record_notify

        await service.delete(7)

        assert calls == ["get", "delete", "notify"]
        uow.activities.delete.assert_called_once_with(7)
        notifier.notify_deleted.assert_called_once()
        assert uow.committed

    @pytest.mark.asyncio
    async def test_notification_carries_pre_deletion_values(
        self,
        service: ActivityService,
        uow: FakeUnitOfWork,
        notifier: AsyncMock,
        stored_activity: Activity,
        yesterday: date,
    ) -> None:
        uow.activities.get.return_value = stored_activity

        await service.delete(7)

        notified = notifier.notify_deleted.call_args[0][0]
        assert notified.id == 7
        assert notified.name == "Running"
        assert notified.minutes == 45
        assert notified.date == yesterday
        assert notified.is_deleted

    @pytest.mark.asyncio
    async def test_failed_delete_never_notifies(
        self,
        service: ActivityService,
        uow: FakeUnitOfWork,
        notifier: AsyncMock,
        stored_activity: Activity,
    ) -> None:
        uow.activities.get.return_value = stored_activity
        uow.activities.delete.side_effect = ActivityNotFoundError(7)

        with pytest.raises(ActivityNotFoundError):
            await service.delete(7)

        notifier.notify_deleted.assert_not_called()
        assert not uow.committed
        assert not stored_activity.is_deleted
