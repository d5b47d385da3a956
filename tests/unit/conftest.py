"""Shared fixtures for unit tests."""

from datetime import date, timedelta
from typing import Any
from unittest.mock import AsyncMock

import pytest

from domain.entities.activity import Activity


class FakeUnitOfWork:
    """Fake Unit of Work with an activity repository mock for unit testing."""

    def __init__(self) -> None:
        self.activities = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def today() -> date:
    """Fixed reference date used as the clock in unit tests."""
    return date(2026, 3, 14)


@pytest.fixture
def yesterday(today: date) -> date:
    return today - timedelta(days=1)


@pytest.fixture
def stored_activity(yesterday: date, today: date) -> Activity:
    """An activity as the repository would return it."""
    return Activity(id=7, name="Running", minutes=45, date=yesterday, clock=lambda: today)
