"""Activity repository protocol."""

from typing import Protocol

from domain.entities.activity import Activity


class IActivityRepository(Protocol):
    """Repository interface for Activity entities."""

    async def get(self, id: int) -> Activity | None:
        """Get an activity by ID."""
        ...

    async def get_all(self) -> list[Activity]:
        """Get all activities."""
        ...

    async def search_by_name(self, pattern: str) -> list[Activity]:
        """Get activities whose name contains pattern, ignoring case."""
        ...

    async def save(self, activity: Activity) -> int:
        """Persist a new activity, assign its ID and return it."""
        ...

    async def update(self, activity: Activity) -> None:
        """Update an existing activity.

        Raises ActivityNotFoundError if the activity no longer exists.
        """
        ...

    async def delete(self, id: int) -> None:
        """Delete an activity.

        Raises ActivityNotFoundError if the activity does not exist.
        """
        ...
