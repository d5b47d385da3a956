"""Notification port for activity lifecycle events."""

from typing import Protocol

from domain.entities.activity import Activity


class IActivityNotifier(Protocol):
    """Sends notifications about activities."""

    async def notify_deleted(self, activity: Activity) -> None:
        """Announce that an activity has been deleted.

        Receives the activity as it was before deletion. Called at most once
        per deletion and only after storage has removed the activity.
        """
        ...
