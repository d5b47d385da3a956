"""Activity notifier that records deletion e-mails as structured log events."""

import structlog

from domain.entities.activity import Activity

logger = structlog.get_logger()


class LoggingActivityNotifier:
    """IActivityNotifier implementation that logs instead of sending mail."""

    def __init__(self, from_email: str) -> None:
        self._from_email = from_email

    async def notify_deleted(self, activity: Activity) -> None:
        """Log the deletion notice for an activity."""
        logger.info(
            "activity_deletion_notification_sent",
            activity_id=activity.id,
            activity_name=activity.name,
            recipient=self._from_email,
        )
