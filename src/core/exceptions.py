"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    ACTIVITY_NOT_FOUND = "ACTIVITY_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_DURATION = "INVALID_DURATION"

    # Conflict errors (409)
    ACTIVITY_IDENTITY_CONFLICT = "ACTIVITY_IDENTITY_CONFLICT"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    ACTIVITY_INCONSISTENT = "ACTIVITY_INCONSISTENT"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class DurationParseError(AppException):
    """Duration string is malformed."""

    def __init__(self, message: str, raw: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_DURATION,
            message=message,
            status_code=400,
            details={"duration": raw},
        )
        self.raw = raw


class ActivityValidationError(AppException):
    """Activity fields violate an entity rule."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message,
            status_code=400,
            details={"field": field} if field else None,
        )
        self.field = field


class ActivityNotFoundError(AppException):
    """Activity not found."""

    def __init__(self, activity_id: int | str) -> None:
        super().__init__(
            error_code=ErrorCode.ACTIVITY_NOT_FOUND,
            message=f"Activity not found: {activity_id}",
            status_code=404,
            details={"activity_id": str(activity_id)},
        )


class ActivityInconsistencyError(AppException):
    """Storage reported a successful write that cannot be read back."""

    def __init__(self, activity_id: int | str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.ACTIVITY_INCONSISTENT,
            message="Activity could not be created",
            status_code=500,
            details={"activity_id": str(activity_id)} if activity_id is not None else None,
        )


class ActivityIdentityError(AppException):
    """Activity already carries a storage-assigned identity."""

    def __init__(self, current_id: int, new_id: int) -> None:
        super().__init__(
            error_code=ErrorCode.ACTIVITY_IDENTITY_CONFLICT,
            message=f"Activity already has id {current_id}, cannot reassign to {new_id}",
            status_code=409,
            details={"current_id": current_id, "new_id": new_id},
        )
