"""Activity API routes."""

from fastapi import APIRouter, Depends, Query, Request, status

from api.v1.dependencies import get_activity_service
from api.v1.schemas.activity import (
    ActivityCreate,
    ActivityDetailResponse,
    ActivityListResponse,
    ActivityResponse,
)
from api.v1.schemas.common import ErrorResponse
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.activity import Activity, NewActivityRequest
from domain.services.activity_service import ActivityService

router = APIRouter(prefix="/activities", tags=["activities"])


def _to_response(activity: Activity) -> ActivityResponse:
    return ActivityResponse(
        id=activity.id,  # type: ignore[arg-type]
        name=activity.name,
        minutes=activity.minutes,
        date=activity.date,
    )


def _to_request(body: ActivityCreate) -> NewActivityRequest:
    return NewActivityRequest(
        name=body.name,  # type: ignore[arg-type]
        duration=body.time,  # type: ignore[arg-type]
        date=body.date,
    )


@router.get(
    "",
    response_model=ActivityListResponse,
    summary="List or search activities",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_activities(
    request: Request,
    name: str | None = Query(None, description="Case-insensitive name filter"),
    service: ActivityService = Depends(get_activity_service),
) -> ActivityListResponse:
    """Get all activities, or only those whose name contains ``name``."""
    if name:
        activities = await service.search(name)
    else:
        activities = await service.get_all()
    return ActivityListResponse(data=[_to_response(a) for a in activities])


@router.get(
    "/{activity_id}",
    response_model=ActivityDetailResponse,
    summary="Get an activity",
    responses={
        200: {"description": "Activity found"},
        404: {"model": ErrorResponse, "description": "Activity not found"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_activity(
    request: Request,
    activity_id: int,
    service: ActivityService = Depends(get_activity_service),
) -> ActivityDetailResponse:
    """Get a single activity by ID."""
    activity = await service.get_by_id(activity_id)
    return ActivityDetailResponse(data=_to_response(activity))


@router.post(
    "",
    response_model=ActivityDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Log an activity",
    responses={
        201: {"description": "Activity created successfully"},
        400: {"model": ErrorResponse, "description": "Invalid duration or activity fields"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_activity(
    request: Request,
    body: ActivityCreate,
    service: ActivityService = Depends(get_activity_service),
) -> ActivityDetailResponse:
    """Create a new activity. ``time`` is a duration such as ``45m`` or ``2h``."""
    activity = await service.create(_to_request(body))
    return ActivityDetailResponse(data=_to_response(activity))


@router.put(
    "/{activity_id}",
    response_model=ActivityDetailResponse,
    summary="Replace an activity",
    responses={
        200: {"description": "Activity updated successfully"},
        400: {"model": ErrorResponse, "description": "Invalid duration or activity fields"},
        404: {"model": ErrorResponse, "description": "Activity not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_activity(
    request: Request,
    activity_id: int,
    body: ActivityCreate,
    service: ActivityService = Depends(get_activity_service),
) -> ActivityDetailResponse:
    """Replace name, duration and date of an existing activity."""
    activity = await service.update(activity_id, _to_request(body))
    return ActivityDetailResponse(data=_to_response(activity))


@router.delete(
    "/{activity_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an activity",
    responses={
        204: {"description": "Activity deleted successfully"},
        404: {"model": ErrorResponse, "description": "Activity not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_activity(
    request: Request,
    activity_id: int,
    service: ActivityService = Depends(get_activity_service),
) -> None:
    """Delete an activity and send the deletion notice."""
    await service.delete(activity_id)
    return None
