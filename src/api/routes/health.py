"""Liveness and readiness endpoints."""

from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from infrastructure.database.models import ActivityModel
from infrastructure.database.session import get_async_session

logger = structlog.get_logger()

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: str
    environment: str
    database: str | None = None
    activity_count: int | None = None


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health", response_model=HealthResponse, summary="Liveness check")
async def health_check() -> HealthResponse:
    """Report that the process is up. Does not touch the database."""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=_now(),
        environment=settings.app_env,
    )


@router.get("/health/detailed", response_model=HealthResponse, summary="Readiness check")
async def detailed_health_check(
    db: AsyncSession = Depends(get_async_session),
) -> HealthResponse:
    """Count stored activities; a failing query marks the service degraded."""
    try:
        count = await db.scalar(select(func.count()).select_from(ActivityModel))
    except SQLAlchemyError as e:
        logger.warning("health_database_unavailable", error=str(e))
        return HealthResponse(
            status="degraded",
            version=settings.app_version,
            timestamp=_now(),
            environment=settings.app_env,
            database=f"unhealthy: {e}",
        )

    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=_now(),
        environment=settings.app_env,
        database="healthy",
        activity_count=count,
    )
