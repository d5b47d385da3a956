"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.activities import router as activities_router

router = APIRouter()
router.include_router(activities_router)
