"""Liveness route."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from blog.config import Settings
from blog.util.observability import SERVICE_VERSION

router = APIRouter(tags=["health"], route_class=DishkaRoute)

_STARTED_AT = datetime.now(timezone.utc)


class HealthResponse(BaseModel):
    success: bool = True
    status: str = "healthy"
    version: str = SERVICE_VERSION
    environment: str
    uptime_seconds: float


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is up. Does not touch the database."""
    uptime = datetime.now(timezone.utc) - _STARTED_AT
    return HealthResponse(
        environment=settings.environment,
        uptime_seconds=round(uptime.total_seconds(), 3),
    )
