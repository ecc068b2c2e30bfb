"""Liveness endpoint.  Never touches the database."""

from fastapi import APIRouter

from ...schemas.registration import HealthStatus

router = APIRouter()


@router.get("/health", response_model=HealthStatus)
async def health() -> HealthStatus:
    return HealthStatus()
