"""
Top‑level API router.

Aggregates the health and registration routers.  The application
mounts this router under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import health, registrations

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(registrations.router, tags=["registrations"])
