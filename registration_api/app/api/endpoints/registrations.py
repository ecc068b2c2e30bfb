"""
Registration endpoints.

``POST /register`` stores whatever JSON object it receives, stamped
with the server time, and ``GET /registrations`` returns every stored
document.  Store failures are answered with HTTP 500 and an
``ErrorEnvelope`` exposing the store's error message.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from ...core.exceptions import StoreError
from ...schemas.registration import ErrorEnvelope, RegistrationCreated, RegistrationList
from ...services.registration_service import RegistrationService
from ..deps import get_registration_service

logger = logging.getLogger(__name__)

router = APIRouter()


def _failure(message: str, exc: Exception) -> JSONResponse:
    envelope = ErrorEnvelope(message=message, error=str(exc) or exc.__class__.__name__)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=envelope.model_dump(),
    )


@router.post(
    "/register",
    response_model=RegistrationCreated,
    status_code=status.HTTP_201_CREATED,
    responses={500: {"model": ErrorEnvelope}},
)
async def register(
    payload: Dict[str, Any] = Body(..., example={"name": "Alice", "team": "A"}),
    service: RegistrationService = Depends(get_registration_service),
):
    """Store a registration submission.

    The body may be any JSON object, including an empty one.  The
    response carries the id assigned by the database.
    """
    try:
        registration_id = await service.register(payload)
    except StoreError as exc:
        logger.error("Registration failed: %s", exc)
        return _failure("Registration failed", exc)
    return RegistrationCreated(id=registration_id)


@router.get(
    "/registrations",
    response_model=RegistrationList,
    responses={500: {"model": ErrorEnvelope}},
)
async def list_registrations(
    service: RegistrationService = Depends(get_registration_service),
):
    """Return every stored registration with its count."""
    try:
        registrations = await service.list_registrations()
    except StoreError as exc:
        logger.error("Failed to fetch registrations: %s", exc)
        return _failure("Failed to fetch registrations", exc)
    return RegistrationList(count=len(registrations), data=registrations)
