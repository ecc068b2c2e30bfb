"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from ..core.db import ConnectionManager
from ..services.registration_service import RegistrationService


def get_connection_manager(request: Request) -> ConnectionManager:
    """Return the manager created by ``create_app`` for this application."""
    return request.app.state.connection_manager


def get_registration_service(request: Request) -> RegistrationService:
    return RegistrationService(get_connection_manager(request))
