"""
Pydantic models for the registration API envelopes.

Every data route answers with an envelope carrying a ``success`` flag.
Successful responses add the payload (``id`` or ``count``/``data``);
failures add the human readable ``message`` and the raw ``error``
text reported by the store.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    status: str = Field("OK", example="OK")
    message: str = Field("Server is running", example="Server is running")


class RegistrationCreated(BaseModel):
    """Envelope returned after a registration has been stored."""

    success: bool = True
    message: str = Field("Registration successful", example="Registration successful")
    id: str = Field(..., example="665f1c2e9b1e8a4d2c3b4a5f")


class RegistrationList(BaseModel):
    """Envelope returned by the list endpoint.

    ``data`` holds the stored documents as is: the caller's fields plus
    ``_id`` and ``submittedAt``.
    """

    success: bool = True
    count: int = Field(..., example=1)
    data: List[Dict[str, Any]]


class ErrorEnvelope(BaseModel):
    success: bool = False
    message: str = Field(..., example="Registration failed")
    error: str = Field(..., example="MONGODB_URI is not configured")
