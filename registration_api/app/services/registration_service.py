"""
Business logic for registrations.

There is no validation or transformation of submissions: the service
hands the payload to the gateway and converts store‑specific values
(``ObjectId``) in the results into JSON friendly strings.
"""

from typing import Any, Dict, List, Mapping

from bson import ObjectId

from ..core.db import ConnectionManager


def to_jsonable(value: Any) -> Any:
    """Recursively replace ``ObjectId`` values with their hex string."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


class RegistrationService:
    """Stores and lists registration submissions."""

    def __init__(self, manager: ConnectionManager) -> None:
        self.manager = manager

    async def register(self, payload: Mapping[str, Any]) -> str:
        """Persist ``payload`` and return the generated id as a string."""
        inserted_id = await self.manager.insert(payload)
        return str(inserted_id)

    async def list_registrations(self) -> List[Dict[str, Any]]:
        documents = await self.manager.find_all()
        return [to_jsonable(document) for document in documents]
