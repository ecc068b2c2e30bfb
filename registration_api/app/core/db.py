"""
MongoDB integration for the registration store.

This module provides the ``ConnectionManager`` which lazily opens a
single connection to the configured collection and exposes the two
operations the API needs: inserting a registration and reading every
registration back.  One manager is created per application and shared
by all requests through ``app.state``; the connect step is guarded by
an ``asyncio.Lock`` so concurrent first requests open one client, not
several.

The driver is Motor (the asyncio MongoDB driver).  Tests substitute a
fake client through the ``client_factory`` argument.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, NamedTuple, Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from .config import Settings
from .exceptions import StoreConnectionError, StoreReadError, StoreWriteError


logger = logging.getLogger(__name__)

SUBMITTED_AT_FIELD = "submittedAt"

STATE_DISCONNECTED = "disconnected"
STATE_CONNECTING = "connecting"
STATE_READY = "ready"
STATE_CLOSED = "closed"


class ConnectionHandle(NamedTuple):
    """Live link to the store: client, database and collection."""

    client: Any
    database: Any
    collection: Any


class ConnectionManager:
    """Owns the process‑wide connection to the registrations collection."""

    def __init__(
        self,
        settings: Settings,
        client_factory: Optional[Callable[..., Any]] = None,
    ) -> None:
        self._settings = settings
        self._client_factory = client_factory or AsyncIOMotorClient
        self._handle: Optional[ConnectionHandle] = None
        self._lock = asyncio.Lock()
        self._connecting = False
        self._closed = False

    @property
    def state(self) -> str:
        if self._closed:
            return STATE_CLOSED
        if self._handle is not None:
            return STATE_READY
        if self._connecting:
            return STATE_CONNECTING
        return STATE_DISCONNECTED

    async def ensure_connected(self) -> ConnectionHandle:
        """Return the cached handle, connecting on first use.

        Raises ``StoreConnectionError`` if the connection string is
        missing, the handshake fails, or the manager has been closed.
        A failed handshake is not cached; the next call tries again.
        """
        if self._handle is not None and not self._closed:
            return self._handle
        async with self._lock:
            if self._closed:
                raise StoreConnectionError("Connection manager has been closed")
            if self._handle is None:
                self._connecting = True
                try:
                    self._handle = await self._connect()
                finally:
                    self._connecting = False
            return self._handle

    async def _connect(self) -> ConnectionHandle:
        uri = self._settings.mongodb_uri
        if not uri:
            logger.error("MongoDB connection failed: MONGODB_URI is not configured")
            raise StoreConnectionError("MONGODB_URI is not configured")
        client = None
        try:
            # Stored datetimes come back as aware UTC values.
            client = self._client_factory(
                uri,
                serverSelectionTimeoutMS=self._settings.mongodb_timeout_ms,
                tz_aware=True,
                tzinfo=timezone.utc,
            )
            await client.admin.command("ping")
        except PyMongoError as exc:
            logger.error("MongoDB connection failed: %s", exc)
            if client is not None:
                client.close()
            raise StoreConnectionError(str(exc)) from exc
        database = client[self._settings.database_name]
        collection = database[self._settings.collection_name]
        logger.info(
            "Connected to MongoDB (database=%s, collection=%s)",
            self._settings.database_name,
            self._settings.collection_name,
        )
        return ConnectionHandle(client=client, database=database, collection=collection)

    async def insert(self, record: Mapping[str, Any]) -> Any:
        """Stamp ``record`` with ``submittedAt`` and insert it.

        The caller's mapping is copied, never mutated.  Any
        ``submittedAt`` supplied by the caller is overwritten with the
        current server time (UTC).  Returns the store‑generated id.
        """
        handle = await self.ensure_connected()
        document: Dict[str, Any] = dict(record)
        document[SUBMITTED_AT_FIELD] = datetime.now(timezone.utc)
        try:
            result = await handle.collection.insert_one(document)
        except PyMongoError as exc:
            raise StoreWriteError(str(exc)) from exc
        return result.inserted_id

    async def find_all(self) -> List[Dict[str, Any]]:
        """Return every document in the collection, in store order."""
        handle = await self.ensure_connected()
        try:
            cursor = handle.collection.find({})
            return await cursor.to_list(length=None)
        except PyMongoError as exc:
            raise StoreReadError(str(exc)) from exc

    async def close(self) -> None:
        """Close the client if one was opened.  Safe to call repeatedly."""
        async with self._lock:
            if self._closed:
                return
            self._closed = True
            handle, self._handle = self._handle, None
        if handle is not None:
            handle.client.close()
            logger.info("MongoDB connection closed")
