"""In-memory stand-ins for the Motor client used by the test suite.

Documents are kept BSON-encoded and decoded with the codec options the
client was built with, so reads behave like the real driver (millisecond
datetimes, naive unless ``tz_aware`` is requested).
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional

import bson
from bson import ObjectId
from bson.codec_options import CodecOptions
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError


class FakeInsertResult:
    def __init__(self, inserted_id: ObjectId) -> None:
        self.inserted_id = inserted_id


class FakeCursor:
    def __init__(self, raw_documents: List[bytes], codec_options: CodecOptions) -> None:
        self._raw_documents = raw_documents
        self._codec_options = codec_options

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        await asyncio.sleep(0)
        return [bson.decode(raw, codec_options=self._codec_options) for raw in self._raw_documents]


class FakeCollection:
    def __init__(self, server: "FakeServer") -> None:
        self.server = server
        self.raw_documents: List[bytes] = []
        self.fail_insert: Optional[str] = None
        self.fail_find: Optional[str] = None
        self.queries: List[Dict[str, Any]] = []

    @property
    def documents(self) -> List[Dict[str, Any]]:
        return [bson.decode(raw, codec_options=self.server.codec_options) for raw in self.raw_documents]

    async def insert_one(self, document: Dict[str, Any]) -> FakeInsertResult:
        await asyncio.sleep(0)
        if self.fail_insert:
            raise PyMongoError(self.fail_insert)
        document.setdefault("_id", ObjectId())
        self.raw_documents.append(bson.encode(document))
        return FakeInsertResult(document["_id"])

    def find(self, query: Dict[str, Any]) -> FakeCursor:
        self.queries.append(query)
        if self.fail_find:
            raise PyMongoError(self.fail_find)
        return FakeCursor(list(self.raw_documents), self.server.codec_options)


class FakeDatabase:
    def __init__(self, server: "FakeServer") -> None:
        self.server = server
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection(self.server))


class FakeAdmin:
    def __init__(self, client: "FakeClient") -> None:
        self._client = client

    async def command(self, name: str) -> Dict[str, Any]:
        self._client.commands.append(name)
        await asyncio.sleep(0)
        if self._client.server.unreachable:
            raise ServerSelectionTimeoutError("fake cluster is unreachable")
        return {"ok": 1.0}


class FakeClient:
    def __init__(self, server: "FakeServer", uri: str, **kwargs: Any) -> None:
        self.server = server
        self.uri = uri
        self.kwargs = kwargs
        self.commands: List[str] = []
        self.closed = False
        self.admin = FakeAdmin(self)

    def __getitem__(self, name: str) -> FakeDatabase:
        return self.server.database(name)

    def close(self) -> None:
        self.closed = True


class FakeServer:
    """Shared state behind every client the factory hands out.

    Call an instance like ``AsyncIOMotorClient`` to get a new client.
    The most recent client's ``tz_aware``/``tzinfo`` options decide how
    stored documents are decoded.
    """

    def __init__(self) -> None:
        self.databases: Dict[str, FakeDatabase] = {}
        self.clients: List[FakeClient] = []
        self.unreachable = False
        self.codec_options = CodecOptions()

    def __call__(self, uri: str, **kwargs: Any) -> FakeClient:
        client = FakeClient(self, uri, **kwargs)
        self.clients.append(client)
        self.codec_options = CodecOptions(
            tz_aware=kwargs.get("tz_aware", False),
            tzinfo=kwargs.get("tzinfo"),
        )
        return client

    def database(self, name: str) -> FakeDatabase:
        return self.databases.setdefault(name, FakeDatabase(self))

    def collection(self, database: str, name: str) -> FakeCollection:
        return self.database(database)[name]
