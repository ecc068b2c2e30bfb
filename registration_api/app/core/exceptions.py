"""
Errors raised by the document store gateway.

Every failure is terminal for the request that triggered it; handlers
turn these into an HTTP 500 envelope carrying ``str(exc)``.
"""


class StoreError(Exception):
    """Base class for document store failures."""


class StoreConnectionError(StoreError):
    """The store is unreachable, misconfigured or already shut down."""


class StoreWriteError(StoreError):
    """Inserting a document failed."""


class StoreReadError(StoreError):
    """Querying the collection failed."""
