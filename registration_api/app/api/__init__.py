"""
API package containing the HTTP routes.

``router`` aggregates the endpoint modules under ``endpoints``; the
application mounts it under the ``/api`` prefix.
"""
