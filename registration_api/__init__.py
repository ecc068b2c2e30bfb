"""
Top‑level package for the Event Registration API.

The HTTP service lives under ``registration_api.app`` and a small
synchronous client for it in ``registration_api.client``.  Import
``registration_api.app.main:app`` to obtain the ASGI application.
"""

__all__ = []
