"""Event Registration API client.

A thin synchronous wrapper around the three HTTP routes exposed by the
service, built on ``requests``.  Every method returns a tuple
``(data, error)``: on success ``error`` is ``None``; on failure
``data`` is empty and ``error`` is a dictionary with the keys
``status_code`` and ``message``.

Example::

    api = RegistrationAPI(base_url="http://localhost:3001")
    registration_id, error = api.register({"name": "Alice", "team": "A"})
    records, error = api.list_registrations()
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class RegistrationAPI:
    """Client for the registration endpoints under ``/api``."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3001``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict):
            message = body.get("error") or body.get("message") or body.get("detail")
            if message:
                return str(message)
        return str(body)

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        url = f"{self.base_url}/api{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        if not response.ok:
            message = self._error_message(response) or response.reason
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        try:
            return response.json(), None
        except ValueError:
            return None, {"status_code": response.status_code, "message": "Response is not JSON"}

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Return the health payload, e.g. ``{"status": "OK", ...}``."""
        return self._request("GET", "/health")

    def register(self, payload: Dict[str, Any]) -> Tuple[Optional[str], Optional[Error]]:
        """Submit a registration.

        Returns:
            A tuple ``(id, error)`` where ``id`` is the identifier the
            database assigned to the stored document.
        """
        data, error = self._request("POST", "/register", json_body=payload)
        if error:
            return None, error
        return (data or {}).get("id"), None

    def list_registrations(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve every stored registration."""
        data, error = self._request("GET", "/registrations")
        if error:
            return [], error
        return (data or {}).get("data", []), None
