"""TR Bot API client.

A small wrapper around the patterns HTTP API built on ``requests``.
It is meant for scripts and bots that need to read or store drum
patterns without dealing with URLs and status codes.

Every public method returns a tuple ``(result, error)``.  On success
``error`` is ``None``; on failure ``result`` is empty and ``error`` is
a dictionary with the keys ``status_code`` and ``message``.  The
message is taken from the ``{"error": {"message": ...}}`` body the API
answers with when available.  Network failures are reported the same
way instead of raising.

Example::

    api = PatternsAPI(base_url="http://localhost:8000")
    patterns, error = api.list_patterns()
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class PatternsAPI:
    """Client for the patterns endpoints."""

    patterns_path = "/api/patterns"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
            path: Path relative to :attr:`base_url`.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response, or ``None`` for empty responses.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = self._error_message(exc.response) or str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _error_message(response: Optional[requests.Response]) -> str:
        """Extract ``error.message`` from an error response body."""
        if response is None:
            return ""
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
            if body.get("detail"):
                return str(body["detail"])
        return str(body)

    def _pattern_path(self, pattern_id: Any) -> str:
        return f"{self.patterns_path}/{pattern_id}"

    # ------------------------------------------------------------------
    # Pattern operations
    # ------------------------------------------------------------------
    def health(self) -> Tuple[bool, Optional[ApiError]]:
        """Check that the API answers on its root path."""
        data, error = self._request("GET", "/")
        if error:
            return False, error
        return bool(isinstance(data, dict) and data.get("ok")), None

    def list_patterns(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all stored patterns."""
        data, error = self._request("GET", f"{self.patterns_path}/")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_pattern(self, pattern_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve a single pattern by ID."""
        return self._request("GET", self._pattern_path(pattern_id))

    def create_pattern(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Store a new pattern.

        Args:
            payload: ``user_id``, ``name`` and the six step sequences.
        Returns:
            A tuple ``(pattern, error)`` where ``pattern`` carries the
            assigned ``id``.
        """
        return self._request("POST", f"{self.patterns_path}/", json_body=payload)

    def update_pattern(self, pattern_id: Any, changes: Dict[str, Any]) -> Tuple[bool, Optional[ApiError]]:
        """Overwrite some fields of a pattern."""
        _, error = self._request("PATCH", self._pattern_path(pattern_id), json_body=changes)
        return error is None, error

    def delete_pattern(self, pattern_id: Any) -> Tuple[bool, Optional[ApiError]]:
        """Delete a pattern."""
        _, error = self._request("DELETE", self._pattern_path(pattern_id))
        return error is None, error
