"""HTTP client for the companion graph-relationship service.

The graph service mirrors user identities as nodes. Calls are blocking
``requests`` calls with a fixed timeout; every failure surfaces as a
:class:`GraphClientError` so callers can decide what to tolerate.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

logger = logging.getLogger(__name__)


class GraphClientError(Exception):
    """The graph service call failed (transport error or non-2xx status)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GraphBadRequestError(GraphClientError):
    """The graph service rejected the request payload (HTTP 400)."""


class GraphClient:
    """Minimal client for the graph service's REST API."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 5.0,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def create_user(self, user_id: int, user_name: str | None) -> dict[str, Any]:
        """Create the user node. Returns the decoded response body, if any."""
        return self._post("/users", {"userId": user_id, "userName": user_name})

    def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        url = f"{self._base_url}{path}"
        try:
            response = self._session.post(url, json=payload, timeout=self._timeout)
        except requests.RequestException as exc:
            raise GraphClientError(f"Graph service unreachable: {exc}") from exc

        if response.status_code == 400:
            raise GraphBadRequestError(
                f"Graph service rejected request: {response.text}",
                status_code=400,
            )
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise GraphClientError(
                f"Graph service error: {exc}",
                status_code=response.status_code,
            ) from exc

        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError:
            logger.debug("Graph service returned a non-JSON body for %s", url)
            return {}
        return body if isinstance(body, dict) else {"result": body}
