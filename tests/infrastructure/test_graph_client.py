"""Tests for the graph service HTTP client."""

from __future__ import annotations

from typing import Any

import pytest
import requests

from eden.infrastructure.graph_client import GraphBadRequestError, GraphClient, GraphClientError


def _response(status: int, body: bytes = b"") -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response._content = body
    response.url = "http://graph.test/users"
    return response


class _StubSession:
    """Stands in for requests.Session; returns a canned response or raises."""

    def __init__(self, response: requests.Response | None = None, exc: Exception | None = None):
        self.response = response
        self.exc = exc
        self.posts: list[tuple[str, dict[str, Any], float]] = []

    def post(self, url: str, *, json: dict[str, Any], timeout: float) -> requests.Response:
        self.posts.append((url, json, timeout))
        if self.exc is not None:
            raise self.exc
        assert self.response is not None
        return self.response


def _client(session: _StubSession) -> GraphClient:
    return GraphClient("http://graph.test/", timeout=2.0, session=session)  # type: ignore[arg-type]


class TestCreateUser:
    def test_posts_payload(self) -> None:
        session = _StubSession(_response(201, b'{"id": 9}'))
        assert _client(session).create_user(5, "Alice") == {"id": 9}
        assert session.posts == [
            ("http://graph.test/users", {"userId": 5, "userName": "Alice"}, 2.0)
        ]

    def test_empty_body(self) -> None:
        assert _client(_StubSession(_response(204))).create_user(5, "Alice") == {}

    def test_non_object_body_wrapped(self) -> None:
        assert _client(_StubSession(_response(200, b"[1]"))).create_user(5, "A") == {
            "result": [1]
        }

    def test_bad_request(self) -> None:
        with pytest.raises(GraphBadRequestError) as exc_info:
            _client(_StubSession(_response(400, b"bad"))).create_user(5, "Alice")
        assert exc_info.value.status_code == 400

    def test_server_error(self) -> None:
        with pytest.raises(GraphClientError) as exc_info:
            _client(_StubSession(_response(503))).create_user(5, "Alice")
        assert exc_info.value.status_code == 503
        assert not isinstance(exc_info.value, GraphBadRequestError)

    def test_transport_error(self) -> None:
        session = _StubSession(exc=requests.ConnectionError("refused"))
        with pytest.raises(GraphClientError, match="unreachable"):
            _client(session).create_user(5, "Alice")
