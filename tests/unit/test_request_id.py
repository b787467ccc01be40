"""Tests for request correlation ids."""

import uuid

from httpx import AsyncClient
from starlette.requests import Request

from bubbles_search.middleware.request_id import get_request_id, sanitize_request_id


def test_valid_request_id_is_kept() -> None:
    assert sanitize_request_id("abc-123_DEF") == "abc-123_DEF"


def test_unsafe_request_id_is_replaced() -> None:
    replaced = sanitize_request_id("bad id\nwith newline")
    assert uuid.UUID(replaced)


def test_missing_or_oversized_request_id_is_replaced() -> None:
    assert uuid.UUID(sanitize_request_id(None))
    assert uuid.UUID(sanitize_request_id("a" * 65))


def test_surrounding_whitespace_is_trimmed() -> None:
    assert sanitize_request_id("  req-42 ") == "req-42"


def test_get_request_id_reads_request_state() -> None:
    request = Request({"type": "http", "headers": [], "state": {"request_id": "req-9"}})
    assert get_request_id(request) == "req-9"
    assert get_request_id(Request({"type": "http", "headers": []})) is None


async def test_unsafe_header_is_replaced_on_response(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "bad id;drop"})
    assert uuid.UUID(response.headers["X-Request-ID"])
