"""Request correlation id (X-Request-ID by default).

A caller-supplied id is kept only when it is short and made of
``[A-Za-z0-9_-]``, so it can be written to logs verbatim; anything else is
replaced by a fresh UUID4. The id is stored on ``request.state.request_id``
and echoed on the response. Raw ASGI, so responses are never buffered.
"""

import re
import uuid
from typing import Callable

from starlette.requests import Request

REQUEST_ID_MAX_LENGTH = 64
_REQUEST_ID_RE = re.compile(rf"[A-Za-z0-9_-]{{1,{REQUEST_ID_MAX_LENGTH}}}")


def sanitize_request_id(raw: str | None) -> str:
    """Return the trimmed caller id when it is log-safe, otherwise a new UUID4."""
    candidate = (raw or "").strip()
    if _REQUEST_ID_RE.fullmatch(candidate):
        return candidate
    return str(uuid.uuid4())


def get_request_id(request: Request) -> str | None:
    """Correlation id assigned by RequestIDMiddleware (None outside it)."""
    return getattr(request.state, "request_id", None)


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Wrap an ASGI app so every HTTP exchange carries a correlation id."""
    header_key = header_name.lower().encode("latin-1")

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        supplied = next(
            (v.decode("latin-1") for k, v in scope.get("headers", []) if k.lower() == header_key),
            None,
        )
        request_id = sanitize_request_id(supplied)
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (header_key, request_id.encode("latin-1")),
                ]
            await send(message)

        await app(scope, receive, send_with_id)

    return asgi_app
