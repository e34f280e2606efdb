"""Request logging middleware.

Tags every HTTP request with a request id (forwarded from the client when it
looks safe, generated otherwise), echoes it on the response and writes one
access line per request to the 'inventory_service.access' logger.
Raw ASGI (no BaseHTTPMiddleware), so photo downloads are passed through untouched.
"""

import logging
import re
import time
import uuid
from typing import Callable

logger = logging.getLogger("inventory_service.access")

# Client ids end up in log lines; only short token-like values are accepted.
SAFE_REQUEST_ID = re.compile(r"[A-Za-z0-9_-]{1,64}")


def _request_id_from(scope: dict, header_name: bytes) -> str:
    """Forwarded id when safe to log, else a fresh uuid4 hex."""
    headers = dict(scope.get("headers") or [])
    raw = headers.get(header_name, b"").decode("latin-1").strip()
    return raw if SAFE_REQUEST_ID.fullmatch(raw) else uuid.uuid4().hex


def _client_address(scope: dict) -> str:
    client = scope.get("client")
    return f"{client[0]}:{client[1]}" if client else "-"


def RequestLoggingMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Wrap app so each HTTP request is logged with status, size, duration and request id."""
    header_key = header_name.lower().encode("latin-1")

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        request_id = _request_id_from(scope, header_key)
        scope.setdefault("state", {})["request_id"] = request_id
        response = {"status": 500, "bytes": 0}
        started = time.perf_counter()

        async def send_with_request_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                response["status"] = message["status"]
                message["headers"] = [
                    *message.get("headers", []),
                    (header_key, request_id.encode("latin-1")),
                ]
            elif message["type"] == "http.response.body":
                response["bytes"] += len(message.get("body", b""))
            await send(message)

        try:
            await app(scope, receive, send_with_request_id)
        finally:
            logger.info(
                '%s "%s %s" %d %dB %.1fms [%s]',
                _client_address(scope),
                scope.get("method", "-"),
                scope.get("path", "-"),
                response["status"],
                response["bytes"],
                (time.perf_counter() - started) * 1000,
                request_id,
            )

    return asgi_app
