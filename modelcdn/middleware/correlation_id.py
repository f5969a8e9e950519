"""Correlation ID middleware.

Forwards X-Correlation-ID from the client, else reuses the request ID.
"""

import uuid
from typing import Callable

from modelcdn.middleware._asgi import get_header
from modelcdn.middleware.request_id import _sanitize_request_id


def CorrelationIDMiddleware(
    app: Callable, header_name: str = "X-Correlation-ID"
) -> Callable:
    """Add or forward the correlation ID; falls back to scope state request_id. Raw ASGI."""
    header_bytes = header_name.encode()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        raw = get_header(scope, header_name)
        if raw:
            correlation_id = _sanitize_request_id(raw)
        else:
            correlation_id = scope.get("state", {}).get("request_id") or str(uuid.uuid4())
        scope.setdefault("state", {})["correlation_id"] = correlation_id

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (header_bytes, correlation_id.encode()),
                ]
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
