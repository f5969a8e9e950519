"""Request timeout middleware.

Cancels the request if it runs longer than the configured timeout (asyncio.wait_for).
Raw ASGI, so streaming responses are not buffered.
"""

import asyncio
import logging
from typing import Callable

from modelcdn.middleware._asgi import send_json_error

logger = logging.getLogger(__name__)


def TimeoutMiddleware(app: Callable, timeout_seconds: int) -> Callable:
    """Cancel request after timeout_seconds and answer 504. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        try:
            await asyncio.wait_for(app(scope, receive, send), timeout=float(timeout_seconds))
        except asyncio.TimeoutError:
            logger.warning(
                "Request timed out after %s seconds: %s %s",
                timeout_seconds,
                scope.get("method", ""),
                scope.get("path", ""),
            )
            await send_json_error(
                send,
                504,
                f"Request timed out after {timeout_seconds} seconds",
                "GATEWAY_TIMEOUT",
                {"timeout_seconds": timeout_seconds},
            )

    return asgi_app
