"""Request body size limit middleware.

Answers 413 before routing when the body exceeds the configured ceiling.
A declared Content-Length is checked up front; bodies without one
(Transfer-Encoding: chunked) are counted while read and replayed to the app.
"""

from typing import Callable

from modelcdn.middleware._asgi import get_header, send_json_error


async def _send_413(send: Callable, max_bytes: int, actual: int) -> None:
    await send_json_error(
        send,
        413,
        f"Request body must be at most {max_bytes} bytes",
        "REQUEST_TOO_LARGE",
        {"max_bytes": max_bytes, "content_length": actual},
    )


def _replay(chunks: list[bytes]) -> Callable:
    """Return a receive callable that yields the buffered chunks in order."""
    pending = list(chunks)

    async def receive() -> dict:
        if pending:
            body = pending.pop(0)
            return {"type": "http.request", "body": body, "more_body": bool(pending)}
        return {"type": "http.request", "body": b"", "more_body": False}

    return receive


def RequestSizeLimitMiddleware(app: Callable, max_bytes: int) -> Callable:
    """Reject requests whose body exceeds max_bytes (Content-Length or chunked). Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        declared = get_header(scope, "content-length")
        if declared is not None:
            try:
                length = int(declared)
            except ValueError:
                length = 0
            if length > max_bytes:
                await _send_413(send, max_bytes, length)
                return
            await app(scope, receive, send)
            return

        if scope.get("method") in ("GET", "HEAD", "OPTIONS"):
            await app(scope, receive, send)
            return

        chunks: list[bytes] = []
        total = 0
        while True:
            message = await receive()
            if message["type"] != "http.request":
                # Client disconnected mid-body
                return
            body = message.get("body", b"")
            total += len(body)
            if total > max_bytes:
                await _send_413(send, max_bytes, total)
                return
            chunks.append(body)
            if not message.get("more_body", False):
                break
        await app(scope, _replay(chunks), send)

    return asgi_app
