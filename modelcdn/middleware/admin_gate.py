"""Admin gate middleware.

Protects the explore pages. A request passes with a valid API key (only when
one is configured) or a valid admin session cookie; otherwise it is
redirected (307) to the login page with the original path in ``redirect``.
"""

import logging
from typing import Callable
from urllib.parse import urlencode

from starlette.requests import HTTPConnection
from starlette.responses import RedirectResponse

from modelcdn.application.services.access_guard import AccessGuard
from modelcdn.core.config import get_settings
from modelcdn.infrastructure.security.session import verify_session_token

logger = logging.getLogger(__name__)

PROTECTED_PATHS = ("/models/explore", "/media/explore")
LOGIN_PATH = "/admin/login"


def is_protected(path: str) -> bool:
    """True for the protected pages and anything below them."""
    return any(path == p or path.startswith(p + "/") for p in PROTECTED_PATHS)


def AdminGateMiddleware(app: Callable) -> Callable:
    """Redirect unauthenticated requests for protected pages to the login page. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http" or not is_protected(scope.get("path", "")):
            await app(scope, receive, send)
            return

        settings = get_settings()
        conn = HTTPConnection(scope)
        if AccessGuard.from_settings(settings).has_valid_key(conn.headers):
            await app(scope, receive, send)
            return
        if verify_session_token(conn.cookies.get(settings.admin_cookie_name)):
            await app(scope, receive, send)
            return

        path = scope.get("path", "")
        logger.info("Redirecting unauthenticated request for %s to login", path)
        location = f"{LOGIN_PATH}?{urlencode({'redirect': path})}"
        response = RedirectResponse(url=location, status_code=307)
        await response(scope, receive, send)

    return asgi_app
