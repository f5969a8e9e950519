"""Admin session tokens (HS256 JWT carried in the session cookie).

Uses SECRET_KEY when configured; otherwise a random key generated once per
process, so sessions do not survive a restart.
"""

import secrets
from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from modelcdn.core.config import get_settings

ADMIN_SUBJECT = "admin"

_EPHEMERAL_KEY = secrets.token_urlsafe(32)


def _signing_key() -> str:
    settings = get_settings()
    if settings.secret_key is not None:
        return settings.secret_key.get_secret_value()
    return _EPHEMERAL_KEY


def create_session_token(expires_delta: timedelta | None = None) -> str:
    """Create a signed admin session token.

    Args:
        expires_delta: Optional TTL; else settings.admin_session_max_age_seconds.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(seconds=settings.admin_session_max_age_seconds)
    claims: dict[str, Any] = {
        "sub": ADMIN_SUBJECT,
        "iat": now,
        "exp": now + expires_delta,
    }
    encoded = jwt.encode(claims, _signing_key(), algorithm=settings.algorithm)
    return cast(str, encoded)


def verify_session_token(token: str | None) -> bool:
    """Return True if token is a valid, unexpired admin session token."""
    if not token:
        return False
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            _signing_key(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError:
        return False
    return payload.get("sub") == ADMIN_SUBJECT
