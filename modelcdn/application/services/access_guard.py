"""Access guard: optional shared API key for upload and delete.

With no key configured the guard is open and every request is authorized.
That state is explicit (``is_open``) and logged at startup.
"""

from __future__ import annotations

import hmac
from collections.abc import Mapping
from typing import TYPE_CHECKING

from modelcdn.domain.exceptions import UnauthorizedException

if TYPE_CHECKING:
    from modelcdn.core.config import Settings

_BEARER_PREFIX = "bearer "


class AccessGuard:
    """Check callers against UPLOAD_API_KEY using a constant-time comparison."""

    def __init__(self, api_key: str | None) -> None:
        self._api_key = api_key or None

    @classmethod
    def from_settings(cls, settings: "Settings") -> "AccessGuard":
        key = settings.upload_api_key
        return cls(key.get_secret_value() if key is not None else None)

    @property
    def is_open(self) -> bool:
        """True when no key is configured (fail-open)."""
        return self._api_key is None

    @staticmethod
    def extract_key(headers: Mapping[str, str]) -> str | None:
        """Return X-API-Key, else the token of an 'Authorization: Bearer' header."""
        key = headers.get("x-api-key")
        if key:
            return key
        authorization = headers.get("authorization") or ""
        if authorization.lower().startswith(_BEARER_PREFIX):
            return authorization[len(_BEARER_PREFIX):].strip() or None
        return None

    def has_valid_key(self, headers: Mapping[str, str]) -> bool:
        """True only when a key is configured and the caller presented it."""
        if self._api_key is None:
            return False
        supplied = self.extract_key(headers)
        if supplied is None:
            return False
        return hmac.compare_digest(
            supplied.encode("utf-8"), self._api_key.encode("utf-8")
        )

    def authorize(self, headers: Mapping[str, str]) -> bool:
        """Return True if the request may mutate storage."""
        return self.is_open or self.has_valid_key(headers)

    def require(self, headers: Mapping[str, str], realm: str) -> None:
        """Raise UnauthorizedException (with a Bearer realm) unless authorized."""
        if not self.authorize(headers):
            raise UnauthorizedException(realm=realm)
