"""Admin password check for the session login."""

import hmac

from modelcdn.domain.exceptions import (
    AdminNotConfiguredException,
    MissingInputException,
    UnauthorizedException,
)


def verify_admin_password(supplied: str | None, configured: str | None) -> None:
    """Raise unless supplied matches the configured admin password.

    Order: empty input (400), then unconfigured (500, login stays closed),
    then mismatch (401). Comparison is constant-time.
    """
    if not supplied:
        raise MissingInputException("Password is required", field="password")
    if not configured:
        raise AdminNotConfiguredException()
    if not hmac.compare_digest(supplied.encode("utf-8"), configured.encode("utf-8")):
        raise UnauthorizedException("Invalid password")
