"""Application services (stateless policies and checks)."""

from modelcdn.application.services.access_guard import AccessGuard
from modelcdn.application.services.admin_auth import verify_admin_password

__all__ = ["AccessGuard", "verify_admin_password"]
