"""Admin session schemas."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Body for POST /api/admin/login. An empty password is rejected by the route (400)."""

    password: str | None = None
