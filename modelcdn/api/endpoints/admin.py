"""Admin session: password login sets a signed session cookie; logout clears it."""

import logging

from fastapi import APIRouter, Request, Response

from modelcdn.application.services.admin_auth import verify_admin_password
from modelcdn.core.config import get_settings
from modelcdn.core.limiter import limit_login
from modelcdn.infrastructure.security.session import create_session_token
from modelcdn.schemas.admin import LoginRequest
from modelcdn.schemas.common import ErrorResponse, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/login",
    response_model=SuccessResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
@limit_login
async def login(
    request: Request,
    response: Response,
    payload: LoginRequest | None = None,
):
    """Verify the admin password and set the session cookie (httpOnly, SameSite=Lax, 24h)."""
    settings = get_settings()
    configured = settings.admin_password.get_secret_value() if settings.admin_password else None
    verify_admin_password(payload.password if payload else None, configured)

    response.set_cookie(
        key=settings.admin_cookie_name,
        value=create_session_token(),
        max_age=settings.admin_session_max_age_seconds,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/",
    )
    logger.info("Admin session started")
    return SuccessResponse(message="Login successful")


@router.post("/logout", response_model=SuccessResponse)
async def logout(response: Response):
    """Clear the session cookie."""
    settings = get_settings()
    response.delete_cookie(key=settings.admin_cookie_name, path="/")
    return SuccessResponse(message="Logged out successfully")
