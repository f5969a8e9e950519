"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging, the shared outbound HTTP
client, the access-guard state log and telemetry.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from modelcdn.application.services.access_guard import AccessGuard
from modelcdn.core.config import get_settings
from modelcdn.shared.telemetry import TelemetryConfig, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, shared HTTP client for URL uploads, guard state,
    telemetry (if enabled). Shutdown: client close, telemetry flush.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    app.state.http_client = httpx.AsyncClient(
        timeout=settings.remote_fetch_timeout_seconds
    )

    if AccessGuard.from_settings(settings).is_open:
        logger.warning(
            "UPLOAD_API_KEY is not set: upload and delete endpoints accept unauthenticated requests"
        )
    else:
        logger.info("Upload API key configured; upload and delete require it")
    if settings.admin_password is None:
        logger.warning("ADMIN_PASSWORD is not set: admin login is disabled")
    if settings.secret_key is None:
        logger.warning("SECRET_KEY is not set: admin sessions end when the process restarts")

    telemetry: TelemetryConfig | None = None
    if settings.telemetry_enabled:
        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        telemetry.instrument_fastapi(app)
    app.state.telemetry = telemetry

    yield

    # ---- Shutdown ----
    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("Outbound HTTP client closed")

    if telemetry is not None:
        telemetry.shutdown()
