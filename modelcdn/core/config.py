"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Every secret is optional: an unset UPLOAD_API_KEY leaves
mutating endpoints open, an unset ADMIN_PASSWORD keeps admin login closed.
"""

from functools import lru_cache
from typing import Any

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Storage roots: when STORAGE_ROOT is set it is the only root used;
    otherwise the container root is tried first, then the working-directory
    root (see PathResolver).
    """

    # App
    app_name: str = "modelcdn"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Access guard and admin session
    upload_api_key: SecretStr | None = None
    admin_password: SecretStr | None = None
    secret_key: SecretStr | None = None
    algorithm: str = "HS256"
    admin_cookie_name: str = "glb-viewer-admin-session"
    admin_session_max_age_seconds: int = 24 * 60 * 60

    # Absolute URLs in upload responses
    next_public_base_url: str | None = None

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Storage
    storage_root: str | None = None
    container_public_root: str = "/app/public"
    local_public_root: str = "public"
    # Read-only fallback; None means <repo>/public next to the package
    legacy_public_root: str | None = None

    # Request / middleware
    request_timeout_seconds: int = 300
    max_request_body_bytes: int = 600 * 1024 * 1024  # videos allow 500MB plus multipart overhead
    remote_fetch_timeout_seconds: float = 60.0
    request_id_header: str = "X-Request-ID"
    correlation_id_header: str = "X-Correlation-ID"

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator(
        "upload_api_key",
        "admin_password",
        "secret_key",
        "storage_root",
        "next_public_base_url",
        mode="before",
    )
    @classmethod
    def empty_string_is_unset(cls, value: Any) -> Any:
        """Treat VAR= (empty) the same as an unset variable."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def validate_security(self) -> "Settings":
        """Reject insecure combinations.

        - ALLOWED_ORIGINS=* is not allowed (CORS is configured with credentials).
        - DEBUG=true is not allowed when ENVIRONMENT=production (500s would leak detail).
        """
        origins = [o.strip() for o in self.allowed_origins.split(",") if o.strip()]
        if "*" in origins:
            raise ValueError(
                "allowed_origins must list explicit origins; '*' is not allowed with credentials"
            )
        if self.debug and self.environment.lower() == "production":
            raise ValueError("debug must be False when environment is 'production'")
        return self

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() after overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
