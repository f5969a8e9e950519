"""Pytest configuration and fixtures for modelcdn.

Each test gets its own storage roots under tmp_path (the container root does
not exist, so writes land in the working-directory root) and a fresh settings
cache. Remote fetches go to an in-memory httpx.MockTransport; register bodies
in ``remote_files`` keyed by URL.
"""

import os
from collections.abc import AsyncIterator, Callable, Iterator
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from modelcdn.api.dependencies import get_remote_fetcher
from modelcdn.core.config import get_settings
from modelcdn.core.limiter import limiter
from modelcdn.infrastructure.external.http import HttpRemoteFetcher
from modelcdn.main import create_app

@pytest.fixture
def storage_roots(tmp_path: Path) -> dict[str, Path]:
    """Candidate roots: container (absent), working-directory, legacy."""
    return {
        "container": tmp_path / "container" / "public",
        "local": tmp_path / "public",
        "legacy": tmp_path / "legacy" / "public",
    }


@pytest.fixture
def env(storage_roots: dict[str, Path]) -> Iterator[dict[str, str]]:
    """Isolated environment: no API key, no admin password, tmp storage roots."""
    values = {
        "CONTAINER_PUBLIC_ROOT": str(storage_roots["container"]),
        "LOCAL_PUBLIC_ROOT": str(storage_roots["local"]),
        "LEGACY_PUBLIC_ROOT": str(storage_roots["legacy"]),
        "STORAGE_ROOT": "",
        "UPLOAD_API_KEY": "",
        "ADMIN_PASSWORD": "",
        "SECRET_KEY": "test-secret-key",
        "NEXT_PUBLIC_BASE_URL": "",
        "ENVIRONMENT": "development",
        "DEBUG": "false",
        "TELEMETRY_ENABLED": "false",
    }
    with patch.dict(os.environ, values, clear=False):
        get_settings.cache_clear()
        yield values
    get_settings.cache_clear()


@pytest.fixture
def configure(env: dict[str, str]) -> Callable[..., None]:
    """Override env vars for the rest of the test (restored by ``env``)."""

    def _configure(**values: str) -> None:
        os.environ.update(values)
        get_settings.cache_clear()

    return _configure


@pytest.fixture(autouse=True)
def _rate_limits_off() -> Iterator[None]:
    """Rate limits are exercised explicitly; other tests run with the limiter disabled."""
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def remote_files() -> dict[str, bytes]:
    return {}


@pytest.fixture
def mock_transport(remote_files: dict[str, bytes]) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        body = remote_files.get(str(request.url))
        if body is None:
            return httpx.Response(404)
        return httpx.Response(200, content=body)

    return httpx.MockTransport(handler)


@pytest.fixture
def app(env: dict[str, str], mock_transport: httpx.MockTransport) -> FastAPI:
    """Fresh app per test with the remote fetcher routed to the mock transport."""
    application = create_app()

    async def _mock_fetcher() -> AsyncIterator[HttpRemoteFetcher]:
        async with httpx.AsyncClient(transport=mock_transport) as mock_client:
            yield HttpRemoteFetcher(mock_client)

    application.dependency_overrides[get_remote_fetcher] = _mock_fetcher
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
