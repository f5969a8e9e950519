"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for storage use cases, the access guard and the
remote fetcher. Routes depend only on these, not on infrastructure directly.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
from fastapi import Depends, Request

from modelcdn.application.interfaces.storage import IRemoteFetcher
from modelcdn.application.services.access_guard import AccessGuard
from modelcdn.application.use_cases.storage import (
    CollectionDeleteService,
    CollectionQueryService,
    CollectionUploadService,
)
from modelcdn.core.config import get_settings
from modelcdn.infrastructure.external.http import HttpRemoteFetcher
from modelcdn.infrastructure.external.storage import (
    LocalCollectionStorage,
    PathResolver,
)


def get_path_resolver() -> PathResolver:
    """Resolver for the current settings (roots are re-checked per request)."""
    return PathResolver.from_settings(get_settings())


def get_storage(
    resolver: PathResolver = Depends(get_path_resolver),
) -> LocalCollectionStorage:
    return LocalCollectionStorage(resolver)


def get_access_guard() -> AccessGuard:
    return AccessGuard.from_settings(get_settings())


async def get_remote_fetcher(request: Request) -> AsyncIterator[IRemoteFetcher]:
    """Fetcher over the shared client from the lifespan; a short-lived client otherwise."""
    client = getattr(request.app.state, "http_client", None)
    if client is not None:
        yield HttpRemoteFetcher(client)
        return
    timeout = get_settings().remote_fetch_timeout_seconds
    async with httpx.AsyncClient(timeout=timeout) as own_client:
        yield HttpRemoteFetcher(own_client)


def get_query_service(
    storage: LocalCollectionStorage = Depends(get_storage),
) -> CollectionQueryService:
    return CollectionQueryService(storage)


def get_upload_service(
    storage: LocalCollectionStorage = Depends(get_storage),
    fetcher: IRemoteFetcher = Depends(get_remote_fetcher),
) -> CollectionUploadService:
    return CollectionUploadService(storage, fetcher)


def get_delete_service(
    storage: LocalCollectionStorage = Depends(get_storage),
) -> CollectionDeleteService:
    return CollectionDeleteService(storage)


def get_base_url(request: Request) -> str:
    """Base for absolute URLs: NEXT_PUBLIC_BASE_URL, else the Origin header, else ''."""
    configured = get_settings().next_public_base_url
    if configured:
        return configured.rstrip("/")
    return (request.headers.get("origin") or "").rstrip("/")
