"""Health endpoints: liveness and storage diagnostics."""

import os

from fastapi import APIRouter, Depends

from modelcdn.api.dependencies import get_access_guard, get_path_resolver
from modelcdn.application.services.access_guard import AccessGuard
from modelcdn.domain.enums import CollectionKind
from modelcdn.infrastructure.external.storage import PathResolver
from modelcdn.schemas.health import (
    CandidateRootStatus,
    CollectionStorageStatus,
    HealthResponse,
    StorageHealthResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get("/storage", response_model=StorageHealthResponse)
async def storage_health(
    resolver: PathResolver = Depends(get_path_resolver),
    guard: AccessGuard = Depends(get_access_guard),
) -> StorageHealthResponse:
    """Report, per collection, the read/write directories and every candidate root searched."""
    collections: list[CollectionStorageStatus] = []
    for collection in CollectionKind:
        read_dir = await resolver.resolve_read_dir(collection)
        write_dir = await resolver.resolve_write_dir(collection)
        candidates = await resolver.describe(collection)
        collections.append(
            CollectionStorageStatus(
                collection=collection.value,
                read_directory=str(read_dir) if read_dir is not None else None,
                write_directory=str(write_dir),
                candidates=[
                    CandidateRootStatus(path=c.path, exists=c.exists, entry_count=c.entry_count)
                    for c in candidates
                ],
            )
        )
    configured = resolver.configured_root
    return StorageHealthResponse(
        cwd=os.getcwd(),
        configured_root=str(configured) if configured is not None else None,
        guard_open=guard.is_open,
        collections=collections,
    )
