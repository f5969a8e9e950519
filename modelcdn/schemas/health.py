"""Health check API schemas."""

from pydantic import BaseModel, Field

from modelcdn.schemas.common import CamelModel


class HealthResponse(BaseModel):
    """Response for GET /api/health (liveness)."""

    status: str = Field(default="ok", description="Service status")


class CandidateRootStatus(CamelModel):
    """One candidate directory for a collection."""

    path: str
    exists: bool
    entry_count: int


class CollectionStorageStatus(CamelModel):
    """Where a collection is read from and written to, plus every candidate searched."""

    collection: str
    read_directory: str | None
    write_directory: str
    candidates: list[CandidateRootStatus]


class StorageHealthResponse(CamelModel):
    """Response for GET /api/health/storage."""

    status: str = "ok"
    cwd: str
    configured_root: str | None = None
    guard_open: bool
    collections: list[CollectionStorageStatus]
