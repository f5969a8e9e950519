"""Filesystem storage: path resolution and collection storage."""

from modelcdn.infrastructure.external.storage.local_storage import (
    LocalCollectionStorage,
)
from modelcdn.infrastructure.external.storage.path_resolver import (
    CandidateStatus,
    PathResolver,
)

__all__ = ["CandidateStatus", "LocalCollectionStorage", "PathResolver"]
