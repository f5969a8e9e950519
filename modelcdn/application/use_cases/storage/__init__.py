"""Storage use cases."""

from modelcdn.application.use_cases.storage.storage_operations import (
    CollectionDeleteService,
    CollectionQueryService,
    CollectionUploadService,
)

__all__ = [
    "CollectionDeleteService",
    "CollectionQueryService",
    "CollectionUploadService",
]
