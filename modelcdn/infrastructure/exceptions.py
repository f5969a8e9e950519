"""Infrastructure exceptions for storage and outbound fetch operations.

These extend ModelCdnException so presentation can map them to HTTP
responses consistently. Storage errors all share STORAGE_FAILURE (500);
nothing is retried.
"""

from modelcdn.domain.exceptions import ModelCdnException


class StorageException(ModelCdnException):
    """Base exception for storage operations."""


class StorageWriteError(StorageException):
    """Writing a file failed, including a failed post-write existence check."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(
            "Failed to save file to disk. Check permissions.",
            "STORAGE_FAILURE",
            {"operation": "write", "file_path": file_path, "reason": reason},
        )


class StorageReadError(StorageException):
    """Listing or reading a collection failed."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to read from storage: {file_path}",
            "STORAGE_FAILURE",
            {"operation": "read", "file_path": file_path, "reason": reason},
        )


class StorageDeleteError(StorageException):
    """File deletion failed."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(
            "Failed to delete file",
            "STORAGE_FAILURE",
            {"operation": "delete", "file_path": file_path, "reason": reason},
        )


class RemoteFetchError(ModelCdnException):
    """Remote URL was unreachable or answered with a non-2xx status."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(
            "Failed to fetch file from URL",
            "UPSTREAM_FETCH_FAILED",
            {"url": url, "reason": reason},
        )
