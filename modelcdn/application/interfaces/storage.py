"""Storage and fetch protocols (DIP).

Implementations: LocalCollectionStorage, HttpRemoteFetcher.
"""

from pathlib import Path
from typing import Protocol

from modelcdn.application.dtos.storage import CollectionScan
from modelcdn.domain.entities import StoredFile
from modelcdn.domain.enums import CollectionKind, ConflictPolicy


class ICollectionStorage(Protocol):
    """Protocol for collection-per-directory file storage."""

    async def scan(self, collection: CollectionKind) -> CollectionScan:
        """Enumerate whitelisted regular files of a collection (unsorted)."""
        ...

    async def save(
        self,
        collection: CollectionKind,
        name: str,
        data: bytes,
        policy: ConflictPolicy,
    ) -> StoredFile:
        """Write data under name (deduped or overwritten per policy)."""
        ...

    async def find(self, collection: CollectionKind, name: str) -> Path | None:
        """Return the path of name in the first candidate root holding it."""
        ...

    async def delete(self, collection: CollectionKind, name: str) -> bool:
        """Delete name. Returns True if deleted, False if not found."""
        ...


class IRemoteFetcher(Protocol):
    """Protocol for fetching the bytes behind a URL."""

    async def fetch(self, url: str) -> bytes:
        """Return the body of a 2xx response; raise RemoteFetchError otherwise."""
        ...
