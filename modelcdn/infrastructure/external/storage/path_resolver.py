"""Storage root resolution for container and local deployments.

Writes go to the first existing candidate root (container root, then the
working-directory root); the working-directory root is used, and created
lazily, when neither exists. Reads also search a module-relative legacy root
and prefer a candidate that has content over an empty one.

When a single root is configured (STORAGE_ROOT) no probing happens.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import aiofiles.os

from modelcdn.domain.entities import ensure_safe_name
from modelcdn.domain.enums import CollectionKind

if TYPE_CHECKING:
    from modelcdn.core.config import Settings

logger = logging.getLogger(__name__)

# modelcdn/infrastructure/external/storage/path_resolver.py -> <repo>/public
LEGACY_PUBLIC_ROOT = Path(__file__).resolve().parents[4] / "public"


@dataclass(frozen=True)
class CandidateStatus:
    """Diagnostic view of one candidate collection directory."""

    path: str
    exists: bool
    entry_count: int


class PathResolver:
    """Resolve collection directories across an ordered list of candidate roots."""

    def __init__(
        self,
        container_root: str | Path,
        local_root: str | Path,
        legacy_root: str | Path | None = None,
        configured_root: str | Path | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            container_root: Fixed deployment root (e.g. /app/public); tried first.
            local_root: Root relative to the working directory; lazily created.
            legacy_root: Module-relative root tolerated by reads only.
            configured_root: When set, the only root used for reads and writes.
        """
        self.container_root = Path(container_root)
        self.local_root = Path(local_root).resolve()
        self.legacy_root = Path(legacy_root).resolve() if legacy_root else None
        self.configured_root = (
            Path(configured_root).resolve() if configured_root else None
        )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "PathResolver":
        return cls(
            container_root=settings.container_public_root,
            local_root=settings.local_public_root,
            legacy_root=settings.legacy_public_root or LEGACY_PUBLIC_ROOT,
            configured_root=settings.storage_root,
        )

    def write_roots(self) -> list[Path]:
        """Candidate base roots for writes, in search order."""
        if self.configured_root is not None:
            return [self.configured_root]
        return [self.container_root, self.local_root]

    def read_candidates(self, collection: CollectionKind) -> list[Path]:
        """Candidate collection directories for reads, in search order."""
        candidates = [root / collection.value for root in self.write_roots()]
        if self.configured_root is None and self.legacy_root is not None:
            legacy = self.legacy_root / collection.value
            if legacy not in candidates:
                candidates.append(legacy)
        return candidates

    async def resolve_write_dir(self, collection: CollectionKind) -> Path:
        """Return the collection directory to write into (may not exist yet)."""
        roots = self.write_roots()
        for root in roots:
            if await aiofiles.os.path.isdir(root):
                return root / collection.value
        return roots[-1] / collection.value

    async def resolve_read_dir(self, collection: CollectionKind) -> Path | None:
        """Return the directory to list, preferring one with content; None if none exist."""
        fallback: Path | None = None
        for candidate in self.read_candidates(collection):
            if not await aiofiles.os.path.isdir(candidate):
                continue
            try:
                entries = await aiofiles.os.listdir(candidate)
            except OSError as e:
                logger.warning("Cannot read candidate %s: %s", candidate, e)
                continue
            if entries:
                return candidate
            if fallback is None:
                fallback = candidate
        return fallback

    async def locate(self, collection: CollectionKind, name: str) -> Path | None:
        """Return the first candidate path holding a regular file called name.

        Raises:
            InvalidPathException: If name fails the traversal check (before any lookup).
        """
        ensure_safe_name(name)
        for candidate in self.read_candidates(collection):
            path = candidate / name
            if await aiofiles.os.path.isfile(path):
                return path
        return None

    async def describe(self, collection: CollectionKind) -> list[CandidateStatus]:
        """Return existence and entry count for every read candidate."""
        statuses: list[CandidateStatus] = []
        for candidate in self.read_candidates(collection):
            exists = await aiofiles.os.path.isdir(candidate)
            count = 0
            if exists:
                try:
                    count = len(await aiofiles.os.listdir(candidate))
                except OSError:
                    count = 0
            statuses.append(
                CandidateStatus(path=str(candidate), exists=exists, entry_count=count)
            )
        return statuses
