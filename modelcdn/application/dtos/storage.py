"""DTOs for storage use cases (no dependency on HTTP or the filesystem layer)."""

from dataclasses import dataclass, field
from pathlib import Path

from modelcdn.domain.entities import StoredFile


@dataclass(frozen=True)
class DirectUpload:
    """Bytes received in a multipart part, named by the client."""

    data: bytes
    suggested_name: str
    declared_type: str | None = None


@dataclass(frozen=True)
class UrlUpload:
    """A remote URL to fetch; the name falls back to the URL basename."""

    source_url: str
    suggested_name: str | None = None
    declared_type: str | None = None


@dataclass(frozen=True)
class UploadResult:
    """Stored file plus the base used for absolute URLs ('' when unknown)."""

    file: StoredFile
    base_url: str = ""

    @property
    def cdn_url(self) -> str:
        return f"{self.base_url}{self.file.direct_url}"

    @property
    def view_url(self) -> str:
        return f"{self.base_url}{self.file.view_url}"

    @property
    def viewer_url(self) -> str | None:
        if self.file.viewer_url is None:
            return None
        return f"{self.base_url}{self.file.viewer_url}"


@dataclass(frozen=True)
class CollectionScan:
    """Raw result of enumerating one collection (directory is None when none exists)."""

    directory: Path | None
    files: list[StoredFile]
    searched_paths: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ListingResult:
    """Listing read-model: newest first, with a diagnostic error when no directory exists."""

    entries: list[StoredFile]
    directory: str | None = None
    error: str | None = None
    searched_paths: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class MediaListing:
    """Combined image/video listing with per-type counts."""

    entries: list[StoredFile]
    image_count: int
    video_count: int

    @property
    def count(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class DeleteResult:
    """Outcome of a successful delete."""

    filename: str
    collection: str


@dataclass(frozen=True)
class ServedFile:
    """A located file ready to stream."""

    path: Path
    content_type: str
    size_bytes: int
