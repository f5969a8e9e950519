"""Domain value objects for modelcdn.

FileKind bundles everything the service knows about one type of stored
file: its collection directory, accepted extensions and size ceiling.
"""

import mimetypes
import os
from dataclasses import dataclass
from typing import ClassVar

from modelcdn.domain.enums import CollectionKind, MediaType

_MB = 1024 * 1024


def file_extension(filename: str) -> str:
    """Return the lowercased extension of filename including the dot ('' if none)."""
    return os.path.splitext(filename)[1].lower()


@dataclass(frozen=True)
class FileKind:
    """Value object for an accepted file type (SRP: whitelist and ceiling).

    The first entry of ``extensions`` is the canonical extension appended
    when a URL-sourced name lacks a whitelisted one.
    """

    media_type: MediaType
    collection: CollectionKind
    extensions: tuple[str, ...]
    max_bytes: int

    CONTENT_TYPE_OVERRIDES: ClassVar[dict[str, str]] = {
        ".glb": "model/gltf-binary",
        ".gltf": "model/gltf+json",
    }

    def __post_init__(self) -> None:
        if not self.extensions:
            raise ValueError("FileKind requires at least one extension")
        if self.max_bytes <= 0:
            raise ValueError("FileKind max_bytes must be positive")

    @property
    def canonical_extension(self) -> str:
        return self.extensions[0]

    @property
    def max_megabytes(self) -> int:
        return self.max_bytes // _MB

    def accepts(self, filename: str) -> bool:
        """Return True if filename's extension is in this kind's whitelist."""
        return file_extension(filename) in self.extensions

    def content_type_for(self, filename: str) -> str:
        """Return the Content-Type to serve filename with."""
        ext = file_extension(filename)
        if ext in self.CONTENT_TYPE_OVERRIDES:
            return self.CONTENT_TYPE_OVERRIDES[ext]
        guessed, _ = mimetypes.guess_type(filename)
        return guessed or "application/octet-stream"


MODEL_KIND = FileKind(
    media_type=MediaType.MODEL,
    collection=CollectionKind.MODELS,
    extensions=(".glb", ".gltf"),
    max_bytes=100 * _MB,
)
IMAGE_KIND = FileKind(
    media_type=MediaType.IMAGE,
    collection=CollectionKind.IMAGES,
    extensions=(".jpg", ".jpeg", ".png", ".gif", ".webp", ".svg", ".bmp", ".ico"),
    max_bytes=20 * _MB,
)
VIDEO_KIND = FileKind(
    media_type=MediaType.VIDEO,
    collection=CollectionKind.VIDEOS,
    extensions=(".mp4", ".webm", ".mov", ".avi", ".mkv", ".ogg"),
    max_bytes=500 * _MB,
)

MEDIA_KINDS: tuple[FileKind, ...] = (IMAGE_KIND, VIDEO_KIND)

_KINDS_BY_COLLECTION: dict[CollectionKind, FileKind] = {
    kind.collection: kind for kind in (MODEL_KIND, IMAGE_KIND, VIDEO_KIND)
}


def kind_for_collection(collection: CollectionKind) -> FileKind:
    """Return the FileKind stored in the given collection."""
    return _KINDS_BY_COLLECTION[collection]
