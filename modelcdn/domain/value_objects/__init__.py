"""Domain value objects (immutable, self-validating)."""

from modelcdn.domain.value_objects.core import (
    IMAGE_KIND,
    MEDIA_KINDS,
    MODEL_KIND,
    VIDEO_KIND,
    FileKind,
    file_extension,
    kind_for_collection,
)

__all__ = [
    "FileKind",
    "IMAGE_KIND",
    "MEDIA_KINDS",
    "MODEL_KIND",
    "VIDEO_KIND",
    "file_extension",
    "kind_for_collection",
]
