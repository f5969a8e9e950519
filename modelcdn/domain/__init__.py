"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from modelcdn.domain.entities import StoredFile
from modelcdn.domain.enums import CollectionKind, ConflictPolicy, MediaType
from modelcdn.domain.exceptions import (
    AdminNotConfiguredException,
    InvalidInputException,
    InvalidPathException,
    MissingInputException,
    ModelCdnException,
    NotFoundException,
    PayloadTooLargeException,
    UnauthorizedException,
    UnsupportedTypeException,
)
from modelcdn.domain.value_objects import (
    IMAGE_KIND,
    MEDIA_KINDS,
    MODEL_KIND,
    VIDEO_KIND,
    FileKind,
)

__all__ = [
    "StoredFile",
    "CollectionKind",
    "ConflictPolicy",
    "MediaType",
    "AdminNotConfiguredException",
    "InvalidInputException",
    "InvalidPathException",
    "MissingInputException",
    "ModelCdnException",
    "NotFoundException",
    "PayloadTooLargeException",
    "UnauthorizedException",
    "UnsupportedTypeException",
    "FileKind",
    "IMAGE_KIND",
    "MEDIA_KINDS",
    "MODEL_KIND",
    "VIDEO_KIND",
]
