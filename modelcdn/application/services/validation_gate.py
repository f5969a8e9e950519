"""Validation gate: whitelist, type resolution and size ceilings.

Every check raises before anything touches the disk.
"""

from modelcdn.domain.enums import MediaType
from modelcdn.domain.exceptions import (
    PayloadTooLargeException,
    UnsupportedTypeException,
)
from modelcdn.domain.value_objects import MEDIA_KINDS, MODEL_KIND, FileKind

UNSUPPORTED_MEDIA_MESSAGE = (
    "Unsupported file type. Supported: images (jpg, png, gif, webp, svg) "
    "and videos (mp4, webm, mov)"
)

# Declared ``type`` values accepted for media: singular or collection name
_DECLARED_ALIASES: dict[str, MediaType] = {
    "image": MediaType.IMAGE,
    "images": MediaType.IMAGE,
    "video": MediaType.VIDEO,
    "videos": MediaType.VIDEO,
}


def resolve_media_kind(declared_type: str | None, filename: str) -> FileKind:
    """Return the media kind for an upload.

    The declared type wins when present; otherwise the extension decides.

    Raises:
        UnsupportedTypeException: Declared type unknown, or no kind accepts the extension.
    """
    if declared_type:
        media_type = _DECLARED_ALIASES.get(declared_type.strip().lower())
        if media_type is None:
            raise UnsupportedTypeException(
                UNSUPPORTED_MEDIA_MESSAGE,
                allowed=[MediaType.IMAGE.value, MediaType.VIDEO.value],
            )
        return next(kind for kind in MEDIA_KINDS if kind.media_type == media_type)
    for kind in MEDIA_KINDS:
        if kind.accepts(filename):
            return kind
    raise UnsupportedTypeException(
        UNSUPPORTED_MEDIA_MESSAGE,
        allowed=[ext for kind in MEDIA_KINDS for ext in kind.extensions],
    )


def check_extension(kind: FileKind, filename: str) -> None:
    """Raise UnsupportedTypeException if filename's extension is not whitelisted for kind."""
    if kind.accepts(filename):
        return
    allowed = ", ".join(kind.extensions)
    if kind is MODEL_KIND:
        message = f"Invalid file type. Allowed: {allowed}"
    else:
        message = f"Invalid file extension for {kind.media_type.value}. Allowed: {allowed}"
    raise UnsupportedTypeException(message, allowed=list(kind.extensions))


def check_size(kind: FileKind, size: int) -> None:
    """Raise PayloadTooLargeException if size exceeds the kind's ceiling."""
    if size > kind.max_bytes:
        raise PayloadTooLargeException(kind.media_type.value, size, kind.max_bytes)
