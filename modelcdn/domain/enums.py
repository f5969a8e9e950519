"""Domain enumerations for modelcdn.

Enums represent fixed sets of domain values (collections, media types,
naming-conflict policies).
"""

from enum import Enum


class CollectionKind(str, Enum):
    """On-disk collection a stored file lives in.

    Each value is also the directory name under a storage root.
    """

    MODELS = "models"
    IMAGES = "images"
    VIDEOS = "videos"

    @classmethod
    def values(cls) -> list[str]:
        """Return all collection names as strings.

        Returns:
            List of enum value strings (e.g. for validation messages).
        """
        return [kind.value for kind in cls]


class MediaType(str, Enum):
    """Logical type of a stored file (what callers declare as ``type``)."""

    MODEL = "model"
    IMAGE = "image"
    VIDEO = "video"

    @classmethod
    def values(cls) -> list[str]:
        return [media_type.value for media_type in cls]


class ConflictPolicy(str, Enum):
    """What an upload does when the target name is already taken.

    DEDUPE picks ``stem_1.ext``, ``stem_2.ext``, ...; OVERWRITE replaces the
    existing file (last writer wins).
    """

    DEDUPE = "dedupe"
    OVERWRITE = "overwrite"
