"""StoredFile domain entity.

Represents a file resident in a collection directory, independent of how
the directory was located. Size and mtime come from the filesystem at read
time and are never cached.
"""

from dataclasses import dataclass
from datetime import datetime
from urllib.parse import quote

from modelcdn.domain.enums import CollectionKind, MediaType
from modelcdn.domain.exceptions import InvalidPathException
from modelcdn.domain.value_objects.core import kind_for_collection


def is_safe_name(name: str) -> bool:
    """Return False for empty names and names containing '..', '/' or '\\'."""
    if not name:
        return False
    return ".." not in name and "/" not in name and "\\" not in name


def ensure_safe_name(name: str) -> str:
    """Return name unchanged; raise InvalidPathException if it fails the traversal check."""
    if not is_safe_name(name):
        raise InvalidPathException(name)
    return name


def direct_url_for(collection: CollectionKind, name: str) -> str:
    """Route serving the bytes of name: /api/models/<name> for models, /<collection>/<name> otherwise."""
    if collection == CollectionKind.MODELS:
        return f"/api/models/{quote(name)}"
    return f"/{collection.value}/{quote(name)}"


@dataclass
class StoredFile:
    """Domain entity for a stored file (name unique within its collection).

    Derived URLs are computed, not stored: ``direct_url`` is the route that
    serves the bytes and ``view_url``/``viewer_url`` wrap it in a page.
    """

    name: str
    collection: CollectionKind
    size_bytes: int
    modified_at: datetime

    def __post_init__(self) -> None:
        ensure_safe_name(self.name)
        if self.size_bytes < 0:
            raise ValueError("size_bytes must be >= 0")

    @property
    def media_type(self) -> MediaType:
        return kind_for_collection(self.collection).media_type

    @property
    def quoted_name(self) -> str:
        return quote(self.name)

    @property
    def path(self) -> str:
        """Collection-relative public path (e.g. /images/cat.png)."""
        return f"/{self.collection.value}/{self.name}"

    @property
    def direct_url(self) -> str:
        return direct_url_for(self.collection, self.name)

    @property
    def view_url(self) -> str:
        if self.collection == CollectionKind.MODELS:
            return f"/models/view/{self.quoted_name}"
        return f"/media/view/{self.quoted_name}"

    @property
    def viewer_url(self) -> str | None:
        if self.collection == CollectionKind.MODELS:
            return f"/models/viewer/{self.quoted_name}"
        return None
