"""Media API schemas."""

from datetime import datetime

from pydantic import BaseModel

from modelcdn.domain.entities import StoredFile
from modelcdn.schemas.common import CamelModel


class MediaItem(CamelModel):
    """One image or video in GET /api/media."""

    name: str
    type: str
    path: str
    url: str
    view_url: str
    size: int
    modified: datetime

    @classmethod
    def from_stored(cls, stored: StoredFile) -> "MediaItem":
        return cls(
            name=stored.name,
            type=stored.media_type.value,
            path=stored.path,
            url=stored.direct_url,
            view_url=stored.view_url,
            size=stored.size_bytes,
            modified=stored.modified_at,
        )


class MediaTypeCounts(BaseModel):
    images: int
    videos: int


class MediaListResponse(CamelModel):
    """Response for GET /api/media."""

    media: list[MediaItem]
    count: int
    types: MediaTypeCounts
