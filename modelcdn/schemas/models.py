"""Model API schemas."""

from datetime import datetime

from pydantic import Field

from modelcdn.domain.entities import StoredFile
from modelcdn.schemas.common import CamelModel


class ModelItem(CamelModel):
    """One model in GET /api/models."""

    name: str
    path: str
    url: str
    view_url: str
    viewer_url: str | None = None
    size: int
    modified: datetime

    @classmethod
    def from_stored(cls, stored: StoredFile) -> "ModelItem":
        return cls(
            name=stored.name,
            path=stored.path,
            url=stored.direct_url,
            view_url=stored.view_url,
            viewer_url=stored.viewer_url,
            size=stored.size_bytes,
            modified=stored.modified_at,
        )


class ModelListResponse(CamelModel):
    """Response for GET /api/models. ``error`` is set when no models directory exists."""

    models: list[ModelItem]
    count: int
    error: str | None = None
    searched_paths: list[str] | None = Field(default=None)


class UploadResponse(CamelModel):
    """Response for model and media uploads.

    ``cdn_url``/``view_url``/``viewer_url`` are absolute when a base URL is
    known (NEXT_PUBLIC_BASE_URL or the request Origin); ``file_url`` is always
    path-only.
    """

    success: bool = True
    filename: str
    type: str
    size: int
    message: str
    cdn_url: str
    view_url: str
    viewer_url: str | None = None
    file_url: str


class DeleteResponse(CamelModel):
    """Response for model and media deletes."""

    success: bool = True
    message: str
    filename: str
    type: str
