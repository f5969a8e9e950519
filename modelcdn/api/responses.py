"""Builders shared by the upload and serve routes."""

from fastapi.responses import FileResponse

from modelcdn.application.dtos.storage import ServedFile, UploadResult
from modelcdn.domain.entities import StoredFile
from modelcdn.schemas.models import UploadResponse

IMMUTABLE_CACHE = "public, max-age=31536000, immutable"


def upload_response(stored: StoredFile, base_url: str, message: str) -> UploadResponse:
    result = UploadResult(file=stored, base_url=base_url)
    return UploadResponse(
        filename=stored.name,
        type=stored.media_type.value,
        size=stored.size_bytes,
        message=message,
        cdn_url=result.cdn_url,
        view_url=result.view_url,
        viewer_url=result.viewer_url,
        file_url=stored.direct_url,
    )


def file_response(served: ServedFile) -> FileResponse:
    """Stream a stored file with long-lived caching and open CORS."""
    return FileResponse(
        served.path,
        media_type=served.content_type,
        headers={
            "Cache-Control": IMMUTABLE_CACHE,
            "Access-Control-Allow-Origin": "*",
        },
    )
