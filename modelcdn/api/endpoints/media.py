"""Media API: list, upload and delete images and videos."""

from fastapi import APIRouter, Depends, Query, Request

from modelcdn.api.dependencies import (
    get_access_guard,
    get_base_url,
    get_delete_service,
    get_query_service,
    get_upload_service,
)
from modelcdn.api.responses import upload_response
from modelcdn.api.upload_body import read_upload_body
from modelcdn.application.dtos.storage import UrlUpload
from modelcdn.application.services.access_guard import AccessGuard
from modelcdn.application.use_cases.storage import (
    CollectionDeleteService,
    CollectionQueryService,
    CollectionUploadService,
)
from modelcdn.core.limiter import limit_delete, limit_upload
from modelcdn.domain.entities import ensure_safe_name
from modelcdn.domain.enums import CollectionKind
from modelcdn.domain.exceptions import InvalidInputException
from modelcdn.schemas.common import ErrorResponse
from modelcdn.schemas.media import MediaItem, MediaListResponse, MediaTypeCounts
from modelcdn.schemas.models import DeleteResponse, UploadResponse

router = APIRouter()

UPLOAD_REALM = "Media CDN Upload API"
DELETE_REALM = "Media CDN Delete API"
INVALID_MEDIA_TYPE = 'Invalid media type. Must be "images" or "videos"'
MEDIA_COLLECTIONS = {CollectionKind.IMAGES.value, CollectionKind.VIDEOS.value}


def _media_collection(value: str) -> CollectionKind:
    if value not in MEDIA_COLLECTIONS:
        raise InvalidInputException(INVALID_MEDIA_TYPE, field="type")
    return CollectionKind(value)


@router.get("", response_model=MediaListResponse, responses={400: {"model": ErrorResponse}})
async def list_media(
    media_type: str | None = Query(None, alias="type", description="images or videos; omit for both"),
    query_svc: CollectionQueryService = Depends(get_query_service),
):
    """List images and videos newest first, with per-type counts."""
    collection = _media_collection(media_type) if media_type else None
    listing = await query_svc.list_media(collection)
    return MediaListResponse(
        media=[MediaItem.from_stored(f) for f in listing.entries],
        count=listing.count,
        types=MediaTypeCounts(images=listing.image_count, videos=listing.video_count),
    )


@router.post(
    "/upload",
    response_model=UploadResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
@limit_upload
async def upload_media(
    request: Request,
    guard: AccessGuard = Depends(get_access_guard),
    upload_svc: CollectionUploadService = Depends(get_upload_service),
    base_url: str = Depends(get_base_url),
):
    """Upload an image or video: multipart ``file`` (+ ``type``) or JSON ``{url, filename?, type?}``.

    Both forms pick a free name (``stem_1.ext``, ...) instead of replacing.
    """
    guard.require(request.headers, UPLOAD_REALM)
    upload = await read_upload_body(request, accept_filename=True, accept_type=True)
    if isinstance(upload, UrlUpload):
        stored = await upload_svc.upload_media_from_url(upload)
        suffix = " from URL"
    else:
        stored = await upload_svc.upload_media_file(upload)
        suffix = ""
    label = stored.media_type.value.capitalize()
    return upload_response(stored, base_url, f"{label} uploaded successfully{suffix}")


@router.delete(
    "/{media_type}/{name:path}",
    response_model=DeleteResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
@limit_delete
async def delete_media(
    request: Request,
    media_type: str,
    name: str,
    guard: AccessGuard = Depends(get_access_guard),
    delete_svc: CollectionDeleteService = Depends(get_delete_service),
):
    """Delete an image or video; ``media_type`` must be images or videos."""
    ensure_safe_name(name)
    collection = _media_collection(media_type)
    guard.require(request.headers, DELETE_REALM)
    result = await delete_svc.delete_file(collection, name)
    return DeleteResponse(
        message=f"File {result.filename} deleted successfully",
        filename=result.filename,
        type=result.collection,
    )
