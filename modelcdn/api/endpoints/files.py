"""Direct file URLs (/models/<name>, /images/<name>, /videos/<name>).

These are the public paths returned as ``path``/``cdnUrl`` in listings and
upload responses.
"""

from fastapi import APIRouter, Depends

from modelcdn.api.dependencies import get_query_service
from modelcdn.api.responses import file_response
from modelcdn.application.use_cases.storage import CollectionQueryService
from modelcdn.domain.value_objects import IMAGE_KIND, MODEL_KIND, VIDEO_KIND
from modelcdn.schemas.common import ErrorResponse

router = APIRouter()

_ERRORS = {400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


@router.get("/models/{name:path}", responses=_ERRORS)
async def serve_model_file(
    name: str,
    query_svc: CollectionQueryService = Depends(get_query_service),
):
    """Serve a model by its collection path."""
    return file_response(await query_svc.open_file(MODEL_KIND, name, resource="Model"))


@router.get("/images/{name:path}", responses=_ERRORS)
async def serve_image(
    name: str,
    query_svc: CollectionQueryService = Depends(get_query_service),
):
    """Serve an image."""
    return file_response(await query_svc.open_file(IMAGE_KIND, name))


@router.get("/videos/{name:path}", responses=_ERRORS)
async def serve_video(
    name: str,
    query_svc: CollectionQueryService = Depends(get_query_service),
):
    """Serve a video."""
    return file_response(await query_svc.open_file(VIDEO_KIND, name))
