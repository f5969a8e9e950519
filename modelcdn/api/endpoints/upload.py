"""Legacy upload endpoint (POST /api/upload) kept for existing GLB viewer clients.

Multipart uploads get a free name; JSON ``{url, filename?}`` uploads force
``.glb`` and replace a same-named model.
"""

from fastapi import APIRouter, Depends, Request

from modelcdn.api.dependencies import get_access_guard, get_base_url, get_upload_service
from modelcdn.api.responses import upload_response
from modelcdn.api.upload_body import read_upload_body
from modelcdn.application.dtos.storage import UrlUpload
from modelcdn.application.services.access_guard import AccessGuard
from modelcdn.application.use_cases.storage import CollectionUploadService
from modelcdn.core.limiter import limit_upload
from modelcdn.schemas.common import ErrorResponse
from modelcdn.schemas.models import UploadResponse

router = APIRouter()

UPLOAD_REALM = "GLB Viewer Upload API"


@router.post(
    "/upload",
    response_model=UploadResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
@limit_upload
async def legacy_upload(
    request: Request,
    guard: AccessGuard = Depends(get_access_guard),
    upload_svc: CollectionUploadService = Depends(get_upload_service),
    base_url: str = Depends(get_base_url),
):
    """Upload a model (legacy form of POST /api/models/upload, JSON may carry ``filename``)."""
    guard.require(request.headers, UPLOAD_REALM)
    upload = await read_upload_body(request, accept_filename=True)
    if isinstance(upload, UrlUpload):
        stored = await upload_svc.upload_model_from_url(upload)
        message = "File uploaded successfully from URL"
    else:
        stored = await upload_svc.upload_model_file(upload)
        message = "File uploaded successfully"
    return upload_response(stored, base_url, message)
