"""Model API: list, upload (multipart or URL), serve and delete GLB/GLTF files."""

from fastapi import APIRouter, Depends, Request, Response

from modelcdn.api.dependencies import (
    get_access_guard,
    get_base_url,
    get_delete_service,
    get_query_service,
    get_upload_service,
)
from modelcdn.api.responses import file_response, upload_response
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
from modelcdn.domain.value_objects import MODEL_KIND
from modelcdn.schemas.common import ErrorResponse
from modelcdn.schemas.models import (
    DeleteResponse,
    ModelItem,
    ModelListResponse,
    UploadResponse,
)

router = APIRouter()

UPLOAD_REALM = "Model Upload API"


@router.get("", response_model=ModelListResponse, response_model_exclude_none=True)
async def list_models(
    response: Response,
    query_svc: CollectionQueryService = Depends(get_query_service),
):
    """List stored models newest first. A missing directory yields an empty list and ``error``."""
    listing = await query_svc.list_collection(CollectionKind.MODELS)
    response.headers["Access-Control-Allow-Origin"] = "*"
    return ModelListResponse(
        models=[ModelItem.from_stored(f) for f in listing.entries],
        count=listing.count,
        error=listing.error,
        searched_paths=listing.searched_paths if listing.error else None,
    )


@router.post(
    "/upload",
    response_model=UploadResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
@limit_upload
async def upload_model(
    request: Request,
    guard: AccessGuard = Depends(get_access_guard),
    upload_svc: CollectionUploadService = Depends(get_upload_service),
    base_url: str = Depends(get_base_url),
):
    """Upload a model: multipart ``file`` (deduped name) or JSON ``{url}`` (replaces a same-named model)."""
    guard.require(request.headers, UPLOAD_REALM)
    upload = await read_upload_body(request)
    if isinstance(upload, UrlUpload):
        stored = await upload_svc.upload_model_from_url(upload)
        message = f"Model '{stored.name}' uploaded successfully from URL."
    else:
        stored = await upload_svc.upload_model_file(upload)
        message = f"Model '{stored.name}' uploaded successfully."
    return upload_response(stored, base_url, message)


@router.get("/{name:path}", responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}})
async def serve_model(
    name: str,
    query_svc: CollectionQueryService = Depends(get_query_service),
):
    """Serve model bytes (model/gltf-binary or model/gltf+json), cacheable for a year."""
    served = await query_svc.open_file(MODEL_KIND, name, resource="Model")
    return file_response(served)


@router.delete(
    "/{name:path}",
    response_model=DeleteResponse,
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
@limit_delete
async def delete_model(
    request: Request,
    name: str,
    guard: AccessGuard = Depends(get_access_guard),
    delete_svc: CollectionDeleteService = Depends(get_delete_service),
):
    """Delete a model. The name is checked for traversal before the key."""
    ensure_safe_name(name)
    guard.require(request.headers, UPLOAD_REALM)
    result = await delete_svc.delete_file(CollectionKind.MODELS, name, resource="Model")
    return DeleteResponse(
        message=f"Model {result.filename} deleted successfully",
        filename=result.filename,
        type=result.collection,
    )
