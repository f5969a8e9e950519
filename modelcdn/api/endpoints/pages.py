"""HTML pages: landing, admin login, the gated explore pages and per-file view pages.

The explore pages are protected by AdminGateMiddleware, not here. View pages
are public like the files they show.
"""

from urllib.parse import quote

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from modelcdn.api.dependencies import get_query_service
from modelcdn.application.services.validation_gate import resolve_media_kind
from modelcdn.application.use_cases.storage import CollectionQueryService
from modelcdn.core.config import get_settings
from modelcdn.domain.entities import direct_url_for, ensure_safe_name
from modelcdn.domain.enums import CollectionKind
from modelcdn.domain.value_objects import MODEL_KIND
from modelcdn.pages import (
    render_login_page,
    render_media_explore,
    render_media_view,
    render_model_view,
    render_model_viewer,
    render_models_explore,
    render_root_page,
)

router = APIRouter()


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def root() -> HTMLResponse:
    """Landing page with links to the explore pages and API documentation."""
    return HTMLResponse(content=render_root_page(get_settings().app_name))


@router.get("/admin/login", response_class=HTMLResponse, include_in_schema=False)
def login_page(redirect: str | None = Query(None)) -> HTMLResponse:
    """Password form; returns to ``redirect`` (local paths only) after login."""
    return HTMLResponse(content=render_login_page(redirect))


@router.get("/models/explore", response_class=HTMLResponse, include_in_schema=False)
async def explore_models(
    query_svc: CollectionQueryService = Depends(get_query_service),
) -> HTMLResponse:
    listing = await query_svc.list_collection(CollectionKind.MODELS)
    return HTMLResponse(content=render_models_explore(listing.entries, note=listing.error))


@router.get("/media/explore", response_class=HTMLResponse, include_in_schema=False)
async def explore_media(
    query_svc: CollectionQueryService = Depends(get_query_service),
) -> HTMLResponse:
    listing = await query_svc.list_media()
    return HTMLResponse(content=render_media_explore(listing.entries))


@router.get("/models/view/{name:path}", response_class=HTMLResponse, include_in_schema=False)
async def view_model(
    name: str,
    query_svc: CollectionQueryService = Depends(get_query_service),
) -> HTMLResponse:
    """Model page (the ``viewUrl`` of a model); 403/400/404 as for the file itself."""
    served = await query_svc.open_file(MODEL_KIND, name, resource="Model")
    model_url = direct_url_for(CollectionKind.MODELS, name)
    viewer_url = f"/models/viewer/{quote(name)}"
    return HTMLResponse(content=render_model_view(name, model_url, viewer_url, served.size_bytes))


@router.get("/models/viewer/{name:path}", response_class=HTMLResponse, include_in_schema=False)
async def model_viewer(
    name: str,
    query_svc: CollectionQueryService = Depends(get_query_service),
) -> HTMLResponse:
    """Viewer-only page for embedding (the ``viewerUrl`` of a model)."""
    await query_svc.open_file(MODEL_KIND, name, resource="Model")
    return HTMLResponse(content=render_model_viewer(name, direct_url_for(CollectionKind.MODELS, name)))


@router.get("/media/view/{name:path}", response_class=HTMLResponse, include_in_schema=False)
async def view_media(
    name: str,
    query_svc: CollectionQueryService = Depends(get_query_service),
) -> HTMLResponse:
    """Image or video page (the ``viewUrl`` of a media file); the extension picks the collection."""
    ensure_safe_name(name)
    kind = resolve_media_kind(None, name)
    served = await query_svc.open_file(kind, name)
    return HTMLResponse(
        content=render_media_view(
            name, kind.media_type, direct_url_for(kind.collection, name), served.size_bytes
        )
    )
