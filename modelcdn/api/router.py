"""Router aggregation.

``api_router`` carries the JSON API under /api. ``site_router`` carries the
HTML pages followed by the direct file URLs; pages come first so
/models/explore and the /models/view/ and /models/viewer/ pages are not taken
for file names (those files stay reachable under /api/models/).
"""

from fastapi import APIRouter

from modelcdn.api.endpoints import admin, files, health, media, models, pages, upload

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(models.router, prefix="/models", tags=["models"])
api_router.include_router(media.router, prefix="/media", tags=["media"])
api_router.include_router(upload.router, tags=["legacy"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])

site_router = APIRouter()

site_router.include_router(pages.router)
site_router.include_router(files.router, tags=["files"])
