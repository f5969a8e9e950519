"""Storage operations: query (list/serve), upload and delete with single responsibilities."""

from __future__ import annotations

import logging

import aiofiles.os

from modelcdn.application.dtos.storage import (
    DeleteResult,
    DirectUpload,
    ListingResult,
    MediaListing,
    ServedFile,
    UrlUpload,
)
from modelcdn.application.interfaces.storage import ICollectionStorage, IRemoteFetcher
from modelcdn.application.services.filename_policy import (
    ensure_extension,
    sanitize_filename,
    url_upload_name,
    validate_source_url,
)
from modelcdn.application.services.validation_gate import (
    check_extension,
    check_size,
    resolve_media_kind,
)
from modelcdn.domain.entities import StoredFile, ensure_safe_name
from modelcdn.domain.enums import CollectionKind, ConflictPolicy
from modelcdn.domain.exceptions import NotFoundException
from modelcdn.domain.value_objects import MODEL_KIND, FileKind
from modelcdn.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)

MEDIA_COLLECTIONS = (CollectionKind.IMAGES, CollectionKind.VIDEOS)


def _newest_first(files: list[StoredFile]) -> list[StoredFile]:
    # sorted() is stable with reverse=True, so equal mtimes keep listing order
    return sorted(files, key=lambda f: f.modified_at, reverse=True)


class CollectionQueryService:
    """Read side: listings and file lookup for serving. Never needs the access guard."""

    def __init__(self, storage: ICollectionStorage) -> None:
        self.storage = storage

    @traced("storage.list_collection")
    async def list_collection(self, collection: CollectionKind) -> ListingResult:
        """List one collection newest first; a missing directory is an empty result with an error note."""
        scan = await self.storage.scan(collection)
        if scan.directory is None:
            logger.warning(
                "No %s directory found; searched %s",
                collection.value,
                scan.searched_paths,
            )
            return ListingResult(
                entries=[],
                error=f"No {collection.value} directory found",
                searched_paths=scan.searched_paths,
            )
        return ListingResult(
            entries=_newest_first(scan.files),
            directory=str(scan.directory),
            searched_paths=scan.searched_paths,
        )

    @traced("storage.list_media")
    async def list_media(self, collection: CollectionKind | None = None) -> MediaListing:
        """List images and videos (or just one of them), newest first, with per-type counts."""
        collections = (collection,) if collection is not None else MEDIA_COLLECTIONS
        files: list[StoredFile] = []
        for kind in collections:
            scan = await self.storage.scan(kind)
            files.extend(scan.files)
        entries = _newest_first(files)
        return MediaListing(
            entries=entries,
            image_count=sum(1 for f in entries if f.collection == CollectionKind.IMAGES),
            video_count=sum(1 for f in entries if f.collection == CollectionKind.VIDEOS),
        )

    @traced("storage.open_file")
    async def open_file(
        self, kind: FileKind, name: str, resource: str = "File"
    ) -> ServedFile:
        """Locate a file for serving.

        Order: traversal check (InvalidPath), extension check (UnsupportedType),
        lookup across candidate roots (NotFound).
        """
        ensure_safe_name(name)
        check_extension(kind, name)
        path = await self.storage.find(kind.collection, name)
        if path is None:
            raise NotFoundException(resource, name)
        size = await aiofiles.os.path.getsize(path)
        return ServedFile(path=path, content_type=kind.content_type_for(name), size_bytes=size)


class CollectionUploadService:
    """Write side: gate, name, fetch (for URLs) and persist.

    Multipart uploads and media URL uploads dedupe; model URL uploads overwrite.
    """

    def __init__(
        self,
        storage: ICollectionStorage,
        fetcher: IRemoteFetcher | None = None,
    ) -> None:
        self.storage = storage
        self.fetcher = fetcher

    async def _fetch(self, url: str) -> bytes:
        if self.fetcher is None:
            raise RuntimeError("URL uploads require a remote fetcher")
        return await self.fetcher.fetch(url)

    async def _store_direct(self, kind: FileKind, upload: DirectUpload) -> StoredFile:
        name = sanitize_filename(upload.suggested_name)
        check_extension(kind, name)
        check_size(kind, len(upload.data))
        add_span_attributes(size_bytes=len(upload.data))
        return await self.storage.save(
            kind.collection, name, upload.data, ConflictPolicy.DEDUPE
        )

    @traced("storage.upload_model_file")
    async def upload_model_file(self, upload: DirectUpload) -> StoredFile:
        """Store a multipart model upload (.glb/.gltf, 100MB, deduped name)."""
        return await self._store_direct(MODEL_KIND, upload)

    @traced("storage.upload_media_file")
    async def upload_media_file(self, upload: DirectUpload) -> StoredFile:
        """Store a multipart media upload; declared type wins over the extension."""
        kind = resolve_media_kind(upload.declared_type, upload.suggested_name)
        return await self._store_direct(kind, upload)

    @traced("storage.upload_model_from_url")
    async def upload_model_from_url(self, upload: UrlUpload) -> StoredFile:
        """Fetch a model and write it under its URL-derived name, replacing any same-named file."""
        url = validate_source_url(upload.source_url)
        name = ensure_extension(url_upload_name(url, upload.suggested_name), MODEL_KIND)
        data = await self._fetch(url)
        check_size(MODEL_KIND, len(data))
        return await self.storage.save(
            MODEL_KIND.collection, name, data, ConflictPolicy.OVERWRITE
        )

    @traced("storage.upload_media_from_url")
    async def upload_media_from_url(self, upload: UrlUpload) -> StoredFile:
        """Fetch an image or video; the type is resolved before fetching, the name is deduped."""
        url = validate_source_url(upload.source_url)
        base_name = url_upload_name(url, upload.suggested_name)
        kind = resolve_media_kind(upload.declared_type, base_name)
        name = ensure_extension(base_name, kind)
        data = await self._fetch(url)
        check_size(kind, len(data))
        return await self.storage.save(kind.collection, name, data, ConflictPolicy.DEDUPE)


class CollectionDeleteService:
    """Delete side. Callers check the name and the access guard first."""

    def __init__(self, storage: ICollectionStorage) -> None:
        self.storage = storage

    @traced("storage.delete_file")
    async def delete_file(
        self, collection: CollectionKind, name: str, resource: str = "File"
    ) -> DeleteResult:
        """Delete name from the collection; NotFound when no candidate root holds it."""
        ensure_safe_name(name)
        if not await self.storage.delete(collection, name):
            raise NotFoundException(resource, name)
        return DeleteResult(
            filename=name,
            collection=collection.value,
        )
