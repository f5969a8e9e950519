"""Unit tests for the storage use cases (query, upload, delete)."""

import os
from pathlib import Path

import pytest

from modelcdn.application.dtos.storage import DirectUpload, UrlUpload
from modelcdn.application.use_cases.storage import (
    CollectionDeleteService,
    CollectionQueryService,
    CollectionUploadService,
)
from modelcdn.domain.enums import CollectionKind
from modelcdn.domain.exceptions import (
    InvalidInputException,
    InvalidPathException,
    NotFoundException,
    PayloadTooLargeException,
    UnsupportedTypeException,
)
from modelcdn.domain.value_objects import IMAGE_KIND, MODEL_KIND
from modelcdn.infrastructure.exceptions import RemoteFetchError
from modelcdn.infrastructure.external.storage import LocalCollectionStorage, PathResolver

MB = 1024 * 1024


class FakeFetcher:
    """In-memory IRemoteFetcher recording every URL it is asked for."""

    def __init__(self, bodies: dict[str, bytes]) -> None:
        self.bodies = bodies
        self.requested: list[str] = []

    async def fetch(self, url: str) -> bytes:
        self.requested.append(url)
        if url not in self.bodies:
            raise RemoteFetchError(url, "HTTP 404")
        return self.bodies[url]


@pytest.fixture
def local_root(tmp_path: Path) -> Path:
    return tmp_path / "public"


@pytest.fixture
def storage(tmp_path: Path, local_root: Path) -> LocalCollectionStorage:
    return LocalCollectionStorage(
        PathResolver(tmp_path / "absent", local_root, legacy_root=tmp_path / "legacy")
    )


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher({})


@pytest.fixture
def uploads(storage: LocalCollectionStorage, fetcher: FakeFetcher) -> CollectionUploadService:
    return CollectionUploadService(storage, fetcher)


@pytest.fixture
def queries(storage: LocalCollectionStorage) -> CollectionQueryService:
    return CollectionQueryService(storage)


class TestModelUploads:
    async def test_multipart_name_is_sanitized(self, uploads: CollectionUploadService) -> None:
        stored = await uploads.upload_model_file(DirectUpload(b"glTF", "my robot.glb"))
        assert stored.name == "my_robot.glb"
        assert stored.collection == CollectionKind.MODELS

    async def test_multipart_duplicates_are_deduped(self, uploads: CollectionUploadService) -> None:
        first = await uploads.upload_model_file(DirectUpload(b"a", "foo.glb"))
        second = await uploads.upload_model_file(DirectUpload(b"b", "foo.glb"))
        assert (first.name, second.name) == ("foo.glb", "foo_1.glb")

    async def test_wrong_extension_rejected_before_write(
        self, uploads: CollectionUploadService, local_root: Path
    ) -> None:
        with pytest.raises(UnsupportedTypeException):
            await uploads.upload_model_file(DirectUpload(b"x", "robot.obj"))
        assert not (local_root / "models").exists()

    async def test_oversized_model_rejected(self, uploads: CollectionUploadService) -> None:
        with pytest.raises(PayloadTooLargeException, match="100MB limit for model"):
            await uploads.upload_model_file(DirectUpload(b"\0" * (100 * MB + 1), "big.glb"))

    async def test_url_upload_overwrites(
        self, uploads: CollectionUploadService, fetcher: FakeFetcher, local_root: Path
    ) -> None:
        url = "https://assets.test/models/robot.glb"
        fetcher.bodies[url] = b"first"
        await uploads.upload_model_from_url(UrlUpload(url))
        fetcher.bodies[url] = b"second!"

        stored = await uploads.upload_model_from_url(UrlUpload(url))

        assert stored.name == "robot.glb"
        assert (local_root / "models" / "robot.glb").read_bytes() == b"second!"
        assert os.listdir(local_root / "models") == ["robot.glb"]

    async def test_url_upload_forces_glb(self, uploads: CollectionUploadService, fetcher: FakeFetcher) -> None:
        url = "https://assets.test/download?id=7"
        fetcher.bodies[url] = b"glTF"
        stored = await uploads.upload_model_from_url(UrlUpload(url))
        assert stored.name == "download.glb"

    async def test_url_upload_bare_path_named_upload(
        self, uploads: CollectionUploadService, fetcher: FakeFetcher
    ) -> None:
        url = "https://assets.test/"
        fetcher.bodies[url] = b"glTF"
        stored = await uploads.upload_model_from_url(UrlUpload(url))
        assert stored.name == "upload.glb"

    async def test_invalid_url_never_fetched(
        self, uploads: CollectionUploadService, fetcher: FakeFetcher
    ) -> None:
        with pytest.raises(InvalidInputException):
            await uploads.upload_model_from_url(UrlUpload("ftp://assets.test/robot.glb"))
        assert fetcher.requested == []

    async def test_fetch_failure_propagates(self, uploads: CollectionUploadService) -> None:
        with pytest.raises(RemoteFetchError):
            await uploads.upload_model_from_url(UrlUpload("https://assets.test/missing.glb"))


class TestMediaUploads:
    async def test_type_inferred_from_extension(self, uploads: CollectionUploadService) -> None:
        stored = await uploads.upload_media_file(DirectUpload(b"png", "cat.png"))
        assert stored.collection == CollectionKind.IMAGES

    async def test_declared_type_must_match_extension(self, uploads: CollectionUploadService) -> None:
        with pytest.raises(UnsupportedTypeException, match="Invalid file extension for video"):
            await uploads.upload_media_file(DirectUpload(b"png", "cat.png", declared_type="video"))

    async def test_url_upload_forces_declared_extension(
        self, uploads: CollectionUploadService, fetcher: FakeFetcher
    ) -> None:
        url = "https://assets.test/clip.png"
        fetcher.bodies[url] = b"video-bytes"
        stored = await uploads.upload_media_from_url(UrlUpload(url, declared_type="video"))
        assert stored.name == "clip.png.mp4"
        assert stored.collection == CollectionKind.VIDEOS

    async def test_url_upload_dedupes(self, uploads: CollectionUploadService, fetcher: FakeFetcher) -> None:
        url = "https://assets.test/cat.jpg"
        fetcher.bodies[url] = b"jpg"
        first = await uploads.upload_media_from_url(UrlUpload(url))
        second = await uploads.upload_media_from_url(UrlUpload(url))
        assert (first.name, second.name) == ("cat.jpg", "cat_1.jpg")

    async def test_unknown_type_rejected_before_fetch(
        self, uploads: CollectionUploadService, fetcher: FakeFetcher
    ) -> None:
        with pytest.raises(UnsupportedTypeException):
            await uploads.upload_media_from_url(UrlUpload("https://assets.test/notes.txt"))
        assert fetcher.requested == []


class TestQueries:
    async def test_missing_directory_reports_error(self, queries: CollectionQueryService) -> None:
        listing = await queries.list_collection(CollectionKind.MODELS)
        assert listing.count == 0
        assert listing.error == "No models directory found"
        assert listing.searched_paths

    async def test_listing_is_newest_first(
        self, uploads: CollectionUploadService, queries: CollectionQueryService, local_root: Path
    ) -> None:
        for name in ["old.glb", "new.glb", "mid.glb"]:
            await uploads.upload_model_file(DirectUpload(b"x", name))
        os.utime(local_root / "models" / "old.glb", (1_000, 1_000))
        os.utime(local_root / "models" / "mid.glb", (2_000, 2_000))
        os.utime(local_root / "models" / "new.glb", (3_000, 3_000))

        listing = await queries.list_collection(CollectionKind.MODELS)

        assert [f.name for f in listing.entries] == ["new.glb", "mid.glb", "old.glb"]
        assert listing.error is None

    async def test_media_listing_counts_and_filter(
        self, uploads: CollectionUploadService, queries: CollectionQueryService
    ) -> None:
        await uploads.upload_media_file(DirectUpload(b"a", "a.png"))
        await uploads.upload_media_file(DirectUpload(b"b", "b.jpg"))
        await uploads.upload_media_file(DirectUpload(b"c", "c.mp4"))

        combined = await queries.list_media()
        videos = await queries.list_media(CollectionKind.VIDEOS)

        assert (combined.count, combined.image_count, combined.video_count) == (3, 2, 1)
        assert [f.name for f in videos.entries] == ["c.mp4"]
        assert videos.image_count == 0

    async def test_open_file_checks_order(self, queries: CollectionQueryService) -> None:
        with pytest.raises(InvalidPathException):
            await queries.open_file(MODEL_KIND, "../x.txt")
        with pytest.raises(UnsupportedTypeException):
            await queries.open_file(MODEL_KIND, "x.txt")
        with pytest.raises(NotFoundException, match="Model not found"):
            await queries.open_file(MODEL_KIND, "x.glb", resource="Model")

    async def test_open_file_reports_type_and_size(
        self, uploads: CollectionUploadService, queries: CollectionQueryService
    ) -> None:
        await uploads.upload_media_file(DirectUpload(b"12345", "cat.png"))
        served = await queries.open_file(IMAGE_KIND, "cat.png")
        assert served.content_type == "image/png"
        assert served.size_bytes == 5


class TestDeletes:
    async def test_delete_then_not_found(
        self, uploads: CollectionUploadService, storage: LocalCollectionStorage
    ) -> None:
        deletes = CollectionDeleteService(storage)
        await uploads.upload_model_file(DirectUpload(b"x", "robot.glb"))

        result = await deletes.delete_file(CollectionKind.MODELS, "robot.glb", resource="Model")

        assert result.filename == "robot.glb"
        assert result.collection == "models"
        with pytest.raises(NotFoundException):
            await deletes.delete_file(CollectionKind.MODELS, "robot.glb")
