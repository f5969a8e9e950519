"""Unit tests for StoredFile, the traversal check and FileKind."""

from datetime import UTC, datetime

import pytest

from modelcdn.domain.entities import StoredFile, ensure_safe_name, is_safe_name
from modelcdn.domain.enums import CollectionKind, MediaType
from modelcdn.domain.exceptions import InvalidPathException
from modelcdn.domain.value_objects import IMAGE_KIND, MODEL_KIND, VIDEO_KIND, kind_for_collection

MODIFIED = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


class TestSafeNames:
    @pytest.mark.parametrize("name", ["robot.glb", "a.b.c.png", "x-y_z.mp4", ".x"])
    def test_safe(self, name: str) -> None:
        assert is_safe_name(name) is True

    @pytest.mark.parametrize("name", ["", "..", "../a.glb", "a/b.glb", "a\\b.glb", "..secret.glb"])
    def test_unsafe(self, name: str) -> None:
        assert is_safe_name(name) is False
        with pytest.raises(InvalidPathException):
            ensure_safe_name(name)


class TestStoredFile:
    def test_model_urls(self) -> None:
        stored = StoredFile("robot.glb", CollectionKind.MODELS, 10, MODIFIED)
        assert stored.media_type == MediaType.MODEL
        assert stored.path == "/models/robot.glb"
        assert stored.direct_url == "/api/models/robot.glb"
        assert stored.view_url == "/models/view/robot.glb"
        assert stored.viewer_url == "/models/viewer/robot.glb"

    def test_media_urls(self) -> None:
        stored = StoredFile("cat.png", CollectionKind.IMAGES, 3, MODIFIED)
        assert stored.media_type == MediaType.IMAGE
        assert stored.direct_url == "/images/cat.png"
        assert stored.view_url == "/media/view/cat.png"
        assert stored.viewer_url is None

    def test_unsafe_name_rejected(self) -> None:
        with pytest.raises(InvalidPathException):
            StoredFile("../cat.png", CollectionKind.IMAGES, 3, MODIFIED)

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            StoredFile("cat.png", CollectionKind.IMAGES, -1, MODIFIED)


class TestFileKind:
    def test_kind_for_collection(self) -> None:
        assert kind_for_collection(CollectionKind.VIDEOS) is VIDEO_KIND

    def test_extension_match_is_case_insensitive(self) -> None:
        assert IMAGE_KIND.accepts("CAT.JPEG") is True
        assert MODEL_KIND.accepts("robot.glb.txt") is False

    @pytest.mark.parametrize(
        ("kind", "filename", "content_type"),
        [
            (MODEL_KIND, "robot.glb", "model/gltf-binary"),
            (MODEL_KIND, "scene.gltf", "model/gltf+json"),
            (IMAGE_KIND, "cat.png", "image/png"),
            (VIDEO_KIND, "clip.mp4", "video/mp4"),
        ],
    )
    def test_content_type(self, kind, filename: str, content_type: str) -> None:
        assert kind.content_type_for(filename) == content_type

    def test_ceilings(self) -> None:
        assert (MODEL_KIND.max_megabytes, IMAGE_KIND.max_megabytes, VIDEO_KIND.max_megabytes) == (100, 20, 500)
