"""Unit tests for the validation gate (type resolution, whitelist, size ceilings)."""

import pytest

from modelcdn.application.services.validation_gate import (
    check_extension,
    check_size,
    resolve_media_kind,
)
from modelcdn.domain.exceptions import PayloadTooLargeException, UnsupportedTypeException
from modelcdn.domain.value_objects import IMAGE_KIND, MODEL_KIND, VIDEO_KIND

MB = 1024 * 1024


class TestResolveMediaKind:
    @pytest.mark.parametrize(
        ("filename", "expected"),
        [("a.PNG", IMAGE_KIND), ("b.svg", IMAGE_KIND), ("c.mov", VIDEO_KIND), ("d.mkv", VIDEO_KIND)],
    )
    def test_extension_decides_without_declared_type(self, filename: str, expected: object) -> None:
        assert resolve_media_kind(None, filename) is expected

    @pytest.mark.parametrize("declared", ["video", "videos", "VIDEO"])
    def test_declared_type_wins(self, declared: str) -> None:
        assert resolve_media_kind(declared, "photo.png") is VIDEO_KIND

    def test_unknown_declared_type_rejected(self) -> None:
        with pytest.raises(UnsupportedTypeException, match="Unsupported file type"):
            resolve_media_kind("audio", "song.mp4")

    def test_unknown_extension_rejected(self) -> None:
        with pytest.raises(UnsupportedTypeException, match="Supported: images"):
            resolve_media_kind(None, "notes.txt")


class TestCheckExtension:
    def test_model_message_lists_allowed(self) -> None:
        with pytest.raises(UnsupportedTypeException) as exc_info:
            check_extension(MODEL_KIND, "robot.obj")
        assert exc_info.value.message == "Invalid file type. Allowed: .glb, .gltf"

    def test_media_message_names_type(self) -> None:
        with pytest.raises(UnsupportedTypeException, match="Invalid file extension for video"):
            check_extension(VIDEO_KIND, "photo.png")

    def test_whitelisted_passes(self) -> None:
        check_extension(IMAGE_KIND, "icon.ico")


class TestCheckSize:
    def test_exact_ceiling_allowed(self) -> None:
        check_size(IMAGE_KIND, 20 * MB)

    def test_one_byte_over_rejected(self) -> None:
        with pytest.raises(PayloadTooLargeException) as exc_info:
            check_size(IMAGE_KIND, 20 * MB + 1)
        assert exc_info.value.message == "File size exceeds 20MB limit for image"
        assert exc_info.value.details["max_bytes"] == 20 * MB

    def test_video_ceiling_is_larger(self) -> None:
        check_size(VIDEO_KIND, 21 * MB)
