"""Unit tests for the filename policy (sanitize, URL names, extension forcing, dedupe candidates)."""

import re
from itertools import islice

import pytest

from modelcdn.application.services.filename_policy import (
    candidate_names,
    ensure_extension,
    name_from_url,
    sanitize_filename,
    url_upload_name,
    validate_source_url,
)
from modelcdn.domain.exceptions import InvalidInputException
from modelcdn.domain.value_objects import IMAGE_KIND, MODEL_KIND, VIDEO_KIND

SAFE_NAME = re.compile(r"^[A-Za-z0-9._-]*$")


class TestSanitizeFilename:
    def test_safe_name_unchanged(self) -> None:
        assert sanitize_filename("robot_arm-v2.glb") == "robot_arm-v2.glb"

    def test_spaces_and_symbols_replaced(self) -> None:
        assert sanitize_filename("my model (final).glb") == "my_model__final_.glb"

    def test_separators_replaced(self) -> None:
        assert sanitize_filename("a/b\\c.png") == "a_b_c.png"

    def test_dot_runs_collapse(self) -> None:
        assert ".." not in sanitize_filename("../../etc/passwd")
        assert sanitize_filename("a..b.glb") == "a.b.glb"

    def test_leading_dots_dropped(self) -> None:
        assert sanitize_filename(".hidden.png") == "hidden.png"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("../../x.glb", "_._x.glb"), (".env.glb", "env.glb"), ("...a....b.png", "a.b.png")],
    )
    def test_dot_rules_after_replacement(self, raw: str, expected: str) -> None:
        assert sanitize_filename(raw) == expected

    def test_unicode_replaced(self) -> None:
        assert sanitize_filename("café.jpg") == "caf_.jpg"

    @pytest.mark.parametrize(
        "raw",
        ["../../x.glb", "name with spaces.mp4", "emoji-😀.gif", "tab\there.png", "", "%2e%2e%2f.glb"],
    )
    def test_result_only_contains_safe_characters(self, raw: str) -> None:
        assert SAFE_NAME.match(sanitize_filename(raw))


class TestCandidateNames:
    def test_first_candidate_is_name(self) -> None:
        assert next(candidate_names("foo.glb")) == "foo.glb"

    def test_counter_inserted_before_extension(self) -> None:
        assert list(islice(candidate_names("foo.glb"), 4)) == [
            "foo.glb",
            "foo_1.glb",
            "foo_2.glb",
            "foo_3.glb",
        ]

    def test_only_last_extension_is_kept_apart(self) -> None:
        assert list(islice(candidate_names("clip.png.mp4"), 2)) == ["clip.png.mp4", "clip.png_1.mp4"]


class TestUrlNames:
    def test_name_from_url_uses_path_basename(self) -> None:
        assert name_from_url("https://cdn.example.com/assets/robot.glb?x=1") == "robot.glb"

    def test_name_from_url_trailing_slash_is_empty(self) -> None:
        assert name_from_url("https://cdn.example.com/assets/") == ""

    def test_url_upload_name_prefers_suggested(self) -> None:
        assert url_upload_name("https://x.test/a.glb", "My Model") == "My_Model"

    def test_url_upload_name_empty_becomes_upload(self) -> None:
        assert url_upload_name("https://x.test/", None) == "upload"


class TestEnsureExtension:
    def test_whitelisted_extension_kept(self) -> None:
        assert ensure_extension("robot.gltf", MODEL_KIND) == "robot.gltf"

    def test_model_gets_glb(self) -> None:
        assert ensure_extension("robot", MODEL_KIND) == "robot.glb"

    def test_media_gets_canonical_extension(self) -> None:
        assert ensure_extension("photo", IMAGE_KIND) == "photo.jpg"
        assert ensure_extension("clip.png", VIDEO_KIND) == "clip.png.mp4"


class TestValidateSourceUrl:
    @pytest.mark.parametrize("url", ["https://example.com/a.glb", "http://127.0.0.1:8080/x"])
    def test_http_urls_accepted(self, url: str) -> None:
        assert validate_source_url(url) == url

    @pytest.mark.parametrize("url", ["ftp://example.com/a.glb", "not a url", "file:///etc/passwd", "https://"])
    def test_other_urls_rejected(self, url: str) -> None:
        with pytest.raises(InvalidInputException, match="Invalid URL provided"):
            validate_source_url(url)
