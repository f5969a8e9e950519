"""Unit tests for domain exceptions and their HTTP mapping."""

import json
from unittest.mock import MagicMock, patch

import pytest

from modelcdn.core.exception_handlers import (
    _generic_exception_handler,
    _modelcdn_exception_handler,
    status_for,
)
from modelcdn.domain.exceptions import (
    AdminNotConfiguredException,
    InvalidInputException,
    InvalidPathException,
    MissingInputException,
    ModelCdnException,
    NotFoundException,
    PayloadTooLargeException,
    UnauthorizedException,
    UnsupportedTypeException,
)
from modelcdn.infrastructure.exceptions import RemoteFetchError, StorageDeleteError, StorageWriteError


class TestToDict:
    def test_error_and_code(self) -> None:
        body = NotFoundException("Model", "robot.glb").to_dict()
        assert body == {
            "error": "Model not found",
            "code": "NOT_FOUND",
            "details": {"filename": "robot.glb"},
        }

    def test_details_omitted_when_empty(self) -> None:
        assert "details" not in AdminNotConfiguredException().to_dict()

    def test_default_code_is_class_name(self) -> None:
        assert ModelCdnException("boom").error_code == "ModelCdnException"


class TestStatusMapping:
    @pytest.mark.parametrize(
        ("exc", "status"),
        [
            (MissingInputException("No file provided"), 400),
            (InvalidInputException("Invalid URL provided"), 400),
            (UnsupportedTypeException("nope"), 400),
            (PayloadTooLargeException("image", 2, 1), 400),
            (InvalidPathException("../x"), 403),
            (UnauthorizedException(), 401),
            (NotFoundException("File", "x"), 404),
            (RemoteFetchError("https://x.test", "HTTP 404"), 400),
            (StorageWriteError("/tmp/x", "disk full"), 500),
            (AdminNotConfiguredException(), 500),
            (ModelCdnException("unmapped", "SOMETHING_ELSE"), 400),
        ],
    )
    def test_status_for(self, exc: ModelCdnException, status: int) -> None:
        assert status_for(exc) == status

    def test_unauthorized_realm_header(self) -> None:
        exc = UnauthorizedException(realm="Media CDN Upload API")
        assert exc.headers == {"WWW-Authenticate": 'Bearer realm="Media CDN Upload API"'}
        assert UnauthorizedException().headers is None


class TestGenericHandler:
    def test_500_hides_detail_when_not_debug(self) -> None:
        with patch("modelcdn.core.exception_handlers.get_settings") as mock_settings:
            mock_settings.return_value.debug = False
            response = _generic_exception_handler(MagicMock(), ValueError("sensitive path /etc"))
        assert response.status_code == 500
        assert b"sensitive" not in response.body
        assert b"Internal server error" in response.body

    def test_500_includes_detail_in_debug(self) -> None:
        with patch("modelcdn.core.exception_handlers.get_settings") as mock_settings:
            mock_settings.return_value.debug = True
            response = _generic_exception_handler(MagicMock(), ValueError("sensitive path /etc"))
        assert b"sensitive path /etc" in response.body


class TestDomainHandler:
    def _handle(self, exc: ModelCdnException, debug: bool):
        with patch("modelcdn.core.exception_handlers.get_settings") as mock_settings:
            mock_settings.return_value.debug = debug
            return _modelcdn_exception_handler(MagicMock(), exc)

    @pytest.mark.parametrize(
        "exc",
        [
            StorageWriteError("/srv/public/models/.tmp_abc.glb", "[Errno 28] No space left on device"),
            StorageDeleteError("/srv/public/images/cat.png", "[Errno 13] Permission denied"),
        ],
    )
    def test_storage_failure_hides_path_and_reason(self, exc: ModelCdnException) -> None:
        response = self._handle(exc, debug=False)

        assert response.status_code == 500
        assert json.loads(response.body) == {"error": exc.message, "code": "STORAGE_FAILURE"}
        assert b"/srv/public" not in response.body
        assert b"Errno" not in response.body

    def test_storage_failure_details_in_debug(self) -> None:
        response = self._handle(StorageWriteError("/srv/public/models/a.glb", "disk full"), debug=True)

        body = json.loads(response.body)
        assert body["details"]["file_path"] == "/srv/public/models/a.glb"
        assert body["details"]["reason"] == "disk full"

    def test_client_error_keeps_details(self) -> None:
        response = self._handle(NotFoundException("Model", "robot.glb"), debug=False)

        assert response.status_code == 404
        assert json.loads(response.body)["details"] == {"filename": "robot.glb"}
