"""Unit tests for AccessGuard and the admin password check."""

import pytest

from modelcdn.application.services import AccessGuard, verify_admin_password
from modelcdn.domain.exceptions import (
    AdminNotConfiguredException,
    MissingInputException,
    UnauthorizedException,
)


class TestAccessGuard:
    def test_open_guard_authorizes_everything(self) -> None:
        guard = AccessGuard(None)
        assert guard.is_open is True
        assert guard.authorize({}) is True

    def test_empty_key_means_open(self) -> None:
        assert AccessGuard("").is_open is True

    def test_open_guard_never_has_valid_key(self) -> None:
        assert AccessGuard(None).has_valid_key({"x-api-key": "anything"}) is False

    def test_x_api_key_accepted(self) -> None:
        assert AccessGuard("s3cret").authorize({"x-api-key": "s3cret"}) is True

    @pytest.mark.parametrize("authorization", ["Bearer s3cret", "bearer s3cret", "BEARER  s3cret"])
    def test_bearer_token_accepted(self, authorization: str) -> None:
        assert AccessGuard("s3cret").authorize({"authorization": authorization}) is True

    @pytest.mark.parametrize(
        "headers",
        [{}, {"x-api-key": "wrong"}, {"authorization": "Basic s3cret"}, {"authorization": "Bearer "}],
    )
    def test_wrong_or_missing_key_rejected(self, headers: dict[str, str]) -> None:
        assert AccessGuard("s3cret").authorize(headers) is False

    def test_x_api_key_checked_before_authorization(self) -> None:
        headers = {"x-api-key": "wrong", "authorization": "Bearer s3cret"}
        assert AccessGuard.extract_key(headers) == "wrong"

    def test_require_raises_with_realm(self) -> None:
        with pytest.raises(UnauthorizedException) as exc_info:
            AccessGuard("s3cret").require({}, realm="Model Upload API")
        assert exc_info.value.headers == {"WWW-Authenticate": 'Bearer realm="Model Upload API"'}
        assert exc_info.value.message == "Unauthorized - Invalid or missing API key"


class TestVerifyAdminPassword:
    def test_empty_password_is_missing_input(self) -> None:
        with pytest.raises(MissingInputException, match="Password is required"):
            verify_admin_password("", "configured")

    def test_unconfigured_admin(self) -> None:
        with pytest.raises(AdminNotConfiguredException):
            verify_admin_password("anything", None)

    def test_wrong_password(self) -> None:
        with pytest.raises(UnauthorizedException, match="Invalid password"):
            verify_admin_password("nope", "correct horse")

    def test_correct_password(self) -> None:
        verify_admin_password("correct horse", "correct horse")
