"""Unit tests for admin session tokens."""

from datetime import timedelta

from jose import jwt

from modelcdn.core.config import get_settings
from modelcdn.infrastructure.security.session import (
    ADMIN_SUBJECT,
    create_session_token,
    verify_session_token,
)


class TestSessionTokens:
    def test_round_trip(self, env: dict[str, str]) -> None:
        assert verify_session_token(create_session_token()) is True

    def test_claims(self, env: dict[str, str]) -> None:
        token = create_session_token()
        claims = jwt.get_unverified_claims(token)
        assert claims["sub"] == ADMIN_SUBJECT
        assert claims["exp"] - claims["iat"] == get_settings().admin_session_max_age_seconds

    def test_expired_token_rejected(self, env: dict[str, str]) -> None:
        token = create_session_token(expires_delta=timedelta(seconds=-5))
        assert verify_session_token(token) is False

    def test_token_signed_with_other_key_rejected(self, env: dict[str, str]) -> None:
        forged = jwt.encode({"sub": ADMIN_SUBJECT, "exp": 9_999_999_999}, "other-key", algorithm="HS256")
        assert verify_session_token(forged) is False

    def test_wrong_subject_rejected(self, env: dict[str, str]) -> None:
        token = jwt.encode({"sub": "someone", "exp": 9_999_999_999}, env["SECRET_KEY"], algorithm="HS256")
        assert verify_session_token(token) is False

    def test_garbage_rejected(self, env: dict[str, str]) -> None:
        assert verify_session_token("not-a-jwt") is False
        assert verify_session_token("") is False
        assert verify_session_token(None) is False

    def test_ephemeral_key_when_secret_unset(self, configure) -> None:
        configure(SECRET_KEY="")
        token = create_session_token()
        assert verify_session_token(token) is True
