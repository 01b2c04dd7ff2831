"""Unit tests for PasswordHasher, Tokenizer and JWTService."""

from datetime import datetime, timedelta, timezone

import pytest

from accounts.config import AuthSettings
from accounts.domain.service import JWTService, PasswordHasher, Tokenizer
from accounts.util.error import JWTError


class TestPasswordHasher:
    def test_hash_and_verify(self):
        hasher = PasswordHasher(AuthSettings())

        password_hash = hasher.hash("secret-password")

        assert password_hash != "secret-password"
        assert hasher.verify("secret-password", password_hash)
        assert not hasher.verify("wrong-password", password_hash)

    def test_verify_without_hash_never_matches(self):
        hasher = PasswordHasher(AuthSettings())

        assert not hasher.verify("anything", None)

    def test_verify_garbage_hash_does_not_raise(self):
        hasher = PasswordHasher(AuthSettings())

        assert not hasher.verify("anything", "not-an-argon2-hash")

    def test_empty_password_rejected(self):
        with pytest.raises(ValueError):
            PasswordHasher(AuthSettings()).hash("")

    def test_generate_password_length(self):
        hasher = PasswordHasher(AuthSettings(generated_password_length=20))

        password = hasher.generate_password()

        assert len(password) == 20
        assert password.isalnum()


class TestTokenizer:
    def test_tokens_are_unique(self):
        tokenizer = Tokenizer(AuthSettings())

        assert tokenizer.confirm_token() != tokenizer.confirm_token()
        assert tokenizer.new_email_token() != tokenizer.new_email_token()

    def test_reset_token_expires_after_ttl(self):
        tokenizer = Tokenizer(AuthSettings(reset_token_ttl_seconds=600))
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)

        token = tokenizer.reset_token(now)

        assert token.expires_at == now + timedelta(seconds=600)
        assert token.token


class TestJWTService:
    def test_round_trip(self):
        jwt_service = JWTService(AuthSettings(jwt_secret="test-secret-" + "x" * 32))

        token = jwt_service.create_token("user-1", "ROLE_ADMIN")
        payload = jwt_service.verify_token(token)

        assert payload.user_id == "user-1"
        assert payload.role == "ROLE_ADMIN"

    def test_token_signed_with_other_secret_rejected(self):
        issuer = JWTService(AuthSettings(jwt_secret="one-" + "x" * 32))
        verifier = JWTService(AuthSettings(jwt_secret="two-" + "x" * 32))
        token = issuer.create_token("u", "r")

        with pytest.raises(JWTError, match="Invalid token"):
            verifier.verify_token(token)

    def test_expired_token_rejected(self):
        jwt_service = JWTService(AuthSettings(jwt_expiry_days=-1))
        token = jwt_service.create_token("u", "r")

        with pytest.raises(JWTError, match="Token has expired"):
            jwt_service.verify_token(token)
