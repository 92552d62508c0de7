"""Tests for password hashing, tokens and role checks."""

import time
from datetime import timedelta
from types import SimpleNamespace

import pytest
from jose import jwt

from pgfinder.core.exceptions import Forbidden, Unauthorized
from pgfinder.core.security import get_password_hash, verify_password
from pgfinder.models.user import Role


def _user(role="owner"):
    return SimpleNamespace(id=7, email="owner@example.com", role=role)


class TestPasswords:
    def test_hash_round_trip(self):
        hashed = get_password_hash("s3cret", 1000)
        assert hashed.startswith("pbkdf2_sha256$1000$")
        assert verify_password("s3cret", hashed)
        assert not verify_password("wrong", hashed)

    def test_salt_differs_per_hash(self):
        assert get_password_hash("same", 1000) != get_password_hash("same", 1000)

    @pytest.mark.parametrize("stored", ["", "plaintext", "md5$1$a$b", "pbkdf2_sha256$x$y$z"])
    def test_unrecognised_hashes_never_verify(self, stored):
        assert not verify_password("plaintext", stored)


class TestTokens:
    def test_issue_then_verify(self, auth_service):
        identity = auth_service.verify_token(auth_service.issue_token(_user()))
        assert identity.id == 7
        assert identity.email == "owner@example.com"
        assert identity.role is Role.OWNER

    def test_token_expires_after_seven_days(self, auth_service):
        claims = jwt.get_unverified_claims(auth_service.issue_token(_user()))
        assert set(claims) == {"id", "email", "role", "exp"}
        assert abs(claims["exp"] - time.time() - timedelta(days=7).total_seconds()) < 60

    def test_expired_token_rejected(self, auth_service):
        token = auth_service.issue_token(_user(), expires_delta=timedelta(days=-8))
        with pytest.raises(Unauthorized):
            auth_service.verify_token(token)

    def test_tampered_signature_rejected(self, auth_service):
        token = jwt.encode({"id": 1, "email": "a@b.c", "role": "admin"}, "other-secret", algorithm="HS256")
        with pytest.raises(Unauthorized):
            auth_service.verify_token(token)

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_malformed_token(self, auth_service, token):
        with pytest.raises(Unauthorized):
            auth_service.verify_token(token)

    def test_unknown_role_claim_rejected(self, auth_service, settings):
        token = jwt.encode(
            {"id": 1, "email": "a@b.c", "role": "superuser"},
            settings.secret_key,
            algorithm=settings.algorithm,
        )
        with pytest.raises(Unauthorized):
            auth_service.verify_token(token)


class TestAuthorize:
    def test_member_role_allowed(self, auth_service):
        identity = auth_service.verify_token(auth_service.issue_token(_user("admin")))
        assert auth_service.authorize(identity, {Role.ADMIN}) is identity

    def test_admin_is_not_implicitly_owner(self, auth_service):
        identity = auth_service.verify_token(auth_service.issue_token(_user("admin")))
        with pytest.raises(Forbidden):
            auth_service.authorize(identity, {Role.OWNER})
