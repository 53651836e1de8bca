"""
Tests for identity/ -- session tokens, roles and password hashing.
"""

import time

import jwt
import pytest
from cryptography.hazmat.primitives import serialization

from identity import (
    SessionClaims,
    SessionSigner,
    SessionVerifier,
    UserRole,
    generate_session_keys,
    hash_password,
    is_admin,
    is_employee_or_admin,
    verify_password,
)


@pytest.fixture(scope="module")
def key_pair():
    return generate_session_keys()


@pytest.fixture
def signer(key_pair):
    return SessionSigner(private_key_pem=key_pair[0], token_validity_seconds=3600)


@pytest.fixture
def verifier(key_pair):
    return SessionVerifier(public_key_pem=key_pair[1], leeway_seconds=0)


def _claims(role=UserRole.CUSTOMER):
    return SessionClaims(user_id="user-1", email="pat@example.com", role=role, name="Pat")


# ---------------------------------------------------------------------------
# TOKENS
# ---------------------------------------------------------------------------


class TestSessionTokens:

    def test_sign_and_verify(self, signer, verifier):
        token = signer.issue(_claims(UserRole.EMPLOYEE))
        result = verifier.verify(token)

        assert result.is_valid
        assert result.claims.user_id == "user-1"
        assert result.claims.email == "pat@example.com"
        assert result.role == UserRole.EMPLOYEE
        assert result.is_staff

    def test_issue_sets_expiry(self, signer):
        claims = _claims()
        signer.issue(claims, now=1_000)
        assert claims.issued_at == 1_000
        assert claims.expires_at == 4_600

    def test_expired_token(self, signer, verifier):
        token = signer.issue(_claims(), now=int(time.time()) - 7200)
        result = verifier.verify(token)
        assert not result.is_valid
        assert result.error_message == "Session expired"

    def test_tampered_token(self, signer, verifier):
        token = signer.issue(_claims())
        header, payload, signature = token.split(".")
        tampered = ".".join([header, payload, signature[:-4] + "AAAA"])

        result = verifier.verify(tampered)
        assert not result.is_valid
        assert result.error_message.startswith("Invalid session token")

    def test_token_from_other_key(self, verifier):
        other_private, _ = generate_session_keys()
        token = SessionSigner(private_key_pem=other_private).issue(_claims())
        assert not verifier.verify(token).is_valid

    def test_wrong_issuer(self, signer, key_pair):
        token = signer.issue(_claims())
        result = SessionVerifier(public_key_pem=key_pair[1], issuer="elsewhere").verify(token)
        assert not result.is_valid

    def test_unknown_role(self, key_pair, verifier):
        now = int(time.time())
        private_key = serialization.load_pem_private_key(key_pair[0].encode(), password=None)
        token = jwt.encode(
            {"sub": "u", "role": "superuser", "iat": now, "exp": now + 60, "iss": "walkie-storefront"},
            private_key,
            algorithm="EdDSA",
        )
        result = verifier.verify(token)
        assert not result.is_valid
        assert "Unknown role" in result.error_message

    def test_empty_token(self, verifier):
        assert verifier.verify("").error_message == "Missing token"

    def test_bad_key_pem(self):
        with pytest.raises(ValueError):
            SessionSigner(private_key_pem="not a key")
        with pytest.raises(ValueError):
            SessionVerifier(public_key_pem="not a key")


# ---------------------------------------------------------------------------
# ROLES
# ---------------------------------------------------------------------------


class TestRoles:

    @pytest.mark.parametrize("role,expected", [
        (UserRole.ANONYMOUS, False),
        (UserRole.CUSTOMER, False),
        (UserRole.EMPLOYEE, True),
        (UserRole.ADMIN, True),
        (None, False),
    ])
    def test_is_employee_or_admin(self, role, expected):
        assert is_employee_or_admin(role) is expected

    def test_is_admin(self):
        assert is_admin(UserRole.ADMIN)
        assert not is_admin(UserRole.EMPLOYEE)


# ---------------------------------------------------------------------------
# PASSWORDS
# ---------------------------------------------------------------------------


class TestPasswords:

    def test_hash_and_verify(self):
        hashed = hash_password("hunter22", iterations=1_000)
        assert hashed.startswith("pbkdf2_sha256$1000$")
        assert verify_password("hunter22", hashed)
        assert not verify_password("hunter23", hashed)

    def test_salts_differ(self):
        assert hash_password("same", iterations=1_000) != hash_password("same", iterations=1_000)

    @pytest.mark.parametrize("stored", ["", "plain", "md5$1$salt$hash", "pbkdf2_sha256$x$salt$hash"])
    def test_malformed_hash_rejected(self, stored):
        assert verify_password("anything", stored) is False
