"""
Session Token Signer

Issues EdDSA-signed JWT session tokens for logged-in users.
"""

import time
from typing import Optional

import jwt
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.backends import default_backend

from .models import SessionClaims

SESSION_ALGORITHM = "EdDSA"


def generate_session_keys() -> tuple[str, str]:
    """
    Generate an Ed25519 key pair for session signing.

    Returns:
        Tuple of (private_key_pem, public_key_pem)
    """
    private_key = ed25519.Ed25519PrivateKey.generate()

    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return private_pem.decode(), public_pem.decode()


class SessionSigner:
    """
    Signs session tokens.

    Usage:
        signer = SessionSigner(private_key_pem="...", issuer="walkie-storefront")
        token = signer.issue(SessionClaims(user_id="u1", email="a@b.c", role=UserRole.CUSTOMER))
    """

    def __init__(
        self,
        private_key_pem: str,
        issuer: str = "walkie-storefront",
        token_validity_seconds: int = 8 * 3600,
    ):
        """
        Initialize the session signer.

        Args:
            private_key_pem: PEM-encoded Ed25519 private key
            issuer: Value of the iss claim
            token_validity_seconds: How long tokens remain valid
        """
        self.issuer = issuer
        self.validity_seconds = token_validity_seconds
        self._private_key = self._load_private_key(private_key_pem)

    def _load_private_key(self, pem: str) -> Ed25519PrivateKey:
        """Load private key from PEM string"""
        pem_bytes = pem.encode() if isinstance(pem, str) else pem

        try:
            key = serialization.load_pem_private_key(
                pem_bytes, password=None, backend=default_backend()
            )
        except Exception as e:
            raise ValueError(f"Failed to load private key: {e}")

        if not isinstance(key, Ed25519PrivateKey):
            raise ValueError("Session signing key must be an Ed25519 key")
        return key

    def issue(self, claims: SessionClaims, now: Optional[int] = None) -> str:
        """
        Issue a signed token for the given identity.

        Args:
            claims: Identity to embed
            now: Issue time as a unix timestamp (default: current time)

        Returns:
            Encoded JWT
        """
        issued_at = now if now is not None else int(time.time())
        claims.issued_at = issued_at
        claims.expires_at = issued_at + self.validity_seconds

        payload = claims.to_payload()
        payload["iss"] = self.issuer
        return jwt.encode(payload, self._private_key, algorithm=SESSION_ALGORITHM)
