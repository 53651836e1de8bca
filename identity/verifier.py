"""
Session Token Verifier

Validates session tokens issued by SessionSigner.
"""

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey
from cryptography.hazmat.backends import default_backend
import jwt

from .models import SessionClaims, UserRole, VerificationResult
from .signer import SESSION_ALGORITHM


class SessionVerifier:
    """
    Verifies session tokens.

    Usage:
        verifier = SessionVerifier(public_key_pem="...")
        result = verifier.verify(token)

        if result.is_valid:
            print(f"Request from {result.claims.email} ({result.role.value})")
    """

    def __init__(
        self,
        public_key_pem: str,
        issuer: str = "walkie-storefront",
        leeway_seconds: int = 30,
    ):
        """
        Initialize the session verifier.

        Args:
            public_key_pem: PEM-encoded Ed25519 public key
            issuer: Required iss claim
            leeway_seconds: Allowed clock skew when checking exp/iat
        """
        self.issuer = issuer
        self.leeway = leeway_seconds
        self._public_key = self._load_public_key(public_key_pem)

    def _load_public_key(self, pem: str) -> Ed25519PublicKey:
        """Load public key from PEM string"""
        pem_bytes = pem.encode() if isinstance(pem, str) else pem

        try:
            key = serialization.load_pem_public_key(pem_bytes, backend=default_backend())
        except Exception as e:
            raise ValueError(f"Failed to load public key: {e}")

        if not isinstance(key, Ed25519PublicKey):
            raise ValueError("Session verification key must be an Ed25519 key")
        return key

    def verify(self, token: str) -> VerificationResult:
        """
        Verify a session token.

        Args:
            token: Encoded JWT from the Authorization header

        Returns:
            VerificationResult indicating success/failure
        """
        if not token:
            return VerificationResult(is_valid=False, error_message="Missing token")

        try:
            payload = jwt.decode(
                token,
                self._public_key,
                algorithms=[SESSION_ALGORITHM],
                issuer=self.issuer,
                leeway=self.leeway,
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            return VerificationResult(is_valid=False, error_message="Session expired")
        except jwt.InvalidTokenError as e:
            return VerificationResult(is_valid=False, error_message=f"Invalid session token: {e}")

        try:
            role = UserRole(payload.get("role", UserRole.CUSTOMER.value))
        except ValueError:
            return VerificationResult(
                is_valid=False,
                error_message=f"Unknown role: {payload.get('role')}",
            )

        claims = SessionClaims(
            user_id=payload["sub"],
            email=payload.get("email", ""),
            role=role,
            name=payload.get("name"),
            issued_at=payload.get("iat"),
            expires_at=payload.get("exp"),
        )
        return VerificationResult(is_valid=True, claims=claims)
