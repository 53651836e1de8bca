# Identity
# Session tokens, roles and password hashing for the storefront

from .signer import SessionSigner, generate_session_keys
from .verifier import SessionVerifier
from .models import SessionClaims, UserRole, VerificationResult, is_admin, is_employee_or_admin
from .passwords import hash_password, verify_password

__all__ = [
    "SessionSigner",
    "SessionVerifier",
    "generate_session_keys",
    "SessionClaims",
    "UserRole",
    "VerificationResult",
    "is_admin",
    "is_employee_or_admin",
    "hash_password",
    "verify_password",
]
