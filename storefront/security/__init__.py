# Request identity and access control

from .session_middleware import (
    SessionMiddleware,
    SessionDependency,
    session_signer,
    session_verifier,
    optional_session,
    require_login,
    require_staff,
)

__all__ = [
    "SessionMiddleware",
    "SessionDependency",
    "session_signer",
    "session_verifier",
    "optional_session",
    "require_login",
    "require_staff",
]
