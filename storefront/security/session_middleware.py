"""
Session Middleware

Resolves the caller's identity from a bearer session token.
Requests without a token proceed as anonymous visitors.
"""

import logging
from typing import Callable

from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from identity import (
    SessionSigner,
    SessionVerifier,
    VerificationResult,
    generate_session_keys,
)

from ..core.config import settings

logger = logging.getLogger(__name__)


class SessionMiddleware(BaseHTTPMiddleware):
    """
    Middleware that verifies session tokens on requests.

    If a request carries a bearer token, it is validated and rejected
    with 401 when invalid. Without a token the request is anonymous.
    """

    def __init__(self, app, verifier: SessionVerifier):
        super().__init__(app)
        self.verifier = verifier

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        authorization = request.headers.get("Authorization")

        if authorization:
            scheme, _, token = authorization.partition(" ")
            if scheme.lower() != "bearer" or not token:
                return JSONResponse(
                    status_code=401,
                    content={"detail": "Authorization header must be 'Bearer <token>'"},
                )

            result = self.verifier.verify(token.strip())
            if not result.is_valid:
                logger.warning(f"Session verification failed: {result.error_message}")
                return JSONResponse(
                    status_code=401,
                    content={"detail": result.error_message},
                )

            request.state.session = result
            logger.debug(f"Session verified: user={result.claims.email}, role={result.role.value}")
        else:
            request.state.session = VerificationResult(is_valid=False)

        return await call_next(request)


class SessionDependency:
    """
    FastAPI dependency for route-level access control.

    Reads the identity resolved by SessionMiddleware.
    """

    def __init__(self, require_login: bool = False, require_staff: bool = False):
        """
        Args:
            require_login: If True, reject anonymous requests
            require_staff: If True, require the employee or admin role
        """
        self.require_login = require_login or require_staff
        self.require_staff = require_staff

    async def __call__(self, request: Request) -> VerificationResult:
        session = getattr(request.state, "session", None) or VerificationResult(is_valid=False)

        if self.require_login and not session.is_valid:
            raise HTTPException(status_code=401, detail="Unauthorized")

        if self.require_staff and not session.is_staff:
            # Customers get the same answer as anonymous visitors
            raise HTTPException(status_code=401, detail="Unauthorized")

        return session


def get_session_keys() -> tuple[str, str]:
    """
    Load the session key pair from settings.

    Falls back to a throwaway key pair, which invalidates every token
    on restart.
    """
    private_key = settings.get_session_private_key()
    public_key = settings.get_session_public_key()

    if private_key and public_key:
        return private_key, public_key

    logger.warning("No session keys configured - using an ephemeral key pair")
    return generate_session_keys()


def create_session_authority() -> tuple[SessionSigner, SessionVerifier]:
    private_key, public_key = get_session_keys()
    signer = SessionSigner(
        private_key_pem=private_key,
        issuer=settings.session_issuer,
        token_validity_seconds=settings.session_ttl_minutes * 60,
    )
    verifier = SessionVerifier(public_key_pem=public_key, issuer=settings.session_issuer)
    return signer, verifier


session_signer, session_verifier = create_session_authority()

# Dependency instances
optional_session = SessionDependency()
require_login = SessionDependency(require_login=True)
require_staff = SessionDependency(require_staff=True)
