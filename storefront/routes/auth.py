"""Login and registration routes"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from identity import SessionClaims, UserRole, VerificationResult

from ..models.user import (
    LoginRequest,
    RegisterRequest,
    SessionInfo,
    TokenResponse,
    User,
    UserPublic,
)
from ..database.users import user_db
from ..security.session_middleware import optional_session, session_signer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def issue_token(user: User) -> TokenResponse:
    claims = SessionClaims(user_id=user.id, email=user.email, role=user.role, name=user.name)
    token = session_signer.issue(claims)
    return TokenResponse(
        access_token=token,
        expires_at=claims.expires_at,
        user=UserPublic.from_user(user),
    )


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest):
    """Exchange email and password for a session token"""
    user = user_db.authenticate(request.email, request.password)
    if not user:
        logger.warning(f"Failed login for {request.email}")
        raise HTTPException(status_code=401, detail="Invalid email or password")

    logger.info(f"User logged in: {user.email} ({user.role.value})")
    return issue_token(user)


@router.post("/register", response_model=TokenResponse, status_code=201)
async def register(request: RegisterRequest):
    """Create a customer account and log it in"""
    user = user_db.create_user(
        email=request.email,
        password=request.password,
        name=request.name,
        role=UserRole.CUSTOMER,
    )
    if not user:
        raise HTTPException(status_code=400, detail="Email already registered")

    logger.info(f"Registered customer {user.email}")
    return issue_token(user)


@router.get("/me", response_model=SessionInfo)
async def who_am_i(session: VerificationResult = Depends(optional_session)):
    """Identity of the current request"""
    if not session.is_valid:
        return SessionInfo(authenticated=False, role=UserRole.ANONYMOUS)

    user = user_db.get_user(session.claims.user_id)
    return SessionInfo(
        authenticated=True,
        role=session.role,
        user=UserPublic.from_user(user) if user else None,
    )
