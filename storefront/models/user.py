"""User and auth models"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from identity import UserRole


class User(BaseModel):
    """Stored user account"""
    id: str
    email: str
    name: Optional[str] = None
    password_hash: str
    role: UserRole = UserRole.CUSTOMER
    created_at: datetime


class UserPublic(BaseModel):
    """User as returned by the API"""
    id: str
    email: str
    name: Optional[str] = None
    role: UserRole

    @classmethod
    def from_user(cls, user: User) -> "UserPublic":
        return cls(id=user.id, email=user.email, name=user.name, role=user.role)


class LoginRequest(BaseModel):
    email: str
    password: str


class RegisterRequest(BaseModel):
    email: str = Field(min_length=3)
    password: str = Field(min_length=6)
    name: Optional[str] = None


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_at: int
    user: UserPublic


class SessionInfo(BaseModel):
    """Identity of the current request"""
    authenticated: bool
    role: UserRole
    user: Optional[UserPublic] = None
