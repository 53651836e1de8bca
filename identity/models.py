"""Identity Data Models"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum


class UserRole(str, Enum):
    """Who is making a request"""
    ANONYMOUS = "anonymous"
    CUSTOMER = "customer"
    EMPLOYEE = "employee"
    ADMIN = "admin"


def is_employee_or_admin(role: Optional[UserRole]) -> bool:
    return role in (UserRole.EMPLOYEE, UserRole.ADMIN)


def is_admin(role: Optional[UserRole]) -> bool:
    return role == UserRole.ADMIN


@dataclass
class SessionClaims:
    """Identity carried by a session token"""
    user_id: str
    email: str
    role: UserRole
    name: Optional[str] = None
    issued_at: Optional[int] = None
    expires_at: Optional[int] = None

    def to_payload(self) -> dict:
        """Convert to JWT claims"""
        payload = {
            "sub": self.user_id,
            "email": self.email,
            "role": self.role.value,
            "name": self.name,
        }
        if self.issued_at is not None:
            payload["iat"] = self.issued_at
        if self.expires_at is not None:
            payload["exp"] = self.expires_at
        return payload


@dataclass
class VerificationResult:
    """Result of session token verification"""
    is_valid: bool
    claims: Optional[SessionClaims] = None
    error_message: Optional[str] = None

    @property
    def role(self) -> UserRole:
        return self.claims.role if self.claims else UserRole.ANONYMOUS

    @property
    def is_staff(self) -> bool:
        return is_employee_or_admin(self.role)
