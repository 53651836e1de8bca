"""User storage for the storefront"""

import uuid
import logging
from datetime import datetime, timezone
from typing import Optional

from identity import UserRole, hash_password, verify_password

from ..core.config import settings
from ..models.user import User

logger = logging.getLogger(__name__)


class UserDatabase:
    """In-memory user accounts"""

    def __init__(self):
        self.users: dict[str, User] = {}

    def _normalize(self, email: str) -> str:
        return email.strip().lower()

    def get_by_email(self, email: str) -> Optional[User]:
        email = self._normalize(email)
        return next((u for u in self.users.values() if u.email == email), None)

    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def create_user(
        self,
        email: str,
        password: str,
        name: Optional[str] = None,
        role: UserRole = UserRole.CUSTOMER,
    ) -> Optional[User]:
        """Create a user, None if the email is taken"""
        if self.get_by_email(email):
            return None

        user = User(
            id=str(uuid.uuid4()),
            email=self._normalize(email),
            name=name,
            password_hash=hash_password(password),
            role=role,
            created_at=datetime.now(timezone.utc),
        )
        self.users[user.id] = user
        return user

    def ensure_user(
        self,
        email: str,
        password: str,
        name: Optional[str] = None,
        role: UserRole = UserRole.CUSTOMER,
    ) -> User:
        """Create the user unless the email already exists"""
        existing = self.get_by_email(email)
        if existing:
            return existing
        return self.create_user(email, password, name=name, role=role)

    def authenticate(self, email: str, password: str) -> Optional[User]:
        """Check credentials"""
        user = self.get_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            return None
        return user


def seed_staff_account(db: UserDatabase) -> User:
    """Ensure the default employee account exists"""
    user = db.ensure_user(
        email=settings.admin_email,
        password=settings.admin_password,
        name=settings.admin_name,
        role=UserRole.EMPLOYEE,
    )
    logger.info(f"Staff account ready: {user.email} ({user.role.value})")
    return user


# Singleton instance
user_db = UserDatabase()
