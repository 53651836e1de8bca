"""Storefront Configuration"""

import os
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_file="config/.env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Walkie Talkie Rentals"
    debug: bool = False
    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 8001

    # Cart persistence
    cart_storage_dir: Optional[str] = None  # In-memory when unset
    cart_storage_namespace: str = "walkie-cart"

    # Session tokens
    session_issuer: str = "walkie-storefront"
    session_ttl_minutes: int = 480
    session_private_key: Optional[str] = None
    session_private_key_path: Optional[str] = None
    session_public_key: Optional[str] = None
    session_public_key_path: Optional[str] = None

    # Default employee account
    admin_email: str = "admin@walkierentals.com"
    admin_password: str = "admin123"
    admin_name: str = "Admin User"

    # Catalog
    seed_demo_catalog: bool = True

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def get_session_private_key(self) -> Optional[str]:
        """Get session private key from file or inline"""
        return self._read_key(self.session_private_key, self.session_private_key_path)

    def get_session_public_key(self) -> Optional[str]:
        """Get session public key from file or inline"""
        return self._read_key(self.session_public_key, self.session_public_key_path)

    @staticmethod
    def _read_key(inline: Optional[str], path: Optional[str]) -> Optional[str]:
        if inline:
            return inline

        if path and os.path.exists(path):
            with open(path, "r") as f:
                return f.read()

        return None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
