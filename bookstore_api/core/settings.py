from __future__ import annotations

import json
from typing import Annotated, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application-level settings for the FastAPI service.

    This is separate from bookstore_api.db.config.Settings, which focuses on the database layer.
    """

    # FastAPI metadata
    APP_NAME: str = Field(default="BookStore API")
    APP_DESCRIPTION: str = Field(
        default=(
            "REST API for the BookStore catalog. "
            "Provides CRUD endpoints for authors and books with role-based access."
        )
    )
    APP_VERSION: str = Field(default="1.0.0")

    # CORS
    CORS_ORIGINS: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        description="Comma-separated list or JSON array of allowed origins. Default: *",
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True)
    CORS_ALLOW_METHODS: List[str] = Field(default_factory=lambda: ["*"])
    CORS_ALLOW_HEADERS: List[str] = Field(default_factory=lambda: ["*"])

    # Startup behavior
    RUN_MIGRATIONS_ON_STARTUP: bool = Field(
        default=False,
        description="If true, run Alembic migrations (upgrade head) at app startup.",
    )
    AUTO_SEED: bool = Field(
        default=False,
        description="If true, seed roles and the administrator account after migrations.",
    )

    LOG_LEVEL: str = Field(default="INFO", description="Root log level name")

    # Tokens
    JWT_SECRET_KEY: str = Field(default="change-me", description="HMAC key used to sign JWTs")
    JWT_ALGORITHM: str = Field(default="HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=30)
    REFRESH_TOKEN_EXPIRE_MINUTES: int = Field(default=60 * 24 * 7)

    # Roles
    ADMIN_ROLE: str = Field(default="Administrator", description="Role gating catalog mutations")
    CUSTOMER_ROLE: str = Field(default="Customer", description="Role assigned on registration")
    ADMIN_EMAIL: Optional[str] = Field(default=None, description="Seeded administrator email")
    ADMIN_PASSWORD: Optional[str] = Field(default=None, description="Seeded administrator password")

    # Access policy per resource
    AUTHORS_READ_REQUIRES_ROLE: bool = Field(default=True)
    AUTHORS_CREATE_REQUIRES_ROLE: bool = Field(default=True)
    BOOKS_READ_REQUIRES_ROLE: bool = Field(default=False)
    BOOKS_CREATE_REQUIRES_ROLE: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v):
        """
        Accept both JSON array format and comma-separated formats for CORS origins.
        """
        if v is None:
            return ["*"]
        if isinstance(v, str) and v.strip().startswith("["):
            v = json.loads(v)
        if isinstance(v, str):
            parts = [p.strip() for p in v.split(",") if p.strip()]
            return parts or ["*"]
        if isinstance(v, list):
            return v or ["*"]
        return ["*"]

    def requires_role(self, resource: str, action: str) -> bool:
        """
        Return whether `action` ("read" or "create") on `resource` is restricted to ADMIN_ROLE.

        Update and delete are always restricted.
        """
        if action not in ("read", "create"):
            return True
        flag = f"{resource.upper()}_{action.upper()}_REQUIRES_ROLE"
        return bool(getattr(self, flag, True))


# PUBLIC_INTERFACE
def get_app_settings() -> AppSettings:
    """
    Return a new AppSettings instance populated from environment variables.

    Used as a FastAPI dependency as well, so tests can override it.
    """
    return AppSettings()
