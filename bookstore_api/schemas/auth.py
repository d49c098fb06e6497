from __future__ import annotations

from typing import List

from pydantic import BaseModel, EmailStr, Field


class TokenPair(BaseModel):
    """Tokens returned by login and refresh."""
    token_type: str = Field("bearer")
    access_token: str = Field(..., description="Bearer token for /api/authors and /api/books")
    refresh_token: str = Field(..., description="Exchanged at /api/auth/refresh for a new pair")


class RefreshRequest(BaseModel):
    refresh_token: str = Field(..., description="Refresh token issued at login")


class RegisterRequest(BaseModel):
    """New customer account."""
    email: EmailStr = Field(..., description="Login name")
    password: str = Field(..., min_length=6)


class UserRead(BaseModel):
    """Account as seen by its owner."""
    id: int
    email: EmailStr
    is_active: bool
    roles: List[str] = Field(default_factory=list, description="e.g. Administrator, Customer")
