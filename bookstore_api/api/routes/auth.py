from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore_api.core.deps import get_current_active_user
from bookstore_api.core.security import (
    create_access_token,
    create_refresh_token,
    decode_token,
    get_password_hash,
    verify_password,
)
from bookstore_api.core.settings import AppSettings, get_app_settings
from bookstore_api.db.session import get_async_session
from bookstore_api.repositories.security import SecurityRepository
from bookstore_api.schemas.auth import (
    RefreshRequest,
    RegisterRequest,
    TokenPair,
    UserRead,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


def _user_to_read(user) -> UserRead:
    return UserRead(
        id=user.id,
        email=user.email,
        is_active=user.is_active,
        roles=user.role_names,
    )


def _issue_tokens(user) -> TokenPair:
    access = create_access_token(subject=str(user.id), roles=user.role_names)
    refresh = create_refresh_token(subject=str(user.id))
    return TokenPair(access_token=access, refresh_token=refresh)


# PUBLIC_INTERFACE
@router.post(
    "/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register user",
    description="Create a new user holding the customer role.",
)
async def register_user(
    payload: RegisterRequest,
    session: AsyncSession = Depends(get_async_session),
    settings: AppSettings = Depends(get_app_settings),
) -> UserRead:
    """Register a new user."""
    repo = SecurityRepository(session)
    existing = await repo.get_user_by_email(payload.email)
    if existing:
        logger.warning("Registration rejected: %s already exists", payload.email)
        raise HTTPException(status_code=400, detail="User with this email already exists")

    user = await repo.create_user(email=payload.email, hashed_password=get_password_hash(payload.password))
    role = await repo.ensure_role(settings.CUSTOMER_ROLE, "Customer")
    await repo.assign_role_to_user(user.id, role.id)
    await session.refresh(user, attribute_names=["roles"])
    logger.info("Registered user %s", user.id)
    return _user_to_read(user)


# PUBLIC_INTERFACE
@router.post(
    "/login",
    response_model=TokenPair,
    summary="Login",
    description="Authenticate using OAuth2 password form and receive access/refresh tokens.",
)
async def login_for_tokens(
    form_data: OAuth2PasswordRequestForm = Depends(),
    session: AsyncSession = Depends(get_async_session),
) -> TokenPair:
    """Authenticate user and issue tokens."""
    repo = SecurityRepository(session)
    user = await repo.get_user_by_email(form_data.username)
    if not user or not verify_password(form_data.password, user.hashed_password):
        logger.warning("Failed login for %s", form_data.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User is inactive")
    return _issue_tokens(user)


# PUBLIC_INTERFACE
@router.post(
    "/refresh",
    response_model=TokenPair,
    summary="Refresh access token",
    description="Issue a new token pair from a valid refresh token.",
)
async def refresh_token(
    payload: RefreshRequest,
    session: AsyncSession = Depends(get_async_session),
) -> TokenPair:
    """Validate refresh token and issue a new access token pair."""
    try:
        claims: Dict[str, Any] = decode_token(payload.refresh_token)
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid refresh token")

    if claims.get("type") != "refresh":
        raise HTTPException(status_code=401, detail="Invalid token type")

    user_id = str(claims.get("sub") or "")
    user = await SecurityRepository(session).get_user_by_id(int(user_id)) if user_id.isdigit() else None
    if not user or not user.is_active:
        raise HTTPException(status_code=401, detail="User not found or inactive")
    return _issue_tokens(user)


# PUBLIC_INTERFACE
@router.get(
    "/me",
    response_model=UserRead,
    summary="Read current user",
    description="Return the current authenticated user and their roles.",
)
async def read_current_user(user=Depends(get_current_active_user)) -> UserRead:
    """Return current user profile."""
    return _user_to_read(user)
