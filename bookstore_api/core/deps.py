from __future__ import annotations

import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore_api.core.security import decode_token
from bookstore_api.core.settings import AppSettings, get_app_settings
from bookstore_api.db.session import get_async_session
from bookstore_api.mappers import AuthorMapper, BookMapper
from bookstore_api.repositories.catalog import AuthorRepository, BookRepository
from bookstore_api.repositories.security import SecurityRepository
from bookstore_api.services.authors import AuthorService
from bookstore_api.services.books import BookService

logger = logging.getLogger(__name__)

# OAuth2 bearer (used by docs); login endpoint path referenced here
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


# PUBLIC_INTERFACE
async def get_current_user(
    token: str = Depends(oauth2_scheme),
    session: AsyncSession = Depends(get_async_session),
):
    """
    Resolve and return the current user from the Authorization bearer token.

    Raises:
        HTTPException: 401 when the token is invalid or the user no longer exists.
    """
    try:
        payload = decode_token(token)
    except JWTError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    if payload.get("type") != "access":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token type")

    user_id = str(payload.get("sub") or "")
    if not user_id.isdigit():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    repo = SecurityRepository(session)
    user = await repo.get_user_by_id(int(user_id))
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


# PUBLIC_INTERFACE
async def get_current_active_user(user=Depends(get_current_user)):
    """Ensure user is active."""
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Inactive user")
    return user


# PUBLIC_INTERFACE
def require_access(resource: str, action: str):
    """
    Create a dependency enforcing the access policy for `action` on `resource`.

    Any active user passes when the settings leave the action open; otherwise
    the user must hold ADMIN_ROLE.
    """

    async def _dep(
        user=Depends(get_current_active_user),
        settings: AppSettings = Depends(get_app_settings),
    ):
        if not settings.requires_role(resource, action):
            return user
        if settings.ADMIN_ROLE not in set(user.role_names):
            logger.warning("User %s lacks role %s for %s:%s", user.id, settings.ADMIN_ROLE, resource, action)
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient role")
        return user

    return _dep


# PUBLIC_INTERFACE
async def get_author_repository(session: AsyncSession = Depends(get_async_session)) -> AuthorRepository:
    return AuthorRepository(session)


# PUBLIC_INTERFACE
async def get_book_repository(session: AsyncSession = Depends(get_async_session)) -> BookRepository:
    return BookRepository(session)


# PUBLIC_INTERFACE
async def get_author_service(repo: AuthorRepository = Depends(get_author_repository)) -> AuthorService:
    """Build the Authors request handler for this request."""
    return AuthorService(repo, AuthorMapper())


# PUBLIC_INTERFACE
async def get_book_service(repo: BookRepository = Depends(get_book_repository)) -> BookService:
    """Build the Books request handler for this request."""
    return BookService(repo, BookMapper())
