from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, Body, Depends, Path, status

from bookstore_api.api.responses import to_response
from bookstore_api.core.deps import get_author_service, require_access
from bookstore_api.schemas.authors import AuthorCreate, AuthorRead, AuthorUpdate
from bookstore_api.services.authors import AuthorService

router = APIRouter(prefix="/authors", tags=["Authors"])

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"description": "Bad input"},
    status.HTTP_404_NOT_FOUND: {"description": "Author not found"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Something failed"},
}


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[AuthorRead],
    summary="Get all authors",
    responses={500: _ERRORS[500]},
    dependencies=[Depends(require_access("authors", "read"))],
)
async def get_authors(service: AuthorService = Depends(get_author_service)):
    return to_response(await service.list())


# PUBLIC_INTERFACE
@router.get(
    "/{author_id}",
    response_model=AuthorRead,
    summary="Get an author by id",
    responses={404: _ERRORS[404], 500: _ERRORS[500]},
    dependencies=[Depends(require_access("authors", "read"))],
)
async def get_author(
    author_id: int = Path(...),
    service: AuthorService = Depends(get_author_service),
):
    return to_response(await service.get(author_id))


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=AuthorRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create an author",
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": AuthorCreate.model_json_schema(by_alias=True)}}}},
    responses={400: _ERRORS[400], 500: _ERRORS[500]},
    dependencies=[Depends(require_access("authors", "create"))],
)
async def create_author(
    payload: Any = Body(default=None),
    service: AuthorService = Depends(get_author_service),
):
    return to_response(await service.create(payload))


# PUBLIC_INTERFACE
@router.put(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update an author",
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": AuthorUpdate.model_json_schema(by_alias=True)}}}},
    responses=_ERRORS,
    dependencies=[Depends(require_access("authors", "update"))],
)
async def update_author(
    author_id: int = Path(...),
    payload: Any = Body(default=None),
    service: AuthorService = Depends(get_author_service),
):
    return to_response(await service.update(author_id, payload))


# PUBLIC_INTERFACE
@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove an author by id",
    responses=_ERRORS,
    dependencies=[Depends(require_access("authors", "delete"))],
)
async def delete_author(
    author_id: int = Path(...),
    service: AuthorService = Depends(get_author_service),
):
    return to_response(await service.delete(author_id))
