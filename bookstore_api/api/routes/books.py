from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, Body, Depends, Path, status

from bookstore_api.api.responses import to_response
from bookstore_api.core.deps import get_book_service, require_access
from bookstore_api.schemas.books import BookCreate, BookRead, BookUpdate
from bookstore_api.services.books import BookService

router = APIRouter(prefix="/books", tags=["Books"])

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"description": "Bad input"},
    status.HTTP_404_NOT_FOUND: {"description": "Book not found"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Something failed"},
}


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[BookRead],
    summary="Get all books",
    responses={500: _ERRORS[500]},
    dependencies=[Depends(require_access("books", "read"))],
)
async def get_books(service: BookService = Depends(get_book_service)):
    return to_response(await service.list())


# PUBLIC_INTERFACE
@router.get(
    "/{book_id}",
    response_model=BookRead,
    summary="Get a book by id",
    responses={404: _ERRORS[404], 500: _ERRORS[500]},
    dependencies=[Depends(require_access("books", "read"))],
)
async def get_book(
    book_id: int = Path(...),
    service: BookService = Depends(get_book_service),
):
    return to_response(await service.get(book_id))


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=BookRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a book",
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": BookCreate.model_json_schema(by_alias=True)}}}},
    responses={400: _ERRORS[400], 500: _ERRORS[500]},
    dependencies=[Depends(require_access("books", "create"))],
)
async def create_book(
    payload: Any = Body(default=None),
    service: BookService = Depends(get_book_service),
):
    return to_response(await service.create(payload))


# PUBLIC_INTERFACE
@router.put(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update a book",
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": BookUpdate.model_json_schema(by_alias=True)}}}},
    responses=_ERRORS,
    dependencies=[Depends(require_access("books", "update"))],
)
async def update_book(
    book_id: int = Path(...),
    payload: Any = Body(default=None),
    service: BookService = Depends(get_book_service),
):
    return to_response(await service.update(book_id, payload))


# PUBLIC_INTERFACE
@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a book by id",
    responses=_ERRORS,
    dependencies=[Depends(require_access("books", "delete"))],
)
async def delete_book(
    book_id: int = Path(...),
    service: BookService = Depends(get_book_service),
):
    return to_response(await service.delete(book_id))
