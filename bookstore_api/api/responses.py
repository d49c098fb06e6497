from __future__ import annotations

from fastapi import HTTPException, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from bookstore_api.services.crud import OperationResult


# PUBLIC_INTERFACE
def to_response(result: OperationResult) -> Response:
    """
    Translate a service OperationResult into an HTTP response.

    400/404 are raised as HTTPException so the global handler renders the
    standard error envelope; 500 carries the handler's plain-text message.
    """
    if result.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        return PlainTextResponse(str(result.content), status_code=result.status_code)
    if not result.is_success:
        raise HTTPException(status_code=result.status_code, detail=result.content)
    if result.status_code == status.HTTP_204_NO_CONTENT:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return JSONResponse(status_code=result.status_code, content=jsonable_encoder(result.content))
