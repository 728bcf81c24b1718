# person_api/api/error_handlers.py
"""
Handlers globais de exceção.

Todas as respostas de erro têm o mesmo formato: ``{"message": ..., "error": ...}``.
- PersonHTTPException (erro vindo de um handler) -> status do ErrorKind
- RequestValidationError (body/path inválido)   -> 400
- Exception (qualquer outra coisa)               -> 500, sem detalhes internos
"""
import logging
from typing import Any, Dict

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from person_api.core.errors import ErrorKind, PersonError

logger = logging.getLogger("persons.api")


class PersonHTTPException(HTTPException):
    def __init__(self, error: PersonError):
        super().__init__(status_code=error.status_code, detail=error.message)
        self.kind = error.kind


def _error_body(message: str, kind: str, **extra: Any) -> Dict[str, Any]:
    return {"message": message, "error": kind, **extra}


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        kind = getattr(exc, "kind", None)
        if kind is None:
            # 404/405 do próprio roteamento
            kind = ErrorKind.NOT_FOUND if exc.status_code == 404 else "http_error"
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(str(exc.detail), getattr(kind, "value", kind)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body(
                _validation_message(exc),
                ErrorKind.VALIDATION.value,
                details=jsonable_encoder(exc.errors()),
            ),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("Internal server error", ErrorKind.STORAGE.value),
        )
