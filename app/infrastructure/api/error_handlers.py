# app/infrastructure/api/error_handlers.py
"""
Traducción de errores a respuestas HTTP.

Todas las respuestas de error tienen la forma:
{
    "message": "Mensaje legible",
    "code": "CODIGO_DE_ERROR",
    "errors": [{"field": "...", "message": "..."}]   // solo en validación
}
"""
import logging
from typing import Dict, List, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.domain.exceptions import DomainError, PersistenceError

logger = logging.getLogger(__name__)


def create_error_response(
    status_code: int,
    message: str,
    error_code: str,
    errors: Optional[List[Dict[str, str]]] = None
) -> JSONResponse:
    content = {"message": message, "code": error_code}
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} en {request.method} {request.url.path}: {exc.message}", exc_info=exc)
    else:
        logger.warning(f"{exc.error_code} en {request.method} {request.url.path}: {exc.message}")
    return create_error_response(exc.status_code, exc.message, exc.error_code, exc.errors)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Los errores de Pydantic se devuelven con el mismo formato que ValidationError."""
    errors = []
    for error in exc.errors():
        # Se omite el primer elemento ('body', 'query'...) de la ruta del campo
        location = [str(part) for part in error["loc"][1:]] or [str(part) for part in error["loc"]]
        errors.append({"field": ".".join(location), "message": error["msg"]})

    logger.warning(f"Error de validación en {request.method} {request.url.path}: {len(errors)} campo(s).")
    return create_error_response(
        status.HTTP_400_BAD_REQUEST,
        "Datos de entrada no válidos",
        "VALIDATION_ERROR",
        errors,
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"Error de base de datos en {request.method} {request.url.path}", exc_info=exc)
    error = PersistenceError("Error de acceso a la base de datos")
    return create_error_response(error.status_code, error.message, error.error_code)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Error inesperado en {request.method} {request.url.path}", exc_info=exc)
    return create_error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Error interno del servidor",
        "INTERNAL_SERVER_ERROR",
    )


def register_exception_handlers(app):
    app.add_exception_handler(DomainError, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
