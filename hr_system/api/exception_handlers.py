"""
===============================================================================
TARJETA CRC — hr_system/api/exception_handlers.py (Excepciones → problem+json)
===============================================================================

Responsabilidades:
  - Registrar los handlers de la app en un único punto.
  - Mapear errores de infraestructura (DB / cache) a 503 sin filtrar el
    mensaje del driver; el detalle queda en logs junto al error_id.
  - Convertir cualquier excepción no tipada en INTERNAL_ERROR.

Patrones aplicados:
  - Exception Mapping por tabla (tipo → status, code, detalle público).
  - Fail-safe: lo que no está en la tabla cae en el handler genérico.

Colaboradores:
  - crosscutting.error_responses: problem_response, handlers HTTP/validación
  - crosscutting.exceptions: HRSystemError, DatabaseError, CacheError
===============================================================================
"""

from __future__ import annotations

from functools import partial
from typing import NamedTuple

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..crosscutting.error_responses import (
    AppHTTPException,
    ErrorCode,
    app_exception_handler,
    problem_response,
    request_id_of,
    request_validation_handler,
)
from ..crosscutting.exceptions import CacheError, DatabaseError, HRSystemError
from ..crosscutting.logger import logger


class _ServiceErrorMapping(NamedTuple):
    status_code: int
    code: ErrorCode
    detail: str


# R: Orden: subclases antes que HRSystemError.
_SERVICE_ERRORS: dict[type[HRSystemError], _ServiceErrorMapping] = {
    DatabaseError: _ServiceErrorMapping(
        503, ErrorCode.DATABASE_ERROR, "Falla en operación de base de datos"
    ),
    CacheError: _ServiceErrorMapping(
        503, ErrorCode.SERVICE_UNAVAILABLE, "Servicio no disponible temporalmente: cache"
    ),
    HRSystemError: _ServiceErrorMapping(
        500, ErrorCode.INTERNAL_ERROR, "Ocurrió un error inesperado"
    ),
}


async def service_error_handler(request: Request, exc: HRSystemError) -> JSONResponse:
    mapping = next(
        m for exc_type, m in _SERVICE_ERRORS.items() if isinstance(exc, exc_type)
    )
    logger.error(
        "Error de servicio",
        extra={
            "code": mapping.code.value,
            "error_code": exc.error_code,
            "error_id": exc.error_id,
            "error": exc.message,
            "request_id": request_id_of(request),
        },
    )
    return problem_response(
        request,
        status_code=mapping.status_code,
        code=mapping.code,
        detail=mapping.detail,
        errors=[{"error_id": exc.error_id}],
    )


async def unhandled_exception_handler(
    request: Request, exc: Exception, *, expose_details: bool = False
) -> JSONResponse:
    """Log completo con stacktrace; al cliente solo un mensaje genérico."""
    logger.error(
        "Excepción no controlada",
        exc_info=exc,
        extra={"request_id": request_id_of(request), "error": str(exc)},
    )
    return problem_response(
        request,
        status_code=500,
        code=ErrorCode.INTERNAL_ERROR,
        detail=str(exc) if expose_details else "Error interno.",
    )


def register_exception_handlers(app: FastAPI, *, expose_details: bool = False) -> None:
    """
    Registra handlers en la app FastAPI.

    expose_details=True solo fuera de producción: devuelve str(exc) en 500.
    """
    for exc_type in _SERVICE_ERRORS:
        app.add_exception_handler(exc_type, service_error_handler)
    app.add_exception_handler(AppHTTPException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(
        Exception, partial(unhandled_exception_handler, expose_details=expose_details)
    )


__all__ = ["register_exception_handlers"]
