"""
===============================================================================
TARJETA CRC — hr_system/crosscutting/error_responses.py (Problem Details)
===============================================================================

Responsabilidades:
  - Definir el catálogo de códigos HTTP estables (ErrorCode).
  - Serializar todo error como `application/problem+json` (RFC 7807).
  - Proveer factories para los errores que levantan routers y dependencias.
  - Adjuntar request_id y códigos de dominio en `errors[]`.

Colaboradores:
  - crosscutting/middleware.py (request.state.request_id)
  - api/exception_handlers.py (errores de infraestructura y no controlados)
  - interfaces/api/http/error_mapping.py (errores de casos de uso)

Contrato de payload:
  {"type", "title", "status", "detail", "code", "instance", "errors"?}
  - code:   categoría HTTP estable (FORBIDDEN, CONFLICT, ...).
  - errors: detalles; el código de dominio viaja como {"code": "EMAIL_EXISTS"}.
===============================================================================
"""

from __future__ import annotations

from enum import Enum
from http import HTTPStatus
from typing import Any, Mapping

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"
PROBLEM_TYPE_PREFIX = "urn:hr-system:problem:"


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    DATABASE_ERROR = "DATABASE_ERROR"


class ProblemDetail(BaseModel):
    type: str
    title: str
    status: int
    detail: str
    code: ErrorCode
    instance: str | None = None
    errors: list[dict[str, Any]] | None = None


def _openapi_problem(description: str) -> dict[str, Any]:
    return {
        "description": description,
        "model": ProblemDetail,
        "content": {
            PROBLEM_JSON_MEDIA_TYPE: {
                "schema": {"$ref": "#/components/schemas/ProblemDetail"}
            }
        },
    }


OPENAPI_ERROR_RESPONSES = {
    str(status.value): _openapi_problem(f"{status.phrase} (problem+json)")
    for status in (
        HTTPStatus.UNAUTHORIZED,
        HTTPStatus.FORBIDDEN,
        HTTPStatus.NOT_FOUND,
        HTTPStatus.CONFLICT,
        HTTPStatus.UNPROCESSABLE_ENTITY,
        HTTPStatus.SERVICE_UNAVAILABLE,
    )
}


class AppHTTPException(HTTPException):
    """HTTPException con ErrorCode estable y detalles para `errors[]`."""

    def __init__(
        self,
        status_code: int,
        code: ErrorCode,
        detail: str,
        errors: list[dict[str, Any]] | None = None,
        headers: Mapping[str, str] | None = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.code = code
        self.errors = errors


# -----------------------------------------------------------------------------
# Factories
# -----------------------------------------------------------------------------
def validation_error(
    detail: str, errors: list[dict[str, Any]] | None = None
) -> AppHTTPException:
    return AppHTTPException(422, ErrorCode.VALIDATION_ERROR, detail, errors)


def not_found(resource: str, identifier: str) -> AppHTTPException:
    return AppHTTPException(
        404, ErrorCode.NOT_FOUND, f"{resource} '{identifier}' no encontrado"
    )


def conflict(
    detail: str, errors: list[dict[str, Any]] | None = None
) -> AppHTTPException:
    return AppHTTPException(409, ErrorCode.CONFLICT, detail, errors)


def unauthorized(detail: str = "Autenticación requerida") -> AppHTTPException:
    # R: RFC 6750 exige el challenge en toda respuesta 401 de un recurso Bearer.
    return AppHTTPException(
        401, ErrorCode.UNAUTHORIZED, detail, headers={"WWW-Authenticate": "Bearer"}
    )


def forbidden(detail: str = "Acceso denegado") -> AppHTTPException:
    return AppHTTPException(403, ErrorCode.FORBIDDEN, detail)


def internal_error(detail: str = "Ocurrió un error inesperado") -> AppHTTPException:
    return AppHTTPException(500, ErrorCode.INTERNAL_ERROR, detail)


def service_unavailable(service: str) -> AppHTTPException:
    return AppHTTPException(
        503,
        ErrorCode.SERVICE_UNAVAILABLE,
        f"Servicio no disponible temporalmente: {service}",
    )


# -----------------------------------------------------------------------------
# Serialización
# -----------------------------------------------------------------------------
def request_id_of(request: Request) -> str | None:
    return getattr(getattr(request, "state", None), "request_id", None)


def problem_response(
    request: Request,
    *,
    status_code: int,
    code: ErrorCode,
    detail: str,
    errors: list[dict[str, Any]] | None = None,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Construye la respuesta problem+json agregando el request_id."""
    details = list(errors or [])
    request_id = request_id_of(request)
    if request_id:
        details.append({"request_id": request_id})

    problem = ProblemDetail(
        type=PROBLEM_TYPE_PREFIX + code.value.lower(),
        title=HTTPStatus(status_code).phrase,
        status=status_code,
        detail=detail,
        code=code,
        instance=request.url.path,
        errors=details or None,
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(mode="json", exclude_none=True),
        headers=dict(headers) if headers else None,
        media_type=PROBLEM_JSON_MEDIA_TYPE,
    )


async def app_exception_handler(
    request: Request, exc: AppHTTPException
) -> JSONResponse:
    return problem_response(
        request,
        status_code=exc.status_code,
        code=exc.code,
        detail=str(exc.detail),
        errors=exc.errors,
        headers=exc.headers,
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """422 de pydantic/FastAPI en formato problem+json (campo + mensaje)."""
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "msg": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return problem_response(
        request,
        status_code=422,
        code=ErrorCode.VALIDATION_ERROR,
        detail="Request inválido.",
        errors=errors,
    )
