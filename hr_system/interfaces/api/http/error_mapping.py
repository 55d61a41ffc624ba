"""
===============================================================================
TARJETA CRC — error_mapping.py (UseCase Error -> HTTP RFC7807)
===============================================================================

Responsabilidades:
  - Traducir códigos de error de casos de uso a HTTP Exceptions RFC7807.
  - Centralizar el mapeo para evitar duplicación en routers.
  - Mantener el dominio libre de HTTP.

Reglas:
  - Violaciones de reglas de negocio => 4xx con el código de dominio estable
    en errors[0].code.
  - Fallas de storage / hashing => 500 genérico (el detalle queda en logs).

Colaboradores:
  - application.usecases.* (AccountErrorCode, LeaveErrorCode, EmploymentErrorCode)
  - crosscutting.error_responses (validation_error, forbidden, etc.)
===============================================================================
"""

from __future__ import annotations

from enum import Enum
from uuid import UUID

from hr_system.application.usecases.accounts import AccountError, AccountErrorCode
from hr_system.application.usecases.employment import (
    EmploymentError,
    EmploymentErrorCode,
)
from hr_system.application.usecases.leave import LeaveError, LeaveErrorCode
from hr_system.crosscutting.error_responses import (
    AppHTTPException,
    conflict,
    forbidden,
    internal_error,
    not_found,
    unauthorized,
    validation_error,
)


def _with_code(exc: AppHTTPException, code: Enum) -> AppHTTPException:
    """Adjunta el código de dominio al problem+json."""
    exc.errors = [*(exc.errors or []), {"code": code.value}]
    return exc


def raise_account_error(error: AccountError, *, account_id: UUID | None = None) -> None:
    code = error.code
    if code == AccountErrorCode.FORBIDDEN:
        raise _with_code(forbidden(error.message), code)
    if code == AccountErrorCode.VALIDATION_ERROR:
        raise _with_code(validation_error(error.message), code)
    if code == AccountErrorCode.EMAIL_EXISTS:
        raise _with_code(conflict(error.message), code)
    if code == AccountErrorCode.ACCOUNT_NOT_FOUND:
        raise _with_code(not_found("Account", str(account_id or "-")), code)
    if code == AccountErrorCode.INVALID_CREDENTIALS:
        raise _with_code(unauthorized("Credenciales inválidas."), code)

    # R: PASSWORD_HASHING_FAILED / *_CREATION_FAILED / PASSWORD_UPDATE_FAILED /
    # INTERNAL_ERROR: el cliente no puede hacer nada distinto.
    raise _with_code(internal_error(), code)


def raise_leave_error(error: LeaveError, *, request_id: UUID | None = None) -> None:
    code = error.code
    if code in (LeaveErrorCode.VALIDATION_ERROR, LeaveErrorCode.INVALID_DATE_RANGE):
        raise _with_code(validation_error(error.message), code)
    if code == LeaveErrorCode.ACCOUNT_NOT_FOUND:
        raise _with_code(not_found("Account", "-"), code)
    if code == LeaveErrorCode.LEAVE_REQUEST_NOT_FOUND:
        raise _with_code(not_found("LeaveRequest", str(request_id or "-")), code)
    if code == LeaveErrorCode.INVALID_PROCESSOR:
        raise _with_code(forbidden(error.message), code)
    if code == LeaveErrorCode.INVALID_LEAVE_REQUEST_STATE:
        raise _with_code(conflict(error.message), code)

    raise _with_code(internal_error(), code)


def raise_employment_error(
    error: EmploymentError, *, employment_id: UUID | None = None
) -> None:
    code = error.code
    if code == EmploymentErrorCode.VALIDATION_ERROR:
        raise _with_code(validation_error(error.message), code)
    if code == EmploymentErrorCode.EMPLOYMENT_NOT_FOUND:
        raise _with_code(not_found("Employment", str(employment_id or "-")), code)
    if code in (
        EmploymentErrorCode.EMPLOYMENT_TERMINATED,
        EmploymentErrorCode.ALREADY_TERMINATED,
    ):
        raise _with_code(conflict(error.message), code)

    raise _with_code(internal_error(), code)
