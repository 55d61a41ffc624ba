"""
===============================================================================
ACCOUNT USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Name:
    Account Use Case Results

Business Goal:
    Proveer modelos compartidos de resultados y errores para los casos de uso
    de cuentas (alta con employment, perfil, cambio de password).

Why (Context / Intención):
    - Los use cases devuelven resultados tipados en lugar de lanzar excepciones
      "hacia afuera": el router mapea code -> status HTTP en un solo lugar.
    - Los códigos son estables y viajan al cliente en el campo `code` del
      problem+json.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    account_results models (module)

Responsibilities:
    - AccountErrorCode: set acotado de códigos para el subdominio.
    - AccountError (code + message).
    - AccountResult (alta), ProfileResult (perfil), PasswordChangeResult.

Collaborators:
    - domain.entities.Account / Employment
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ....domain.entities import Account, Employment


class AccountErrorCode(str, Enum):
    """
    Códigos de error de cuentas.

      - FORBIDDEN: el actor no puede crear una cuenta con ese rol.
      - VALIDATION_ERROR: inputs inválidos (nombre vacío, job grade inexistente).
      - EMAIL_EXISTS: ya hay una cuenta con ese email.
      - ACCOUNT_NOT_FOUND: la cuenta no existe.
      - INVALID_CREDENTIALS: password actual incorrecto.
      - PASSWORD_HASHING_FAILED: el hasher falló.
      - ACCOUNT_CREATION_FAILED / EMPLOYMENT_CREATION_FAILED: insert fallido
        (se hizo rollback de toda la unidad).
      - PASSWORD_UPDATE_FAILED: no se pudo persistir el nuevo hash.
      - INTERNAL_ERROR: lookup/commit fallido o configuración faltante.
    """

    FORBIDDEN = "FORBIDDEN"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    EMAIL_EXISTS = "EMAIL_EXISTS"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    PASSWORD_HASHING_FAILED = "PASSWORD_HASHING_FAILED"
    ACCOUNT_CREATION_FAILED = "ACCOUNT_CREATION_FAILED"
    EMPLOYMENT_CREATION_FAILED = "EMPLOYMENT_CREATION_FAILED"
    PASSWORD_UPDATE_FAILED = "PASSWORD_UPDATE_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class AccountError:
    code: AccountErrorCode
    message: str


@dataclass
class AccountResult:
    """
    Resultado del alta de cuenta.

    Contrato:
      - éxito => account (sin password_hash) y employment presentes
      - fallo => error presente, nada persistido
    """

    account: Account | None = None
    employment: Employment | None = None
    error: AccountError | None = None


@dataclass
class ProfileResult:
    """Perfil propio: cuenta (sin hash) + employment si existe."""

    account: Account | None = None
    employment: Employment | None = None
    error: AccountError | None = None


@dataclass
class PasswordChangeResult:
    changed: bool = False
    error: AccountError | None = None
