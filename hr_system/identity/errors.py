"""
===============================================================================
TARJETA CRC — identity/errors.py
===============================================================================

Módulo:
    Errores tipados de identidad (credenciales, tokens, sesiones)

Responsabilidades:
    - Dar a cada falla de autenticación un tipo propio (sin strings mágicos).
    - Permitir distinguir "token vencido" de "token inválido" y
      "sesión revocada" de "no pude consultar el cache".

Jerarquía:
    IdentityError (HRSystemError)
      ├── InvalidCredentialsError
      ├── PasswordHashingError
      ├── TokenError
      │     ├── TokenGenerationError
      │     ├── TokenCacheError          (.token: el token firmado, no usable)
      │     └── TokenInvalidError
      │           └── TokenExpiredError
      └── SessionError
            ├── SessionExpiredOrRevokedError
            ├── SessionTokenMismatchError
            └── SessionCheckFailedError

Colaboradores:
    - identity.token_codec / identity.sessions / identity.authentication
    - identity.dependencies (mapea a 401 / 503)
===============================================================================
"""

from __future__ import annotations

from ..crosscutting.exceptions import HRSystemError


class IdentityError(HRSystemError):
    error_code: str = "IDENTITY_ERROR"


class InvalidCredentialsError(IdentityError):
    """Email inexistente o password incorrecto (indistinguibles a propósito)."""

    error_code: str = "INVALID_CREDENTIALS"

    def __init__(self, message: str = "Invalid credentials.", **kwargs):
        super().__init__(message, **kwargs)


class PasswordHashingError(IdentityError):
    error_code: str = "PASSWORD_HASHING_FAILED"


class TokenError(IdentityError):
    error_code: str = "TOKEN_ERROR"


class TokenGenerationError(TokenError):
    error_code: str = "TOKEN_GENERATION_FAILED"


class TokenCacheError(TokenError):
    """El token se firmó pero no se pudo registrar como sesión activa."""

    error_code: str = "TOKEN_CACHE_FAILED"

    def __init__(self, message: str, *, token: str, **kwargs):
        super().__init__(message, **kwargs)
        self.token = token


class TokenInvalidError(TokenError):
    error_code: str = "TOKEN_INVALID"


class TokenExpiredError(TokenInvalidError):
    error_code: str = "TOKEN_EXPIRED"


class SessionError(IdentityError):
    error_code: str = "SESSION_ERROR"


class SessionExpiredOrRevokedError(SessionError):
    error_code: str = "SESSION_EXPIRED_OR_REVOKED"


class SessionTokenMismatchError(SessionError):
    """Hay otra sesión activa más nueva para la misma cuenta."""

    error_code: str = "SESSION_TOKEN_MISMATCH"


class SessionCheckFailedError(SessionError):
    """El backend de cache falló: no se puede afirmar ni negar la sesión."""

    error_code: str = "SESSION_CHECK_FAILED"
