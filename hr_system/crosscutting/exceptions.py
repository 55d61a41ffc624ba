"""
===============================================================================
TARJETA CRC — hr_system/crosscutting/exceptions.py (Errores internos tipados)
===============================================================================

Responsabilidades:
  - Raíz común (HRSystemError) para errores de infraestructura e identidad.
  - Asignar un error_id por instancia: el cliente lo recibe en `errors[]` y
    el log lo registra junto al mensaje real.
  - Conservar la excepción del driver en `original_error` para diagnóstico.

Colaboradores:
  - api/exception_handlers.py (tabla tipo → status HTTP)
  - identity/errors.py (credenciales, tokens, sesiones)
  - infrastructure/* (psycopg / redis → DatabaseError / CacheError)

Notas:
  - `message` es para logs; nunca se devuelve tal cual al cliente.
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class HRSystemError(Exception):
    """Error interno con código estable (por clase) e id único (por instancia)."""

    error_code: str = "HR_SYSTEM_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_id = error_id or uuid4().hex
        self.original_error = original_error

    def __repr__(self) -> str:
        return f"{type(self).__name__}(error_code={self.error_code!r}, error_id={self.error_id!r})"


class DatabaseError(HRSystemError):
    """PostgreSQL: conexión, pool, query, constraint, timeout o commit."""

    error_code = "DATABASE_ERROR"


class CacheError(HRSystemError):
    """Redis: conexión, timeout o comando fallido."""

    error_code = "CACHE_ERROR"
