"""
===============================================================================
TARJETA CRC — identity/dependencies.py
===============================================================================

Módulo:
    Dependencias FastAPI de autenticación / autorización

Responsabilidades:
    - Extraer el token desde `Authorization: Bearer <token>`.
    - Validarlo contra SessionService (firma + sesión única).
    - Exponer el Principal autenticado y chequear roles.

Colaboradores:
    - identity.sessions.SessionService (via container.get_session_service)
    - crosscutting.error_responses: unauthorized / forbidden / service_unavailable
    - hr_system.context (account_id para logs)

Decisiones de diseño:
    - Todas las variantes de token/sesión inválida responden el MISMO 401;
      el motivo concreto queda en logs.
    - Si el cache de sesiones no responde => 503 (no es culpa del cliente).
    - Dependencias sync: la validación hace I/O bloqueante (Redis) y FastAPI
      las corre en threadpool.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable
from uuid import UUID

from fastapi import Depends, Header, Request

from ..container import get_session_service
from ..context import set_account_context
from ..crosscutting.error_responses import (
    forbidden,
    service_unavailable,
    unauthorized,
)
from ..crosscutting.logger import logger
from ..domain.entities import AccountRole
from .errors import SessionCheckFailedError, SessionError, TokenInvalidError
from .sessions import SessionService

INVALID_TOKEN_DETAIL = "Token inválido o expirado."


@dataclass(frozen=True, slots=True)
class Principal:
    """Identidad autenticada del request."""

    account_id: UUID
    email: str
    role: AccountRole


def _extract_bearer_token(authorization: str | None) -> str | None:
    """Extrae token desde `Authorization: Bearer <token>`."""
    if not authorization:
        return None
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    token = parts[1].strip()
    return token or None


def require_principal() -> Callable:
    """Dependency FastAPI: requiere sesión activa."""

    def dependency(
        request: Request,
        authorization: str | None = Header(None, alias="Authorization"),
        sessions: SessionService = Depends(get_session_service),
    ) -> Principal:
        token = _extract_bearer_token(authorization)
        if not token:
            raise unauthorized("Falta token Bearer.")

        try:
            claims = sessions.validate(token)
        except SessionCheckFailedError as exc:
            raise service_unavailable("session store") from exc
        except (TokenInvalidError, SessionError) as exc:
            logger.info("Token rechazado", extra={"reason": exc.error_code})
            raise unauthorized(INVALID_TOKEN_DETAIL) from exc

        principal = Principal(
            account_id=claims.subject_id, email=claims.email, role=claims.role
        )
        request.state.principal = principal
        set_account_context(str(principal.account_id))
        return principal

    return dependency


def require_roles(*roles: AccountRole) -> Callable:
    """Dependency FastAPI: requiere sesión activa con alguno de los roles."""
    allowed = frozenset(AccountRole(r) for r in roles)
    principal_dependency = require_principal()

    def dependency(principal: Principal = Depends(principal_dependency)) -> Principal:
        if principal.role not in allowed:
            raise forbidden("Rol insuficiente.")
        return principal

    return dependency
