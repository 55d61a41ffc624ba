"""
===============================================================================
TARJETA CRC — hr_system/api/auth_routes.py (Autenticación y sesión)
===============================================================================

Responsabilidades:
  - Exponer login / logout / me.
  - Emitir la sesión única de la cuenta (SessionService.issue).
  - Traducir errores de identidad a RFC7807 sin filtrar el motivo exacto.

Patrones aplicados:
  - Adapter / Presentation Layer: traduce HTTP ↔ servicios de identidad.
  - Fail-safe security: si la autenticación falla, se deniega por defecto.

Colaboradores:
  - identity.authentication.AuthenticationService
  - identity.sessions.SessionService
  - identity.dependencies.require_principal
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..container import get_authentication_service, get_session_service
from ..crosscutting.error_responses import (
    OPENAPI_ERROR_RESPONSES,
    internal_error,
    service_unavailable,
    unauthorized,
)
from ..crosscutting.logger import logger
from ..identity.authentication import AuthenticationService
from ..identity.dependencies import Principal, require_principal
from ..identity.errors import (
    InvalidCredentialsError,
    SessionCheckFailedError,
    TokenCacheError,
    TokenGenerationError,
)
from ..identity.sessions import SessionService
from ..interfaces.api.http.mappers import to_account_res
from ..interfaces.api.http.schemas import LoginReq, LoginRes, MeRes

router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)

_require_principal = require_principal()


@router.post("/auth/login", response_model=LoginRes, tags=["auth"])
def login(
    req: LoginReq,
    auth: AuthenticationService = Depends(get_authentication_service),
    sessions: SessionService = Depends(get_session_service),
):
    """
    Inicia sesión y devuelve el token de acceso.

    - Un login nuevo invalida cualquier token previo de la misma cuenta.
    """
    try:
        account = auth.authenticate(req.email, req.password)
    except InvalidCredentialsError as exc:
        exc_http = unauthorized("Credenciales inválidas.")
        exc_http.errors = [{"code": exc.error_code}]
        raise exc_http from exc

    try:
        issued = sessions.issue(account)
    except TokenGenerationError as exc:
        logger.error("Login: no se pudo firmar el token", extra={"error": exc.message})
        raise internal_error() from exc
    except TokenCacheError as exc:
        raise service_unavailable("session store") from exc

    return LoginRes(
        access_token=issued.token,
        expires_in=issued.expires_in,
        account=to_account_res(account),
    )


@router.post("/auth/logout", tags=["auth"])
def logout(
    principal: Principal = Depends(_require_principal),
    sessions: SessionService = Depends(get_session_service),
):
    """Cierra la sesión activa (el token deja de validar)."""
    try:
        sessions.revoke(principal.account_id)
    except SessionCheckFailedError as exc:
        raise service_unavailable("session store") from exc
    return {"ok": True}


@router.get("/auth/me", response_model=MeRes, tags=["auth"])
def me(principal: Principal = Depends(_require_principal)):
    return MeRes(
        account_id=principal.account_id,
        email=principal.email,
        role=principal.role,
    )
