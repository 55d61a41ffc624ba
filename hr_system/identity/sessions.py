"""
===============================================================================
TARJETA CRC — identity/sessions.py
===============================================================================

Módulo:
    Servicio de sesión única por cuenta (token firmado + slot en cache)

Responsabilidades:
    - issue(): firmar un token y registrarlo como LA sesión activa de la cuenta
      (key "session:<account_id>", TTL = vida del token).
    - validate(): verificar el token y exigir que sea exactamente el token
      registrado en el slot (un login posterior invalida los anteriores).
    - revoke(): cerrar la sesión activa (logout / cambio de password).

Colaboradores:
    - identity.token_codec.JWTTokenCodec
    - domain.cache.CachePort (Redis en runtime, memoria en tests)
    - crosscutting.logger

Reglas:
    - Last writer wins: el último issue() pisa el slot.
    - Cache miss => SessionExpiredOrRevokedError.
    - Cache caído => SessionCheckFailedError (nunca se trata como miss).
    - Nunca loguear tokens.
===============================================================================
"""

from __future__ import annotations

import hmac
from dataclasses import dataclass
from uuid import UUID

from ..crosscutting.exceptions import CacheError
from ..crosscutting.logger import logger
from ..domain.cache import CachePort
from ..domain.entities import Account
from .errors import (
    SessionCheckFailedError,
    SessionExpiredOrRevokedError,
    SessionTokenMismatchError,
    TokenCacheError,
)
from .token_codec import Claims, JWTTokenCodec

SESSION_KEY_PREFIX = "session:"


def session_key(account_id: UUID) -> str:
    return f"{SESSION_KEY_PREFIX}{account_id}"


@dataclass(frozen=True, slots=True)
class IssuedSession:
    token: str
    expires_in: int


class SessionService:
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Clase:
      SessionService

    Responsabilidades:
      - Emitir / validar / revocar la sesión única de una cuenta

    Colaboradores:
      - JWTTokenCodec, CachePort
    ----------------------------------------------------------------------------
    """

    def __init__(
        self, *, codec: JWTTokenCodec, cache: CachePort, ttl_seconds: int
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be > 0")
        self._codec = codec
        self._cache = cache
        self._ttl_seconds = int(ttl_seconds)

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    def issue(self, account: Account) -> IssuedSession:
        """
        Firma y registra la sesión.

        Errores:
          - TokenGenerationError: no se pudo firmar.
          - TokenCacheError: firmado pero no registrado; el caller NO debe
            entregar el token (validate() lo rechazaría igual).
        """
        token = self._codec.sign(
            subject_id=account.id,
            email=account.email,
            role=account.role,
            ttl_seconds=self._ttl_seconds,
        )

        try:
            self._cache.set(session_key(account.id), token, self._ttl_seconds)
        except CacheError as exc:
            logger.error(
                "SessionService: no se pudo registrar la sesión",
                extra={"account_id": str(account.id), "error": exc.message},
            )
            raise TokenCacheError(
                "Failed to store session token.", token=token, original_error=exc
            ) from exc

        logger.info("Sesión emitida", extra={"account_id": str(account.id)})
        return IssuedSession(token=token, expires_in=self._ttl_seconds)

    def validate(self, token: str) -> Claims:
        """
        Valida token + slot de sesión.

        Errores:
          - TokenInvalidError / TokenExpiredError (del codec)
          - SessionExpiredOrRevokedError: no hay sesión registrada
          - SessionCheckFailedError: el cache no respondió
          - SessionTokenMismatchError: hay otra sesión más nueva
        """
        claims = self._codec.verify(token)

        try:
            cached = self._cache.get(session_key(claims.subject_id))
        except CacheError as exc:
            logger.error(
                "SessionService: falló el chequeo de sesión",
                extra={"account_id": str(claims.subject_id), "error": exc.message},
            )
            raise SessionCheckFailedError(
                "Session check failed.", original_error=exc
            ) from exc

        if cached is None:
            raise SessionExpiredOrRevokedError("Session expired or revoked.")

        if not hmac.compare_digest(cached.encode("utf-8"), token.encode("utf-8")):
            logger.info(
                "Token rechazado: sesión reemplazada",
                extra={"account_id": str(claims.subject_id)},
            )
            raise SessionTokenMismatchError("Session token mismatch.")

        return claims

    def revoke(self, account_id: UUID) -> None:
        try:
            self._cache.delete(session_key(account_id))
        except CacheError as exc:
            raise SessionCheckFailedError(
                "Failed to revoke session.", original_error=exc
            ) from exc
        logger.info("Sesión revocada", extra={"account_id": str(account_id)})
