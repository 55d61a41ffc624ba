"""
===============================================================================
TARJETA CRC — identity/token_codec.py
===============================================================================

Módulo:
    Codec de tokens de acceso (JWT firmado, HS256)

Responsabilidades:
    - Firmar un set de claims {sub, email, role, iat, nbf, exp, iss, typ, jti}.
    - Verificar firma, algoritmo, issuer, claims mínimos y ventana temporal.
    - Distinguir token vencido (TokenExpiredError) de token inválido.

Colaboradores:
    - PyJWT (encode/decode)
    - domain.services.Clock (tiempo inyectado: exp/nbf se evalúan contra él)
    - identity.errors

Decisiones de diseño:
    - Puro: sin I/O. El chequeo de sesión vive en identity.sessions.
    - Solo HMAC (HS256): cualquier otro "alg" (incluido "none") es inválido.
    - La ventana temporal NO la evalúa PyJWT (usa el reloj del sistema);
      se evalúa acá contra el Clock inyectado.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import jwt

from ..domain.entities import AccountRole
from ..domain.services import Clock
from .errors import TokenExpiredError, TokenGenerationError, TokenInvalidError

# ---------------------------------------------------------------------------
# Constantes (evitan strings mágicos)
# ---------------------------------------------------------------------------

JWT_ALGORITHM: str = "HS256"

CLAIM_SUB: str = "sub"
CLAIM_EMAIL: str = "email"
CLAIM_ROLE: str = "role"
CLAIM_IAT: str = "iat"
CLAIM_NBF: str = "nbf"
CLAIM_EXP: str = "exp"
CLAIM_ISS: str = "iss"
CLAIM_TYP: str = "typ"
CLAIM_JTI: str = "jti"

TOKEN_TYPE_ACCESS: str = "access"

_REQUIRED_CLAIMS = [CLAIM_SUB, CLAIM_EMAIL, CLAIM_ROLE, CLAIM_IAT, CLAIM_EXP]


@dataclass(frozen=True, slots=True)
class Claims:
    """Identidad contenida en un token verificado."""

    subject_id: UUID
    email: str
    role: AccountRole
    issued_at: datetime
    expires_at: datetime


def _from_timestamp(value: object) -> datetime:
    return datetime.fromtimestamp(int(value), tz=timezone.utc)


class JWTTokenCodec:
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Clase:
      JWTTokenCodec

    Responsabilidades:
      - sign(): claims -> token
      - verify(): token -> Claims (o TokenInvalidError / TokenExpiredError)

    Colaboradores:
      - PyJWT, Clock
    ----------------------------------------------------------------------------
    """

    def __init__(self, *, secret: str, issuer: str, clock: Clock) -> None:
        self._secret = secret
        self._issuer = issuer
        self._clock = clock

    def sign(
        self,
        *,
        subject_id: UUID,
        email: str,
        role: AccountRole,
        ttl_seconds: int,
    ) -> str:
        now = self._clock.now()
        issued_at = int(now.timestamp())

        payload: dict[str, object] = {
            CLAIM_SUB: str(subject_id),
            CLAIM_EMAIL: email,
            CLAIM_ROLE: int(role),
            CLAIM_IAT: issued_at,
            CLAIM_NBF: issued_at,
            CLAIM_EXP: int((now + timedelta(seconds=ttl_seconds)).timestamp()),
            CLAIM_ISS: self._issuer,
            CLAIM_TYP: TOKEN_TYPE_ACCESS,
            # R: jti hace único cada token aunque dos logins caigan en el mismo segundo.
            CLAIM_JTI: uuid4().hex,
        }

        try:
            return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as exc:
            raise TokenGenerationError(
                "Failed to sign access token.", original_error=exc
            ) from exc

    def verify(self, token: str) -> Claims:
        if not token:
            raise TokenInvalidError("Token is empty.")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                issuer=self._issuer,
                options={
                    "require": _REQUIRED_CLAIMS,
                    "verify_exp": False,
                    "verify_nbf": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError as exc:
            raise TokenInvalidError("Token is invalid.", original_error=exc) from exc

        token_type = payload.get(CLAIM_TYP)
        # R: si viene typ, lo validamos; si no viene, lo aceptamos.
        if token_type is not None and token_type != TOKEN_TYPE_ACCESS:
            raise TokenInvalidError("Unexpected token type.")

        try:
            claims = Claims(
                subject_id=UUID(str(payload[CLAIM_SUB])),
                email=str(payload[CLAIM_EMAIL]),
                role=AccountRole(int(payload[CLAIM_ROLE])),
                issued_at=_from_timestamp(payload[CLAIM_IAT]),
                expires_at=_from_timestamp(payload[CLAIM_EXP]),
            )
            not_before = (
                _from_timestamp(payload[CLAIM_NBF]) if CLAIM_NBF in payload else None
            )
        except (TypeError, ValueError) as exc:
            raise TokenInvalidError(
                "Token claims are malformed.", original_error=exc
            ) from exc

        now = self._clock.now()
        if not_before is not None and now < not_before:
            raise TokenInvalidError("Token is not valid yet.")
        if now > claims.expires_at:
            raise TokenExpiredError("Token has expired.")

        return claims
