"""
===============================================================================
TARJETA CRC — identity/authentication.py
===============================================================================

Módulo:
    Authentication Gate (email + password -> Account)

Responsabilidades:
    - Buscar la cuenta por email y verificar el password.
    - No diferenciar “cuenta no existe” vs “password incorrecto”.
    - Devolver la cuenta SIN password_hash.

Colaboradores:
    - domain.repositories.AccountRepository
    - domain.services.PasswordHasher
    - identity.errors.InvalidCredentialsError

Notas:
    - El email solo se recorta (strip); la comparación es exacta.
    - Errores de storage (DatabaseError) se propagan: son fallas internas,
      no credenciales inválidas.
===============================================================================
"""

from __future__ import annotations

from ..crosscutting.logger import logger
from ..domain.entities import Account
from ..domain.repositories import AccountRepository
from ..domain.services import PasswordHasher
from .errors import InvalidCredentialsError


class AuthenticationService:
    def __init__(
        self, *, accounts: AccountRepository, password_hasher: PasswordHasher
    ) -> None:
        self._accounts = accounts
        self._hasher = password_hasher

    def authenticate(self, email: str, password: str) -> Account:
        normalized_email = (email or "").strip()
        if not normalized_email or not password:
            raise InvalidCredentialsError()

        account = self._accounts.get_by_email(normalized_email)
        if account is None or not self._hasher.verify(account.password_hash, password):
            logger.info("Login rechazado: credenciales inválidas")
            raise InvalidCredentialsError()

        return account.public()
