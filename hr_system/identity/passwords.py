"""
===============================================================================
TARJETA CRC — identity/passwords.py
===============================================================================

Módulo:
    Hashing de passwords (Argon2)

Responsabilidades:
    - Implementar domain.services.PasswordHasher con argon2-cffi.
    - Traducir fallas de la librería a PasswordHashingError.

Colaboradores:
    - argon2.PasswordHasher
    - identity.errors.PasswordHashingError
===============================================================================
"""

from __future__ import annotations

from argon2 import PasswordHasher
from argon2.exceptions import HashingError, InvalidHashError, VerificationError

from .errors import PasswordHashingError


class Argon2PasswordHasher:
    """Adapter argon2-cffi -> PasswordHasher."""

    def __init__(self, hasher: PasswordHasher | None = None) -> None:
        self._hasher = hasher or PasswordHasher()

    def hash(self, password: str) -> str:
        try:
            return self._hasher.hash(password)
        except (HashingError, TypeError) as exc:
            raise PasswordHashingError(
                "Failed to hash password.", original_error=exc
            ) from exc

    def verify(self, password_hash: str, password: str) -> bool:
        # VerifyMismatchError es subclase de VerificationError.
        try:
            return self._hasher.verify(password_hash, password)
        except (VerificationError, InvalidHashError):
            return False
