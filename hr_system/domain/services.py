"""
===============================================================================
TARJETA CRC — domain/services.py
===============================================================================

Módulo:
    Puertos de Servicios Externos (Protocols)

Responsabilidades:
    - Definir contratos para capacidades externas: reloj y hashing de passwords.
    - Proteger a application/identity de detalles del proveedor (argon2, time).

Colaboradores:
    - identity.passwords.Argon2PasswordHasher
    - infrastructure.clock.SystemClock
    - application/usecases, identity: consumen estos puertos.

Reglas:
    - SOLO interfaces: nada de implementación.
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Fuente de tiempo inyectable (tests usan relojes fijos)."""

    def now(self) -> datetime:
        """Instante actual, timezone-aware (UTC)."""
        ...


class PasswordHasher(Protocol):
    """Contrato de hashing de passwords."""

    def hash(self, password: str) -> str:
        """Hash con salt. Falla con identity.errors.PasswordHashingError."""
        ...

    def verify(self, password_hash: str, password: str) -> bool:
        """True si coincide. Nunca lanza por mismatch."""
        ...
