"""
===============================================================================
TARJETA CRC — domain/cache.py
===============================================================================

Módulo:
    Puerto de Cache key-value (Dominio)

Responsabilidades:
    - Definir el contrato (Protocol) del cache usado por sesiones y perfiles.
    - Habilitar Inversión de Dependencias:
        * identity/sessions y application/usecases dependen de esta interfaz
        * infrastructure/cache implementa backends concretos (memoria / Redis)

Colaboradores:
    - identity.sessions.SessionService (slot de sesión única por cuenta)
    - application.usecases.accounts.get_profile (read-through de perfiles)
    - infrastructure.cache: RedisCache / InMemoryCache

Restricciones / Reglas:
    - Este módulo ES dominio: no importa Redis.
    - "Miss" NO es error: get() devuelve None.
    - Fallas del backend SÍ son error: CacheError. Sesiones necesita
      distinguir "no hay sesión" de "no pude chequear".
===============================================================================
"""

from __future__ import annotations

from typing import Protocol


class CachePort(Protocol):
    """
    Interfaz de cache (strings).

    Semántica:
      - get(key) retorna None si no existe / expiró
      - set(key, value, ttl_seconds) guarda o sobreescribe (last writer wins)
      - delete(*keys) borra; borrar algo inexistente no es error
      - cualquier falla del backend lanza crosscutting.exceptions.CacheError
    """

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str, ttl_seconds: int) -> None: ...

    def delete(self, *keys: str) -> None: ...

    def ping(self) -> bool:
        """True si el backend responde; fallas lanzan CacheError."""
        ...
