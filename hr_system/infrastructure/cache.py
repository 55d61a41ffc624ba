"""
============================================================
TARJETA CRC — infrastructure/cache.py
============================================================
Module: Key-Value Cache (Backends)

Responsibilities:
  - Implementar domain.cache.CachePort sobre Redis (runtime) y memoria (tests).
  - Expiración por TTL (SETEX en Redis, timestamp en memoria).
  - Traducir fallas del backend a CacheError (nunca tratarlas como miss).
  - Namespacing opcional de claves.

Collaborators:
  - redis-py (Redis.from_url, timeouts por comando)
  - threading.Lock para thread-safety en backend in-memory
  - crosscutting.exceptions.CacheError

Policy / Design Notes:
  - DIP: identity/sessions y usecases dependen del puerto, no de Redis.
  - Sesiones NECESITA distinguir miss de falla: por eso acá no hay
    degradación silenciosa. Los callers best-effort (perfil) deciden.
  - Deadlines: socket_timeout / socket_connect_timeout acotan cada llamada.
============================================================
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Dict, Optional

import redis

from ..crosscutting.exceptions import CacheError
from ..crosscutting.logger import logger


# ============================================================
# Redis backend (TTL nativo + namespace)
# ============================================================
class RedisCache:
    """
    Cache Redis.

    Ventajas:
      - Compartido entre workers (la sesión única es global al deployment)
      - TTL nativo por clave (SETEX)
    """

    def __init__(
        self,
        *,
        redis_url: str | None = None,
        client: redis.Redis | None = None,
        prefix: str = "",
        socket_timeout_seconds: float = 2.0,
    ) -> None:
        if client is None:
            if not redis_url:
                raise ValueError("redis_url is required")
            client = redis.Redis.from_url(
                redis_url,
                decode_responses=True,
                socket_timeout=socket_timeout_seconds,
                socket_connect_timeout=socket_timeout_seconds,
            )
        self._client = client
        self._prefix = prefix

    def _k(self, key: str) -> str:
        """Compone clave namespaced."""
        return f"{self._prefix}{key}"

    def get(self, key: str) -> Optional[str]:
        try:
            return self._client.get(self._k(key))
        except redis.RedisError as exc:
            raise self._error("get", key, exc) from exc

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be > 0")
        try:
            self._client.setex(self._k(key), int(ttl_seconds), value)
        except redis.RedisError as exc:
            raise self._error("set", key, exc) from exc

    def delete(self, *keys: str) -> None:
        if not keys:
            return
        try:
            self._client.delete(*(self._k(k) for k in keys))
        except redis.RedisError as exc:
            raise self._error("delete", ",".join(keys), exc) from exc

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except redis.RedisError as exc:
            raise self._error("ping", "-", exc) from exc

    @staticmethod
    def _error(operation: str, key: str, exc: Exception) -> CacheError:
        logger.warning(
            "RedisCache: operación fallida",
            extra={"operation": operation, "cache_key": key, "error": str(exc)},
        )
        return CacheError(f"Redis {operation} failed: {exc}", original_error=exc)


# ============================================================
# In-memory backend (TTL)
# ============================================================
@dataclass(frozen=True, slots=True)
class CacheEntry:
    """
    Entrada de caché con vencimiento absoluto.

    Invariante:
      - expires_at está en la misma escala que el time_func del backend.
    """

    value: str
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class InMemoryCache:
    """
    Caché en memoria con TTL por entrada y Lock.

    Nota:
      - Para dev/tests. NO comparte estado entre procesos.
      - time_func inyectable para testear expiración sin sleeps.
    """

    def __init__(self, *, time_func: Callable[[], float] = time.monotonic) -> None:
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = Lock()
        self._now = time_func

    def get(self, key: str) -> Optional[str]:
        now = self._now()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.is_expired(now):
                self._entries.pop(key, None)
                return None
            return entry.value

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be > 0")
        with self._lock:
            self._entries[key] = CacheEntry(
                value=value, expires_at=self._now() + float(ttl_seconds)
            )

    def delete(self, *keys: str) -> None:
        with self._lock:
            for key in keys:
                self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def ping(self) -> bool:
        return True
