"""
===============================================================================
CRC CARD — infrastructure/db/pool.py
===============================================================================

Componente:
  Pool de conexiones PostgreSQL (singleton)

Responsabilidades:
  - Inicializar, exponer y cerrar el pool de conexiones.
  - Configurar conexiones: statement_timeout (deadline por statement).

Colaboradores:
  - psycopg_pool.ConnectionPool
  - api/main.py (lifespan: init_pool / close_pool)

Principios:
  - Fail-fast (doble init, uso sin init)
  - Encapsulación (pool global único)
  - El timeout llega por parámetro: este módulo no lee Settings.
===============================================================================
"""

from __future__ import annotations

import threading
from functools import partial
from typing import Optional

from psycopg_pool import ConnectionPool

from ...crosscutting.logger import logger
from .errors import PoolAlreadyInitializedError, PoolNotInitializedError

_pool: Optional[ConnectionPool] = None
_pool_lock = threading.Lock()


def _configure_connection(conn, *, statement_timeout_ms: int) -> None:
    """
    Configura una conexión nueva del pool.

    statement_timeout es el guardrail contra queries colgadas: cada operación
    de repositorio queda acotada en el tiempo.
    """
    if statement_timeout_ms > 0:
        conn.execute(f"SET statement_timeout = {int(statement_timeout_ms)}")
        conn.commit()


def init_pool(
    database_url: str,
    min_size: int,
    max_size: int,
    *,
    statement_timeout_ms: int = 0,
) -> ConnectionPool:
    """Inicializa el pool (una vez por proceso)."""
    global _pool

    with _pool_lock:
        if _pool is not None:
            raise PoolAlreadyInitializedError("El pool ya fue inicializado.")

        logger.info(
            "Inicializando pool DB",
            extra={
                "min_size": min_size,
                "max_size": max_size,
                "statement_timeout_ms": statement_timeout_ms,
            },
        )

        _pool = ConnectionPool(
            conninfo=database_url,
            min_size=min_size,
            max_size=max_size,
            configure=partial(
                _configure_connection, statement_timeout_ms=statement_timeout_ms
            ),
            open=True,
        )

        logger.info("Pool DB inicializado")
        return _pool


def get_pool() -> ConnectionPool:
    """Retorna el pool singleton."""
    if _pool is None:
        raise PoolNotInitializedError(
            "Pool no inicializado. Llamar init_pool() primero."
        )
    return _pool


def close_pool() -> None:
    """Cierra el pool (idempotente)."""
    global _pool

    with _pool_lock:
        if _pool is not None:
            logger.info("Cerrando pool DB")
            try:
                _pool.close()
            finally:
                _pool = None
            logger.info("Pool DB cerrado")


def reset_pool() -> None:
    """Reset para tests (no propaga errores de close)."""
    global _pool

    with _pool_lock:
        if _pool is not None:
            try:
                _pool.close()
            except Exception as exc:  # noqa: BLE001
                logger.warning("reset_pool: close falló", extra={"error": str(exc)})
        _pool = None
