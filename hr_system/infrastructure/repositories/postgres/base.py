"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/base.py
============================================================
Class: PostgresRepository (base)

Responsibilities:
  - Resolver la conexión a usar:
      * conexión "atada" (dentro de una transacción del UnitOfWork), o
      * una conexión del pool por operación (autocommit del pool).
  - Helpers de ejecución con logging estructurado + DatabaseError.

Collaborators:
  - psycopg / psycopg_pool.ConnectionPool
  - infrastructure.db.pool.get_pool
  - crosscutting.exceptions.DatabaseError
  - crosscutting.logger.logger

Constraints / Notes:
  - Repos puros: sin reglas de negocio.
  - SQL parametrizado siempre.
============================================================
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Iterator, Optional

import psycopg
from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger

# R: columnas de accounts, reutilizadas en joins (requester / approver).
ACCOUNT_FIELDS = (
    "id",
    "first_name",
    "last_name",
    "email",
    "password_hash",
    "role",
    "phone_number",
    "created_at",
    "updated_at",
)


def account_columns(alias: str = "") -> str:
    prefix = f"{alias}." if alias else ""
    return ", ".join(f"{prefix}{name}" for name in ACCOUNT_FIELDS)


class PostgresRepository:
    """R: Base con pool/conexión inyectable y helpers DRY."""

    def __init__(
        self,
        pool: Optional[ConnectionPool] = None,
        *,
        connection: Optional[psycopg.Connection] = None,
    ):
        # R: Pool inyectable para tests; en producción se obtiene por factory global.
        self._pool = pool
        self._conn = connection

    def _get_pool(self) -> ConnectionPool:
        if self._pool is not None:
            return self._pool

        from ...db.pool import get_pool

        return get_pool()

    @contextmanager
    def _connection(self) -> Iterator[psycopg.Connection]:
        if self._conn is not None:
            yield self._conn
            return
        with self._get_pool().connection() as conn:
            yield conn

    def _fetchone(
        self, *, query: str, params: Iterable[object], context_msg: str, extra: dict
    ) -> tuple | None:
        try:
            with self._connection() as conn:
                return conn.execute(query, tuple(params)).fetchone()
        except psycopg.Error as exc:
            logger.exception(context_msg, extra={**extra, "error": str(exc)})
            raise DatabaseError(f"{context_msg}: {exc}", original_error=exc) from exc

    def _fetchall(
        self, *, query: str, params: Iterable[object], context_msg: str, extra: dict
    ) -> list[tuple]:
        try:
            with self._connection() as conn:
                return conn.execute(query, tuple(params)).fetchall()
        except psycopg.Error as exc:
            logger.exception(context_msg, extra={**extra, "error": str(exc)})
            raise DatabaseError(f"{context_msg}: {exc}", original_error=exc) from exc

    def ping(self) -> bool:
        """Health check: SELECT 1."""
        try:
            with self._connection() as conn:
                conn.execute("SELECT 1").fetchone()
            return True
        except (psycopg.Error, DatabaseError) as exc:
            logger.warning("Postgres ping falló", extra={"error": str(exc)})
            return False
