"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/unit_of_work.py
============================================================
Class: PostgresUnitOfWork

Responsibilities:
  - Abrir UNA conexión + transacción y exponer repositorios atados a ella.
  - Commit al salir normalmente; rollback si el bloque lanza.
  - Traducir fallas de commit / conexión a DatabaseError.

Collaborators:
  - psycopg (conn.transaction())
  - PostgresAccountRepository / PostgresEmploymentRepository (connection=conn)
  - application.usecases.accounts.create_account (alta atómica)

Notes:
  - Las excepciones del bloque (incluidos aborts de negocio) atraviesan
    conn.transaction() => rollback, y se re-lanzan sin envolver.
============================================================
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

import psycopg
from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from .account import PostgresAccountRepository
from .employment import PostgresEmploymentRepository


@dataclass(frozen=True)
class PostgresProvisioningTransaction:
    accounts: PostgresAccountRepository
    employments: PostgresEmploymentRepository


class PostgresUnitOfWork:
    def __init__(self, pool: Optional[ConnectionPool] = None):
        self._pool = pool

    def _get_pool(self) -> ConnectionPool:
        if self._pool is not None:
            return self._pool

        from ...db.pool import get_pool

        return get_pool()

    @contextmanager
    def begin(self) -> Iterator[PostgresProvisioningTransaction]:
        try:
            with self._get_pool().connection() as conn:
                with conn.transaction():
                    yield PostgresProvisioningTransaction(
                        accounts=PostgresAccountRepository(connection=conn),
                        employments=PostgresEmploymentRepository(connection=conn),
                    )
        except psycopg.Error as exc:
            logger.exception(
                "PostgresUnitOfWork: transaction failed", extra={"error": str(exc)}
            )
            raise DatabaseError(
                f"PostgresUnitOfWork: transaction failed: {exc}", original_error=exc
            ) from exc
