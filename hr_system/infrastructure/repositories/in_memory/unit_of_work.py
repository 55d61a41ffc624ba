"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/unit_of_work.py
============================================================
Class: InMemoryUnitOfWork

Responsibilities:
  - Transacción in-memory: toma el lock de la base durante todo el bloque
    (aislamiento serializable trivial) y guarda un snapshot.
  - Si el bloque lanza => restore(snapshot) y re-lanza (rollback).

Collaborators:
  - InMemoryDatabase
  - InMemoryAccountRepository / InMemoryEmploymentRepository
============================================================
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from ....crosscutting.logger import logger
from .account import InMemoryAccountRepository
from .employment import InMemoryEmploymentRepository
from .store import InMemoryDatabase


@dataclass(frozen=True)
class InMemoryProvisioningTransaction:
    accounts: InMemoryAccountRepository
    employments: InMemoryEmploymentRepository


class InMemoryUnitOfWork:
    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    @contextmanager
    def begin(self) -> Iterator[InMemoryProvisioningTransaction]:
        with self._db.lock:
            snapshot = self._db.snapshot()
            try:
                yield InMemoryProvisioningTransaction(
                    accounts=InMemoryAccountRepository(self._db),
                    employments=InMemoryEmploymentRepository(self._db),
                )
            except BaseException:
                self._db.restore(snapshot)
                logger.info("InMemoryUnitOfWork: rollback")
                raise
