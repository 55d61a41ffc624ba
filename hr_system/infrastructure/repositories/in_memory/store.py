"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/store.py
============================================================
Class: InMemoryDatabase

Responsibilities:
  - Mantener las "tablas" en memoria compartidas por todos los repos
    in-memory (accounts, employments, job_grades, leave_requests).
  - Proveer un RLock único: las operaciones y las transacciones del
    InMemoryUnitOfWork se serializan sobre él.
  - snapshot()/restore() para rollback.

Constraints / Notes:
  - Solo tests / APP_ENV=test. No persiste tras reiniciar.
  - Los repos guardan copias: nunca se muta in-place una entidad guardada,
    por eso el snapshot puede ser una copia superficial de cada dict.
============================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import RLock
from typing import Dict
from uuid import UUID

from ....domain.entities import Account, Employment, JobGrade, LeaveRequest


@dataclass(frozen=True)
class _Snapshot:
    accounts: Dict[UUID, Account]
    employments: Dict[UUID, Employment]
    job_grades: Dict[UUID, JobGrade]
    leave_requests: Dict[UUID, LeaveRequest]


@dataclass
class InMemoryDatabase:
    accounts: Dict[UUID, Account] = field(default_factory=dict)
    employments: Dict[UUID, Employment] = field(default_factory=dict)
    job_grades: Dict[UUID, JobGrade] = field(default_factory=dict)
    leave_requests: Dict[UUID, LeaveRequest] = field(default_factory=dict)
    lock: RLock = field(default_factory=RLock, repr=False)

    @staticmethod
    def now() -> datetime:
        return datetime.now(timezone.utc)

    def snapshot(self) -> _Snapshot:
        with self.lock:
            return _Snapshot(
                accounts=dict(self.accounts),
                employments=dict(self.employments),
                job_grades=dict(self.job_grades),
                leave_requests=dict(self.leave_requests),
            )

    def restore(self, snapshot: _Snapshot) -> None:
        with self.lock:
            self.accounts = dict(snapshot.accounts)
            self.employments = dict(snapshot.employments)
            self.job_grades = dict(snapshot.job_grades)
            self.leave_requests = dict(snapshot.leave_requests)
