"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/employment.py
============================================================
Class: InMemoryEmploymentRepository

Responsibilities:
  - Implementar EmploymentRepository sobre InMemoryDatabase.
  - Emular la FK employments.account_id -> accounts.id y la unicidad
    de un employment por cuenta.
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from ....crosscutting.exceptions import DatabaseError
from ....domain.entities import Employment
from .store import InMemoryDatabase


class InMemoryEmploymentRepository:
    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    def create(self, employment: Employment) -> Employment:
        with self._db.lock:
            if employment.account_id not in self._db.accounts:
                raise DatabaseError(
                    "insert on employments violates foreign key constraint "
                    "fk_employments_account_id__accounts"
                )
            if any(
                e.account_id == employment.account_id
                for e in self._db.employments.values()
            ):
                raise DatabaseError(
                    "duplicate key value violates unique constraint "
                    "uq_employments_account_id"
                )
            now = self._db.now()
            stored = replace(
                employment,
                created_at=employment.created_at or now,
                updated_at=employment.updated_at or now,
            )
            self._db.employments[stored.id] = stored
            return replace(stored)

    def get_by_id(self, employment_id: UUID) -> Optional[Employment]:
        with self._db.lock:
            employment = self._db.employments.get(employment_id)
            return replace(employment) if employment else None

    def get_by_account_id(self, account_id: UUID) -> Optional[Employment]:
        with self._db.lock:
            for employment in self._db.employments.values():
                if employment.account_id == account_id:
                    return replace(employment)
        return None

    def update(self, employment: Employment) -> Optional[Employment]:
        with self._db.lock:
            if employment.id not in self._db.employments:
                return None
            updated = replace(employment, updated_at=self._db.now())
            self._db.employments[employment.id] = updated
            return replace(updated)

    def list_all(self) -> List[Employment]:
        with self._db.lock:
            items = [replace(e) for e in self._db.employments.values()]
        # R: mismo orden que Postgres: created_at DESC, id DESC
        return sorted(
            items,
            key=lambda e: (
                e.created_at or datetime.min.replace(tzinfo=timezone.utc),
                str(e.id),
            ),
            reverse=True,
        )
