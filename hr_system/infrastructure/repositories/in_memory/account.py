"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/account.py
============================================================
Class: InMemoryAccountRepository

Responsibilities:
  - Implementar AccountRepository sobre InMemoryDatabase.
  - Emular uq_accounts_email (email duplicado => DatabaseError).
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional
from uuid import UUID

from ....crosscutting.exceptions import DatabaseError
from ....domain.entities import Account
from .store import InMemoryDatabase


class InMemoryAccountRepository:
    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    def get_by_email(self, email: str) -> Optional[Account]:
        with self._db.lock:
            for account in self._db.accounts.values():
                if account.email == email:
                    return replace(account)
        return None

    def get_by_id(self, account_id: UUID) -> Optional[Account]:
        with self._db.lock:
            account = self._db.accounts.get(account_id)
            return replace(account) if account else None

    def create(self, account: Account) -> Account:
        with self._db.lock:
            if account.id in self._db.accounts:
                raise DatabaseError(f"Duplicate account id: {account.id}")
            if any(a.email == account.email for a in self._db.accounts.values()):
                raise DatabaseError(
                    "duplicate key value violates unique constraint uq_accounts_email"
                )
            now = self._db.now()
            stored = replace(
                account,
                created_at=account.created_at or now,
                updated_at=account.updated_at or now,
            )
            self._db.accounts[stored.id] = stored
            return replace(stored)

    def update_password(
        self, account_id: UUID, password_hash: str
    ) -> Optional[Account]:
        with self._db.lock:
            current = self._db.accounts.get(account_id)
            if current is None:
                return None
            updated = replace(
                current, password_hash=password_hash, updated_at=self._db.now()
            )
            self._db.accounts[account_id] = updated
            return replace(updated)

    def ping(self) -> bool:
        return True
