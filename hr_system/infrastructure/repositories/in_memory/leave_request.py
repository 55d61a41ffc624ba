"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/leave_request.py
============================================================
Class: InMemoryLeaveRequestRepository

Responsibilities:
  - Implementar LeaveRequestRepository sobre InMemoryDatabase.
  - Embebido de requester / procesador en lecturas (emula los JOIN).
  - transition_status como compare-and-set bajo el lock de la base.
  - Orden alineado con Postgres: requested_at DESC, id DESC.
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from ....crosscutting.exceptions import DatabaseError
from ....domain.entities import LeaveRequest, LeaveStatus
from .store import InMemoryDatabase


class InMemoryLeaveRequestRepository:
    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    def _hydrate(self, leave_request: LeaveRequest) -> LeaveRequest:
        account = self._db.accounts.get(leave_request.account_id)
        approver = (
            self._db.accounts.get(leave_request.approver_id)
            if leave_request.approver_id
            else None
        )
        return replace(
            leave_request,
            account=replace(account) if account else None,
            approver=replace(approver) if approver else None,
        )

    @staticmethod
    def _sorted(items: List[LeaveRequest]) -> List[LeaveRequest]:
        return sorted(
            items,
            key=lambda r: (
                r.requested_at or datetime.min.replace(tzinfo=timezone.utc),
                str(r.id),
            ),
            reverse=True,
        )

    def create(self, leave_request: LeaveRequest) -> LeaveRequest:
        with self._db.lock:
            if leave_request.account_id not in self._db.accounts:
                raise DatabaseError(
                    "insert on leave_requests violates foreign key constraint "
                    "fk_leave_requests_account_id__accounts"
                )
            now = self._db.now()
            stored = replace(
                leave_request,
                requested_at=leave_request.requested_at or now,
                updated_at=now,
                account=None,
                approver=None,
            )
            self._db.leave_requests[stored.id] = stored
            return self._hydrate(stored)

    def get_by_id(self, request_id: UUID) -> Optional[LeaveRequest]:
        with self._db.lock:
            stored = self._db.leave_requests.get(request_id)
            return self._hydrate(stored) if stored else None

    def list_all(self) -> List[LeaveRequest]:
        with self._db.lock:
            items = [self._hydrate(r) for r in self._db.leave_requests.values()]
        return self._sorted(items)

    def list_by_account(self, account_id: UUID) -> List[LeaveRequest]:
        with self._db.lock:
            items = [
                self._hydrate(r)
                for r in self._db.leave_requests.values()
                if r.account_id == account_id
            ]
        return self._sorted(items)

    def transition_status(
        self,
        request_id: UUID,
        *,
        expected_status: LeaveStatus,
        status: LeaveStatus,
        approver_id: UUID,
        approved_at: datetime,
        reason: Optional[str],
        update_reason: bool,
    ) -> Optional[LeaveRequest]:
        with self._db.lock:
            current = self._db.leave_requests.get(request_id)
            if current is None or current.status != expected_status:
                return None
            updated = replace(
                current,
                status=status,
                approver_id=approver_id,
                approved_at=approved_at,
                reason=reason if update_reason else current.reason,
                updated_at=self._db.now(),
            )
            self._db.leave_requests[request_id] = updated
            return self._hydrate(updated)
