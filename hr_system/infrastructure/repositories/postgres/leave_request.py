"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/leave_request.py
============================================================
Class: PostgresLeaveRequestRepository

Responsibilities:
  - Persistir solicitudes de licencia (tabla leave_requests).
  - Lecturas con requester y procesador embebidos (JOIN accounts).
  - Transición de estado como compare-and-set:
      UPDATE ... WHERE id = %s AND status = <esperado>
    Dos procesadores concurrentes: solo uno gana; el otro recibe None.

Collaborators:
  - PostgresRepository
  - postgres.account.row_to_account (mapping de cuentas embebidas)
  - domain.entities.LeaveRequest / LeaveStatus

Constraints / Notes:
  - Las cuentas embebidas traen password_hash: el caso de uso las limpia
    antes de exponerlas (LeaveRequest.public()).
  - Orden determinístico: requested_at DESC, id DESC.
============================================================
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from ....crosscutting.exceptions import DatabaseError
from ....domain.entities import LeaveRequest, LeaveStatus
from .account import row_to_account
from .base import ACCOUNT_FIELDS, PostgresRepository, account_columns

_LEAVE_FIELDS = (
    "id",
    "account_id",
    "leave_type",
    "start_date",
    "end_date",
    "reason",
    "status",
    "requested_at",
    "approver_id",
    "approved_at",
    "updated_at",
)

_LEAVE_COLUMNS = ", ".join(_LEAVE_FIELDS)

# R: SELECT con requester (a) y procesador (ap). FROM se completa por query.
_SELECT_WITH_ACCOUNTS = f"""
    SELECT {", ".join(f"lr.{c}" for c in _LEAVE_FIELDS)},
           {account_columns("a")},
           {account_columns("ap")}
"""

_JOINS = """
    JOIN accounts a ON a.id = lr.account_id
    LEFT JOIN accounts ap ON ap.id = lr.approver_id
"""

_ORDER_BY = "ORDER BY lr.requested_at DESC, lr.id DESC"


def _row_to_leave_request(row: tuple) -> LeaveRequest:
    base = len(_LEAVE_FIELDS)
    n_account = len(ACCOUNT_FIELDS)

    try:
        status = LeaveStatus(row[6])
    except ValueError as exc:
        raise DatabaseError(f"Invalid leave status in database: {row[6]}") from exc

    requester_row = row[base : base + n_account]
    approver_row = row[base + n_account : base + 2 * n_account]

    return LeaveRequest(
        id=row[0],
        account_id=row[1],
        leave_type=row[2],
        start_date=row[3],
        end_date=row[4],
        reason=row[5],
        status=status,
        requested_at=row[7],
        approver_id=row[8],
        approved_at=row[9],
        updated_at=row[10],
        account=row_to_account(requester_row) if requester_row[0] else None,
        approver=row_to_account(approver_row) if approver_row[0] else None,
    )


class PostgresLeaveRequestRepository(PostgresRepository):
    """R: Implementación PostgreSQL del repositorio de licencias."""

    def create(self, leave_request: LeaveRequest) -> LeaveRequest:
        row = self._fetchone(
            query=f"""
                WITH inserted AS (
                    INSERT INTO leave_requests (
                        id, account_id, leave_type, start_date, end_date,
                        reason, status, requested_at
                    )
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                    RETURNING {_LEAVE_COLUMNS}
                )
                {_SELECT_WITH_ACCOUNTS}
                FROM inserted lr
                {_JOINS}
            """,
            params=(
                leave_request.id,
                leave_request.account_id,
                leave_request.leave_type,
                leave_request.start_date,
                leave_request.end_date,
                leave_request.reason,
                leave_request.status.value,
                leave_request.requested_at,
            ),
            context_msg="PostgresLeaveRequestRepository: create failed",
            extra={
                "leave_request_id": str(leave_request.id),
                "account_id": str(leave_request.account_id),
            },
        )
        if not row:
            raise DatabaseError(
                "PostgresLeaveRequestRepository: create failed (no row returned)"
            )
        return _row_to_leave_request(row)

    def get_by_id(self, request_id: UUID) -> Optional[LeaveRequest]:
        row = self._fetchone(
            query=f"""
                {_SELECT_WITH_ACCOUNTS}
                FROM leave_requests lr
                {_JOINS}
                WHERE lr.id = %s
            """,
            params=(request_id,),
            context_msg="PostgresLeaveRequestRepository: get_by_id failed",
            extra={"leave_request_id": str(request_id)},
        )
        return _row_to_leave_request(row) if row else None

    def list_all(self) -> List[LeaveRequest]:
        rows = self._fetchall(
            query=f"""
                {_SELECT_WITH_ACCOUNTS}
                FROM leave_requests lr
                {_JOINS}
                {_ORDER_BY}
            """,
            params=(),
            context_msg="PostgresLeaveRequestRepository: list_all failed",
            extra={},
        )
        return [_row_to_leave_request(r) for r in rows]

    def list_by_account(self, account_id: UUID) -> List[LeaveRequest]:
        rows = self._fetchall(
            query=f"""
                {_SELECT_WITH_ACCOUNTS}
                FROM leave_requests lr
                {_JOINS}
                WHERE lr.account_id = %s
                {_ORDER_BY}
            """,
            params=(account_id,),
            context_msg="PostgresLeaveRequestRepository: list_by_account failed",
            extra={"account_id": str(account_id)},
        )
        return [_row_to_leave_request(r) for r in rows]

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
        """
        R: CAS en una sola sentencia: UPDATE condicionado + re-lectura con joins.

        Sin fila => no existe o ya no está en expected_status.
        """
        row = self._fetchone(
            query=f"""
                WITH updated AS (
                    UPDATE leave_requests
                    SET status = %s,
                        approver_id = %s,
                        approved_at = %s,
                        reason = CASE WHEN %s::boolean THEN %s::text ELSE reason END,
                        updated_at = now()
                    WHERE id = %s AND status = %s
                    RETURNING {_LEAVE_COLUMNS}
                )
                {_SELECT_WITH_ACCOUNTS}
                FROM updated lr
                {_JOINS}
            """,
            params=(
                status.value,
                approver_id,
                approved_at,
                update_reason,
                reason,
                request_id,
                expected_status.value,
            ),
            context_msg="PostgresLeaveRequestRepository: transition_status failed",
            extra={
                "leave_request_id": str(request_id),
                "status": status.value,
                "approver_id": str(approver_id),
            },
        )
        return _row_to_leave_request(row) if row else None
