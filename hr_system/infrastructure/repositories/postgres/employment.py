"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/employment.py
============================================================
Class: PostgresEmploymentRepository

Responsibilities:
  - CRUD de registros laborales (tabla employments).
  - Mapear filas -> `Employment` validando `EmploymentStatus`.

Collaborators:
  - PostgresRepository (pool / conexión de transacción)
  - domain.entities.Employment / EmploymentStatus
============================================================
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from ....crosscutting.exceptions import DatabaseError
from ....domain.entities import Employment, EmploymentStatus
from .base import PostgresRepository

_EMPLOYMENT_COLUMNS = """
    id, account_id, job_grade_id, position_title, salary, hire_date,
    termination_date, status, created_at, updated_at
"""

_EMPLOYMENT_ORDER_BY = "ORDER BY created_at DESC, id DESC"


def _row_to_employment(row: tuple) -> Employment:
    try:
        status = EmploymentStatus(row[7])
    except ValueError as exc:
        raise DatabaseError(f"Invalid employment status in database: {row[7]}") from exc

    return Employment(
        id=row[0],
        account_id=row[1],
        job_grade_id=row[2],
        position_title=row[3],
        salary=row[4],
        hire_date=row[5],
        termination_date=row[6],
        status=status,
        created_at=row[8],
        updated_at=row[9],
    )


class PostgresEmploymentRepository(PostgresRepository):
    """R: Implementación PostgreSQL del repositorio de employments."""

    def create(self, employment: Employment) -> Employment:
        row = self._fetchone(
            query=f"""
                INSERT INTO employments (
                    id, account_id, job_grade_id, position_title, salary,
                    hire_date, termination_date, status
                )
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                RETURNING {_EMPLOYMENT_COLUMNS}
            """,
            params=(
                employment.id,
                employment.account_id,
                employment.job_grade_id,
                employment.position_title,
                employment.salary,
                employment.hire_date,
                employment.termination_date,
                employment.status.value,
            ),
            context_msg="PostgresEmploymentRepository: create failed",
            extra={
                "employment_id": str(employment.id),
                "account_id": str(employment.account_id),
            },
        )
        if not row:
            raise DatabaseError(
                "PostgresEmploymentRepository: create failed (no row returned)"
            )
        return _row_to_employment(row)

    def get_by_id(self, employment_id: UUID) -> Optional[Employment]:
        row = self._fetchone(
            query=f"SELECT {_EMPLOYMENT_COLUMNS} FROM employments WHERE id = %s",
            params=(employment_id,),
            context_msg="PostgresEmploymentRepository: get_by_id failed",
            extra={"employment_id": str(employment_id)},
        )
        return _row_to_employment(row) if row else None

    def get_by_account_id(self, account_id: UUID) -> Optional[Employment]:
        row = self._fetchone(
            query=f"""
                SELECT {_EMPLOYMENT_COLUMNS}
                FROM employments
                WHERE account_id = %s
            """,
            params=(account_id,),
            context_msg="PostgresEmploymentRepository: get_by_account_id failed",
            extra={"account_id": str(account_id)},
        )
        return _row_to_employment(row) if row else None

    def update(self, employment: Employment) -> Optional[Employment]:
        row = self._fetchone(
            query=f"""
                UPDATE employments
                SET job_grade_id = %s,
                    position_title = %s,
                    salary = %s,
                    hire_date = %s,
                    termination_date = %s,
                    status = %s,
                    updated_at = now()
                WHERE id = %s
                RETURNING {_EMPLOYMENT_COLUMNS}
            """,
            params=(
                employment.job_grade_id,
                employment.position_title,
                employment.salary,
                employment.hire_date,
                employment.termination_date,
                employment.status.value,
                employment.id,
            ),
            context_msg="PostgresEmploymentRepository: update failed",
            extra={"employment_id": str(employment.id)},
        )
        return _row_to_employment(row) if row else None

    def list_all(self) -> List[Employment]:
        rows = self._fetchall(
            query=f"SELECT {_EMPLOYMENT_COLUMNS} FROM employments {_EMPLOYMENT_ORDER_BY}",
            params=(),
            context_msg="PostgresEmploymentRepository: list_all failed",
            extra={},
        )
        return [_row_to_employment(r) for r in rows]
