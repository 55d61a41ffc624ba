"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/job_grade.py
============================================================
Class: PostgresJobGradeRepository

Responsibilities:
  - Lectura del catálogo de escalafones (tabla job_grades).

Collaborators:
  - PostgresRepository
  - domain.entities.JobGrade
============================================================
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from ....domain.entities import JobGrade
from .base import PostgresRepository

_JOB_GRADE_COLUMNS = "id, code, name, description, min_salary, max_salary, created_at"


def _row_to_job_grade(row: tuple) -> JobGrade:
    return JobGrade(
        id=row[0],
        code=row[1],
        name=row[2],
        description=row[3],
        min_salary=row[4],
        max_salary=row[5],
        created_at=row[6],
    )


class PostgresJobGradeRepository(PostgresRepository):
    def get_by_id(self, job_grade_id: UUID) -> Optional[JobGrade]:
        row = self._fetchone(
            query=f"SELECT {_JOB_GRADE_COLUMNS} FROM job_grades WHERE id = %s",
            params=(job_grade_id,),
            context_msg="PostgresJobGradeRepository: get_by_id failed",
            extra={"job_grade_id": str(job_grade_id)},
        )
        return _row_to_job_grade(row) if row else None

    def get_by_code(self, code: str) -> Optional[JobGrade]:
        row = self._fetchone(
            query=f"SELECT {_JOB_GRADE_COLUMNS} FROM job_grades WHERE code = %s",
            params=(code,),
            context_msg="PostgresJobGradeRepository: get_by_code failed",
            extra={"code": code},
        )
        return _row_to_job_grade(row) if row else None

    def list_all(self) -> List[JobGrade]:
        rows = self._fetchall(
            query=f"SELECT {_JOB_GRADE_COLUMNS} FROM job_grades ORDER BY code ASC",
            params=(),
            context_msg="PostgresJobGradeRepository: list_all failed",
            extra={},
        )
        return [_row_to_job_grade(r) for r in rows]
