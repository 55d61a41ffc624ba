"""Repositorio in-memory del catálogo de escalafones (tests / APP_ENV=test)."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional
from uuid import UUID

from ....crosscutting.exceptions import DatabaseError
from ....domain.entities import JobGrade
from .store import InMemoryDatabase


class InMemoryJobGradeRepository:
    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    def add(self, job_grade: JobGrade) -> JobGrade:
        """Alta directa (el catálogo no tiene endpoint de escritura)."""
        with self._db.lock:
            if any(g.code == job_grade.code for g in self._db.job_grades.values()):
                raise DatabaseError(
                    "duplicate key value violates unique constraint uq_job_grades_code"
                )
            self._db.job_grades[job_grade.id] = replace(job_grade)
            return replace(job_grade)

    def get_by_id(self, job_grade_id: UUID) -> Optional[JobGrade]:
        with self._db.lock:
            grade = self._db.job_grades.get(job_grade_id)
            return replace(grade) if grade else None

    def get_by_code(self, code: str) -> Optional[JobGrade]:
        with self._db.lock:
            for grade in self._db.job_grades.values():
                if grade.code == code:
                    return replace(grade)
        return None

    def list_all(self) -> List[JobGrade]:
        with self._db.lock:
            return sorted(
                (replace(g) for g in self._db.job_grades.values()),
                key=lambda g: g.code,
            )
