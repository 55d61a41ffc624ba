"""Use case: catálogo de escalafones (lectura)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ....domain.entities import JobGrade
from ....domain.repositories import JobGradeRepository


@dataclass
class JobGradeListResult:
    job_grades: List[JobGrade] = field(default_factory=list)


class ListJobGradesUseCase:
    def __init__(self, *, job_grades: JobGradeRepository) -> None:
        self._job_grades = job_grades

    def execute(self) -> JobGradeListResult:
        return JobGradeListResult(job_grades=self._job_grades.list_all())
