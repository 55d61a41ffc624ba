"""
===============================================================================
USE CASE: Update Employment
===============================================================================

Business Goal:
    Actualizar los datos laborales de un registro activo (puesto, escalafón,
    salario, estado active/on_leave).

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Class:
    UpdateEmploymentUseCase

Responsibilities:
    - Aplicar solo los campos provistos (None = sin cambio).
    - Rechazar cambios sobre registros dados de baja.
    - La baja NO se hace acá: tiene su propio caso de uso.

Collaborators:
    - EmploymentRepository.get_by_id / update
    - JobGradeRepository.get_by_code

Error Mapping:
    - EMPLOYMENT_NOT_FOUND
    - EMPLOYMENT_TERMINATED
    - VALIDATION_ERROR: salario negativo, job grade inexistente, status=terminated
    - EMPLOYMENT_UPDATE_FAILED
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from uuid import UUID

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from ....domain.entities import EmploymentStatus
from ....domain.repositories import EmploymentRepository, JobGradeRepository
from .employment_results import EmploymentError, EmploymentErrorCode, EmploymentResult


@dataclass(frozen=True)
class UpdateEmploymentInput:
    employment_id: UUID
    position_title: str | None = None
    job_grade_code: str | None = None
    salary: Decimal | None = None
    status: EmploymentStatus | None = None


class UpdateEmploymentUseCase:
    def __init__(
        self,
        *,
        employments: EmploymentRepository,
        job_grades: JobGradeRepository,
    ) -> None:
        self._employments = employments
        self._job_grades = job_grades

    def execute(self, input_data: UpdateEmploymentInput) -> EmploymentResult:
        if input_data.salary is not None and input_data.salary < 0:
            return self._error(
                EmploymentErrorCode.VALIDATION_ERROR, "Salary must be non-negative."
            )
        if input_data.status == EmploymentStatus.TERMINATED:
            return self._error(
                EmploymentErrorCode.VALIDATION_ERROR,
                "Use the terminate operation to end an employment.",
            )

        current = self._employments.get_by_id(input_data.employment_id)
        if current is None:
            return self._error(
                EmploymentErrorCode.EMPLOYMENT_NOT_FOUND, "Employment not found."
            )
        if current.is_terminated:
            return self._error(
                EmploymentErrorCode.EMPLOYMENT_TERMINATED,
                "Terminated employments cannot be modified.",
            )

        changes: dict = {}
        if input_data.position_title is not None:
            changes["position_title"] = input_data.position_title.strip() or None
        if input_data.salary is not None:
            changes["salary"] = input_data.salary
        if input_data.status is not None:
            changes["status"] = input_data.status
        if input_data.job_grade_code is not None:
            grade = self._job_grades.get_by_code(input_data.job_grade_code.strip())
            if grade is None:
                return self._error(
                    EmploymentErrorCode.VALIDATION_ERROR, "Unknown job grade code."
                )
            changes["job_grade_id"] = grade.id

        if not changes:
            return EmploymentResult(employment=current)

        try:
            updated = self._employments.update(replace(current, **changes))
        except DatabaseError as exc:
            logger.error(
                "UpdateEmployment: update failed",
                extra={"employment_id": str(current.id), "error": exc.message},
            )
            return self._error(
                EmploymentErrorCode.EMPLOYMENT_UPDATE_FAILED,
                "Failed to update employment.",
            )
        if updated is None:
            return self._error(
                EmploymentErrorCode.EMPLOYMENT_NOT_FOUND, "Employment not found."
            )
        return EmploymentResult(employment=updated)

    @staticmethod
    def _error(code: EmploymentErrorCode, message: str) -> EmploymentResult:
        return EmploymentResult(error=EmploymentError(code=code, message=message))
