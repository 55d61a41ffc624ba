"""
===============================================================================
USE CASE: Terminate Employment
===============================================================================

Business Goal:
    Dar de baja un registro laboral. El estado TERMINATED es definitivo.

Error Mapping:
    - EMPLOYMENT_NOT_FOUND
    - ALREADY_TERMINATED
    - VALIDATION_ERROR: fecha de baja anterior a la de alta
    - EMPLOYMENT_UPDATE_FAILED
===============================================================================
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from uuid import UUID

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from ....domain.entities import EmploymentStatus
from ....domain.repositories import EmploymentRepository
from ....domain.services import Clock
from .employment_results import EmploymentError, EmploymentErrorCode, EmploymentResult


class TerminateEmploymentUseCase:
    def __init__(self, *, employments: EmploymentRepository, clock: Clock) -> None:
        self._employments = employments
        self._clock = clock

    def execute(
        self, employment_id: UUID, termination_date: date | None = None
    ) -> EmploymentResult:
        current = self._employments.get_by_id(employment_id)
        if current is None:
            return self._error(
                EmploymentErrorCode.EMPLOYMENT_NOT_FOUND, "Employment not found."
            )
        if current.is_terminated:
            return self._error(
                EmploymentErrorCode.ALREADY_TERMINATED,
                "Employment is already terminated.",
            )

        effective_date = termination_date or self._clock.now().date()
        if current.hire_date is not None and effective_date < current.hire_date:
            return self._error(
                EmploymentErrorCode.VALIDATION_ERROR,
                "Termination date cannot be before hire date.",
            )

        try:
            updated = self._employments.update(
                replace(
                    current,
                    status=EmploymentStatus.TERMINATED,
                    termination_date=effective_date,
                )
            )
        except DatabaseError as exc:
            logger.error(
                "TerminateEmployment: update failed",
                extra={"employment_id": str(employment_id), "error": exc.message},
            )
            return self._error(
                EmploymentErrorCode.EMPLOYMENT_UPDATE_FAILED,
                "Failed to terminate employment.",
            )
        if updated is None:
            return self._error(
                EmploymentErrorCode.EMPLOYMENT_NOT_FOUND, "Employment not found."
            )

        logger.info(
            "Employment dado de baja",
            extra={"employment_id": str(employment_id), "account_id": str(current.account_id)},
        )
        return EmploymentResult(employment=updated)

    @staticmethod
    def _error(code: EmploymentErrorCode, message: str) -> EmploymentResult:
        return EmploymentResult(error=EmploymentError(code=code, message=message))
