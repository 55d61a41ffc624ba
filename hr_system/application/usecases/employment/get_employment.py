"""Use cases de lectura de employments (por id y listado)."""

from __future__ import annotations

from uuid import UUID

from ....domain.repositories import EmploymentRepository
from .employment_results import (
    EmploymentError,
    EmploymentErrorCode,
    EmploymentListResult,
    EmploymentResult,
)


class GetEmploymentUseCase:
    def __init__(self, *, employments: EmploymentRepository) -> None:
        self._employments = employments

    def execute(self, employment_id: UUID) -> EmploymentResult:
        employment = self._employments.get_by_id(employment_id)
        if employment is None:
            return EmploymentResult(
                error=EmploymentError(
                    code=EmploymentErrorCode.EMPLOYMENT_NOT_FOUND,
                    message="Employment not found.",
                )
            )
        return EmploymentResult(employment=employment)


class ListEmploymentsUseCase:
    def __init__(self, *, employments: EmploymentRepository) -> None:
        self._employments = employments

    def execute(self) -> EmploymentListResult:
        return EmploymentListResult(employments=self._employments.list_all())
