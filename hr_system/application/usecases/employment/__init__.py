"""Employment use cases (public exports)."""

from __future__ import annotations

from .employment_results import (
    EmploymentError,
    EmploymentErrorCode,
    EmploymentListResult,
    EmploymentResult,
)
from .get_employment import GetEmploymentUseCase, ListEmploymentsUseCase
from .terminate_employment import TerminateEmploymentUseCase
from .update_employment import UpdateEmploymentInput, UpdateEmploymentUseCase

__all__ = [
    "EmploymentError",
    "EmploymentErrorCode",
    "EmploymentListResult",
    "EmploymentResult",
    "GetEmploymentUseCase",
    "ListEmploymentsUseCase",
    "TerminateEmploymentUseCase",
    "UpdateEmploymentInput",
    "UpdateEmploymentUseCase",
]
