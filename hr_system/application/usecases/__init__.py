"""
===============================================================================
USE CASES (Public API / Exports)
===============================================================================

Subpaquetes:
  - accounts:   alta atómica Account+Employment, perfil, cambio de password
  - leave:      workflow de licencias (apply / approve / reject / consultas)
  - employment: consulta, edición y baja de registros laborales
  - job_grades: catálogo de escalafones
===============================================================================
"""

from .accounts import (
    ChangePasswordInput,
    ChangePasswordUseCase,
    CreateAccountInput,
    CreateAccountWithEmploymentUseCase,
    GetProfileUseCase,
)
from .employment import (
    GetEmploymentUseCase,
    ListEmploymentsUseCase,
    TerminateEmploymentUseCase,
    UpdateEmploymentInput,
    UpdateEmploymentUseCase,
)
from .job_grades import ListJobGradesUseCase
from .leave import (
    ApplyLeaveInput,
    ApplyLeaveUseCase,
    ApproveLeaveRequestUseCase,
    GetLeaveRequestUseCase,
    ListLeaveRequestsUseCase,
    RejectLeaveRequestUseCase,
)

__all__ = [
    # Accounts
    "ChangePasswordInput",
    "ChangePasswordUseCase",
    "CreateAccountInput",
    "CreateAccountWithEmploymentUseCase",
    "GetProfileUseCase",
    # Leave
    "ApplyLeaveInput",
    "ApplyLeaveUseCase",
    "ApproveLeaveRequestUseCase",
    "GetLeaveRequestUseCase",
    "ListLeaveRequestsUseCase",
    "RejectLeaveRequestUseCase",
    # Employment
    "GetEmploymentUseCase",
    "ListEmploymentsUseCase",
    "TerminateEmploymentUseCase",
    "UpdateEmploymentInput",
    "UpdateEmploymentUseCase",
    # Job grades
    "ListJobGradesUseCase",
]
