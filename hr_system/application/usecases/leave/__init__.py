"""
===============================================================================
LEAVE USE CASES PACKAGE (Public API / Exports)
===============================================================================

Responsibilities:
    - Re-exportar el workflow de licencias: alta, aprobación, rechazo,
      consultas y el guard de procesador compartido.
===============================================================================
"""

from __future__ import annotations

from .apply_leave import ApplyLeaveInput, ApplyLeaveUseCase
from .get_leave_request import GetLeaveRequestUseCase
from .leave_results import (
    LeaveError,
    LeaveErrorCode,
    LeaveRequestListResult,
    LeaveRequestResult,
)
from .list_leave_requests import ListLeaveRequestsUseCase
from .process_leave_request import (
    ApproveLeaveRequestUseCase,
    RejectLeaveRequestUseCase,
    require_leave_processor,
)

__all__ = [
    "ApplyLeaveInput",
    "ApplyLeaveUseCase",
    "ApproveLeaveRequestUseCase",
    "GetLeaveRequestUseCase",
    "LeaveError",
    "LeaveErrorCode",
    "LeaveRequestListResult",
    "LeaveRequestResult",
    "ListLeaveRequestsUseCase",
    "RejectLeaveRequestUseCase",
    "require_leave_processor",
]
