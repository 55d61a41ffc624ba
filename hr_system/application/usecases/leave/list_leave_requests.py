"""
===============================================================================
USE CASE: List Leave Requests
===============================================================================

Business Goal:
    Listar solicitudes (todas para HR; las propias para un empleado) con el
    solicitante y el procesador embebidos, sin password_hash.

Collaborators:
    - AccountRepository.get_by_id (solo list_by_account)
    - LeaveRequestRepository.list_all / list_by_account

Error Mapping:
    - ACCOUNT_NOT_FOUND: la cuenta filtrada no existe
===============================================================================
"""

from __future__ import annotations

from uuid import UUID

from ....domain.repositories import AccountRepository, LeaveRequestRepository
from .leave_results import LeaveError, LeaveErrorCode, LeaveRequestListResult


class ListLeaveRequestsUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        leave_requests: LeaveRequestRepository,
    ) -> None:
        self._accounts = accounts
        self._leave_requests = leave_requests

    def list_all(self) -> LeaveRequestListResult:
        return LeaveRequestListResult(
            leave_requests=[r.public() for r in self._leave_requests.list_all()]
        )

    def list_by_account(self, account_id: UUID) -> LeaveRequestListResult:
        if self._accounts.get_by_id(account_id) is None:
            return LeaveRequestListResult(
                error=LeaveError(
                    code=LeaveErrorCode.ACCOUNT_NOT_FOUND,
                    message="Account not found.",
                )
            )
        return LeaveRequestListResult(
            leave_requests=[
                r.public() for r in self._leave_requests.list_by_account(account_id)
            ]
        )
