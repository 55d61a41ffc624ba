"""Use case: obtener una solicitud de licencia por id (cuentas sin hash)."""

from __future__ import annotations

from uuid import UUID

from ....domain.repositories import LeaveRequestRepository
from .leave_results import LeaveError, LeaveErrorCode, LeaveRequestResult


class GetLeaveRequestUseCase:
    def __init__(self, *, leave_requests: LeaveRequestRepository) -> None:
        self._leave_requests = leave_requests

    def execute(self, request_id: UUID) -> LeaveRequestResult:
        leave_request = self._leave_requests.get_by_id(request_id)
        if leave_request is None:
            return LeaveRequestResult(
                error=LeaveError(
                    code=LeaveErrorCode.LEAVE_REQUEST_NOT_FOUND,
                    message="Leave request not found.",
                )
            )
        return LeaveRequestResult(leave_request=leave_request.public())
