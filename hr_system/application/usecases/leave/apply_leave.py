"""
===============================================================================
USE CASE: Apply Leave
===============================================================================

Name:
    Apply Leave Use Case

Business Goal:
    Registrar una solicitud de licencia en estado PENDING para la cuenta
    autenticada.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    ApplyLeaveUseCase

Responsibilities:
    - Verificar que el solicitante exista.
    - Validar el rango de fechas ANTES de escribir.
    - Persistir con status=PENDING, sin procesador, requested_at = ahora.

Collaborators:
    - AccountRepository.get_by_id
    - LeaveRequestRepository.create
    - Clock.now
    - domain.leave_policy.is_valid_date_range

-------------------------------------------------------------------------------
INPUTS / OUTPUTS
-------------------------------------------------------------------------------
Inputs:
    - ApplyLeaveInput(account_id, leave_type, start_date, end_date, reason)

Outputs:
    - LeaveRequestResult

Error Mapping:
    - ACCOUNT_NOT_FOUND: solicitante inexistente
    - VALIDATION_ERROR: leave_type vacío
    - INVALID_DATE_RANGE: end_date < start_date (no se escribe nada)
    - LEAVE_APPLY_FAILED: falla de storage en el insert
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID, uuid4

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from ....domain.entities import LeaveRequest, LeaveStatus
from ....domain.leave_policy import is_valid_date_range
from ....domain.repositories import AccountRepository, LeaveRequestRepository
from ....domain.services import Clock
from .leave_results import LeaveError, LeaveErrorCode, LeaveRequestResult


@dataclass(frozen=True)
class ApplyLeaveInput:
    account_id: UUID
    leave_type: str
    start_date: date
    end_date: date
    reason: str | None = None


class ApplyLeaveUseCase:
    """
    Use Case (Application Service / Command):
        Alta de solicitud de licencia.
    """

    def __init__(
        self,
        *,
        accounts: AccountRepository,
        leave_requests: LeaveRequestRepository,
        clock: Clock,
    ) -> None:
        self._accounts = accounts
        self._leave_requests = leave_requests
        self._clock = clock

    def execute(self, input_data: ApplyLeaveInput) -> LeaveRequestResult:
        # ---------------------------------------------------------------------
        # 1) El solicitante debe existir.
        # ---------------------------------------------------------------------
        if self._accounts.get_by_id(input_data.account_id) is None:
            return self._error(LeaveErrorCode.ACCOUNT_NOT_FOUND, "Account not found.")

        # ---------------------------------------------------------------------
        # 2) Validar inputs (sin escribir).
        # ---------------------------------------------------------------------
        leave_type = (input_data.leave_type or "").strip()
        if not leave_type:
            return self._error(
                LeaveErrorCode.VALIDATION_ERROR, "Leave type is required."
            )
        if not is_valid_date_range(input_data.start_date, input_data.end_date):
            return self._error(
                LeaveErrorCode.INVALID_DATE_RANGE,
                "End date must be on or after start date.",
            )

        # ---------------------------------------------------------------------
        # 3) Persistir en PENDING.
        # ---------------------------------------------------------------------
        leave_request = LeaveRequest(
            id=uuid4(),
            account_id=input_data.account_id,
            leave_type=leave_type,
            start_date=input_data.start_date,
            end_date=input_data.end_date,
            reason=input_data.reason,
            status=LeaveStatus.PENDING,
            requested_at=self._clock.now(),
        )
        try:
            created = self._leave_requests.create(leave_request)
        except DatabaseError as exc:
            logger.error(
                "ApplyLeave: insert failed",
                extra={"account_id": str(input_data.account_id), "error": exc.message},
            )
            return self._error(
                LeaveErrorCode.LEAVE_APPLY_FAILED, "Failed to submit leave request."
            )

        logger.info(
            "Solicitud de licencia creada",
            extra={
                "leave_request_id": str(created.id),
                "account_id": str(created.account_id),
            },
        )
        return LeaveRequestResult(leave_request=created.public())

    @staticmethod
    def _error(code: LeaveErrorCode, message: str) -> LeaveRequestResult:
        return LeaveRequestResult(error=LeaveError(code=code, message=message))
