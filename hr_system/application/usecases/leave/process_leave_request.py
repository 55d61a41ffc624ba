"""
===============================================================================
USE CASE: Approve / Reject Leave Request
===============================================================================

Name:
    Process Leave Request Use Cases (Approve + Reject)

Business Goal:
    Mover una solicitud PENDING a un estado terminal (APPROVED / REJECTED)
    exactamente una vez, y solo por HR o SuperAdmin.

Why (Context / Intención):
    - Aprobar y rechazar comparten TODAS las reglas salvo el estado destino y
      el manejo de `reason`; el guard de procesador es uno solo.
    - La persistencia es un compare-and-set (solo si sigue PENDING): dos
      procesadores concurrentes no pueden ganar ambos.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    ApproveLeaveRequestUseCase / RejectLeaveRequestUseCase

Responsibilities:
    1) Guard de procesador (existe + rol HR/SuperAdmin).
    2) Cargar la solicitud.
    3) Verificar transición válida desde el estado actual.
    4) Setear estado destino, approver_id y approved_at = ahora.
    5) Persistir de forma condicional y devolver la solicitud actualizada.

Collaborators:
    - AccountRepository.get_by_id
    - LeaveRequestRepository.get_by_id / transition_status
    - domain.leave_policy: is_leave_processor, can_transition
    - Clock.now

Error Mapping:
    - INVALID_PROCESSOR: procesador inexistente o sin rol
    - LEAVE_REQUEST_NOT_FOUND: solicitud inexistente
    - INVALID_LEAVE_REQUEST_STATE: ya no está PENDING (incluye carrera perdida)
    - LEAVE_REQUEST_UPDATE_FAILED: falla de storage en el update
===============================================================================
"""

from __future__ import annotations

from typing import Optional, Tuple
from uuid import UUID

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from ....domain.entities import Account, LeaveStatus
from ....domain.leave_policy import can_transition, is_leave_processor
from ....domain.repositories import AccountRepository, LeaveRequestRepository
from ....domain.services import Clock
from .leave_results import LeaveError, LeaveErrorCode, LeaveRequestResult


def require_leave_processor(
    accounts: AccountRepository, processor_id: UUID
) -> Tuple[Optional[Account], Optional[LeaveError]]:
    """
    Guard compartido por approve y reject.

    Retorna (account, None) si el procesador es válido, o (None, error).
    """
    processor = accounts.get_by_id(processor_id)
    if not is_leave_processor(processor):
        return None, LeaveError(
            code=LeaveErrorCode.INVALID_PROCESSOR,
            message="Only HR or SuperAdmin accounts can process leave requests.",
        )
    return processor, None


class _ProcessLeaveRequestUseCase:
    _target_status: LeaveStatus

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

    def _process(
        self,
        request_id: UUID,
        processor_id: UUID,
        *,
        reason: Optional[str] = None,
        update_reason: bool = False,
    ) -> LeaveRequestResult:
        # ---------------------------------------------------------------------
        # 1) Guard de procesador.
        # ---------------------------------------------------------------------
        _, guard_error = require_leave_processor(self._accounts, processor_id)
        if guard_error is not None:
            return LeaveRequestResult(error=guard_error)

        # ---------------------------------------------------------------------
        # 2) Cargar solicitud.
        # ---------------------------------------------------------------------
        current = self._leave_requests.get_by_id(request_id)
        if current is None:
            return self._error(
                LeaveErrorCode.LEAVE_REQUEST_NOT_FOUND, "Leave request not found."
            )

        # ---------------------------------------------------------------------
        # 3) Transición válida (terminales no se reprocesan).
        # ---------------------------------------------------------------------
        if not can_transition(current.status, self._target_status):
            return self._not_pending()

        # ---------------------------------------------------------------------
        # 4-5) Compare-and-set: solo aplica si sigue en el estado leído.
        # ---------------------------------------------------------------------
        try:
            updated = self._leave_requests.transition_status(
                request_id,
                expected_status=current.status,
                status=self._target_status,
                approver_id=processor_id,
                approved_at=self._clock.now(),
                reason=reason,
                update_reason=update_reason,
            )
        except DatabaseError as exc:
            logger.error(
                "ProcessLeaveRequest: update failed",
                extra={"leave_request_id": str(request_id), "error": exc.message},
            )
            return self._error(
                LeaveErrorCode.LEAVE_REQUEST_UPDATE_FAILED,
                "Failed to update leave request.",
            )
        if updated is None:
            logger.info(
                "ProcessLeaveRequest: lost concurrent transition",
                extra={"leave_request_id": str(request_id)},
            )
            return self._not_pending()

        logger.info(
            "Solicitud de licencia procesada",
            extra={
                "leave_request_id": str(request_id),
                "status": self._target_status.value,
                "processor_id": str(processor_id),
            },
        )
        return LeaveRequestResult(leave_request=updated.public())

    @classmethod
    def _not_pending(cls) -> LeaveRequestResult:
        return cls._error(
            LeaveErrorCode.INVALID_LEAVE_REQUEST_STATE,
            "Leave request is not pending.",
        )

    @staticmethod
    def _error(code: LeaveErrorCode, message: str) -> LeaveRequestResult:
        return LeaveRequestResult(error=LeaveError(code=code, message=message))


class ApproveLeaveRequestUseCase(_ProcessLeaveRequestUseCase):
    _target_status = LeaveStatus.APPROVED

    def execute(self, request_id: UUID, processor_id: UUID) -> LeaveRequestResult:
        return self._process(request_id, processor_id)


class RejectLeaveRequestUseCase(_ProcessLeaveRequestUseCase):
    _target_status = LeaveStatus.REJECTED

    def execute(
        self, request_id: UUID, processor_id: UUID, reason: Optional[str] = None
    ) -> LeaveRequestResult:
        # R: El motivo de rechazo reemplaza el del solicitante; vacío lo limpia.
        normalized = (reason or "").strip() or None
        return self._process(
            request_id, processor_id, reason=normalized, update_reason=True
        )
