"""
===============================================================================
TARJETA CRC — hr_system/interfaces/api/http/routers/leave_requests.py
===============================================================================

Class/Module:
    Leave Requests Router

Responsibilities:
    - Portal del empleado: solicitar licencia y ver las propias.
    - Portal de HR: listar, ver, aprobar y rechazar.
    - Convertir requests HTTP -> inputs de casos de uso.
    - Traducir LeaveError -> RFC7807.

Collaborators:
    - hr_system.application.usecases.leave
    - hr_system.container (factories DI)
    - hr_system.identity.dependencies
===============================================================================
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from hr_system.application.usecases.leave import (
    ApplyLeaveInput,
    ApplyLeaveUseCase,
    ApproveLeaveRequestUseCase,
    GetLeaveRequestUseCase,
    ListLeaveRequestsUseCase,
    RejectLeaveRequestUseCase,
)
from hr_system.container import (
    get_apply_leave_use_case,
    get_approve_leave_request_use_case,
    get_get_leave_request_use_case,
    get_list_leave_requests_use_case,
    get_reject_leave_request_use_case,
)
from hr_system.domain.entities import AccountRole
from hr_system.identity.dependencies import Principal, require_principal, require_roles

from ..error_mapping import raise_leave_error
from ..mappers import to_leave_request_res
from ..schemas import (
    ApplyLeaveReq,
    LeaveRequestRes,
    LeaveRequestsListRes,
    RejectLeaveReq,
)

router = APIRouter()

_require_employee = require_roles(AccountRole.EMPLOYEE)
_require_processor = require_roles(AccountRole.HR, AccountRole.SUPER_ADMIN)
_require_principal = require_principal()


# =============================================================================
# Employee
# =============================================================================


@router.post(
    "/employee/leave-requests",
    response_model=LeaveRequestRes,
    status_code=status.HTTP_201_CREATED,
    tags=["employee"],
)
def apply_leave(
    req: ApplyLeaveReq,
    principal: Principal = Depends(_require_employee),
    use_case: ApplyLeaveUseCase = Depends(get_apply_leave_use_case),
):
    result = use_case.execute(
        ApplyLeaveInput(
            account_id=principal.account_id,
            leave_type=req.leave_type.value,
            start_date=req.start_date,
            end_date=req.end_date,
            reason=req.reason,
        )
    )
    if result.error is not None:
        raise_leave_error(result.error)
    return to_leave_request_res(result.leave_request)


@router.get(
    "/employee/leave-requests",
    response_model=LeaveRequestsListRes,
    tags=["employee"],
)
def list_my_leave_requests(
    principal: Principal = Depends(_require_principal),
    use_case: ListLeaveRequestsUseCase = Depends(get_list_leave_requests_use_case),
):
    result = use_case.list_by_account(principal.account_id)
    if result.error is not None:
        raise_leave_error(result.error)
    return LeaveRequestsListRes(
        leave_requests=[to_leave_request_res(r) for r in result.leave_requests]
    )


# =============================================================================
# HR
# =============================================================================


@router.get(
    "/hr/leave-requests",
    response_model=LeaveRequestsListRes,
    tags=["hr"],
)
def list_leave_requests(
    _principal: Principal = Depends(_require_processor),
    use_case: ListLeaveRequestsUseCase = Depends(get_list_leave_requests_use_case),
):
    result = use_case.list_all()
    return LeaveRequestsListRes(
        leave_requests=[to_leave_request_res(r) for r in result.leave_requests]
    )


@router.get(
    "/hr/leave-requests/{request_id}",
    response_model=LeaveRequestRes,
    tags=["hr"],
)
def get_leave_request(
    request_id: UUID,
    _principal: Principal = Depends(_require_processor),
    use_case: GetLeaveRequestUseCase = Depends(get_get_leave_request_use_case),
):
    result = use_case.execute(request_id)
    if result.error is not None:
        raise_leave_error(result.error, request_id=request_id)
    return to_leave_request_res(result.leave_request)


@router.post(
    "/hr/leave-requests/{request_id}/approve",
    response_model=LeaveRequestRes,
    tags=["hr"],
)
def approve_leave_request(
    request_id: UUID,
    principal: Principal = Depends(_require_processor),
    use_case: ApproveLeaveRequestUseCase = Depends(get_approve_leave_request_use_case),
):
    result = use_case.execute(request_id, principal.account_id)
    if result.error is not None:
        raise_leave_error(result.error, request_id=request_id)
    return to_leave_request_res(result.leave_request)


@router.post(
    "/hr/leave-requests/{request_id}/reject",
    response_model=LeaveRequestRes,
    tags=["hr"],
)
def reject_leave_request(
    request_id: UUID,
    req: RejectLeaveReq | None = None,
    principal: Principal = Depends(_require_processor),
    use_case: RejectLeaveRequestUseCase = Depends(get_reject_leave_request_use_case),
):
    reason = req.reason if req is not None else None
    result = use_case.execute(request_id, principal.account_id, reason)
    if result.error is not None:
        raise_leave_error(result.error, request_id=request_id)
    return to_leave_request_res(result.leave_request)
