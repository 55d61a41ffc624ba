"""
===============================================================================
TARJETA CRC — hr_system/interfaces/api/http/routers/employments.py
===============================================================================

Responsibilities:
    - Endpoints de HR sobre registros laborales: listar, ver, editar, dar de
      baja. Todos requieren rol HR o SuperAdmin.

Collaborators:
    - hr_system.application.usecases.employment
    - hr_system.container
    - error_mapping.raise_employment_error
===============================================================================
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from hr_system.application.usecases.employment import (
    GetEmploymentUseCase,
    ListEmploymentsUseCase,
    TerminateEmploymentUseCase,
    UpdateEmploymentInput,
    UpdateEmploymentUseCase,
)
from hr_system.container import (
    get_get_employment_use_case,
    get_list_employments_use_case,
    get_terminate_employment_use_case,
    get_update_employment_use_case,
)
from hr_system.domain.entities import AccountRole
from hr_system.identity.dependencies import Principal, require_roles

from ..error_mapping import raise_employment_error
from ..mappers import to_employment_res
from ..schemas import (
    EmploymentRes,
    EmploymentsListRes,
    TerminateEmploymentReq,
    UpdateEmploymentReq,
)

router = APIRouter(prefix="/hr/employments", tags=["hr"])

_require_hr = require_roles(AccountRole.HR, AccountRole.SUPER_ADMIN)


@router.get("", response_model=EmploymentsListRes)
def list_employments(
    _principal: Principal = Depends(_require_hr),
    use_case: ListEmploymentsUseCase = Depends(get_list_employments_use_case),
):
    result = use_case.execute()
    return EmploymentsListRes(
        employments=[to_employment_res(e) for e in result.employments]
    )


@router.get("/{employment_id}", response_model=EmploymentRes)
def get_employment(
    employment_id: UUID,
    _principal: Principal = Depends(_require_hr),
    use_case: GetEmploymentUseCase = Depends(get_get_employment_use_case),
):
    result = use_case.execute(employment_id)
    if result.error is not None:
        raise_employment_error(result.error, employment_id=employment_id)
    return to_employment_res(result.employment)


@router.patch("/{employment_id}", response_model=EmploymentRes)
def update_employment(
    employment_id: UUID,
    req: UpdateEmploymentReq,
    _principal: Principal = Depends(_require_hr),
    use_case: UpdateEmploymentUseCase = Depends(get_update_employment_use_case),
):
    result = use_case.execute(
        UpdateEmploymentInput(
            employment_id=employment_id,
            position_title=req.position_title,
            job_grade_code=req.job_grade_code,
            salary=req.salary,
            status=req.status,
        )
    )
    if result.error is not None:
        raise_employment_error(result.error, employment_id=employment_id)
    return to_employment_res(result.employment)


@router.post("/{employment_id}/terminate", response_model=EmploymentRes)
def terminate_employment(
    employment_id: UUID,
    req: TerminateEmploymentReq | None = None,
    _principal: Principal = Depends(_require_hr),
    use_case: TerminateEmploymentUseCase = Depends(get_terminate_employment_use_case),
):
    termination_date = req.termination_date if req is not None else None
    result = use_case.execute(employment_id, termination_date)
    if result.error is not None:
        raise_employment_error(result.error, employment_id=employment_id)
    return to_employment_res(result.employment)
