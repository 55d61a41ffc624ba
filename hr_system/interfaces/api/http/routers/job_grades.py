"""Router del catálogo de escalafones (solo lectura, HR / SuperAdmin)."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from hr_system.application.usecases.job_grades import ListJobGradesUseCase
from hr_system.container import get_list_job_grades_use_case
from hr_system.domain.entities import AccountRole
from hr_system.identity.dependencies import Principal, require_roles

from ..mappers import to_job_grade_res
from ..schemas import JobGradesListRes

router = APIRouter()

_require_hr = require_roles(AccountRole.HR, AccountRole.SUPER_ADMIN)


@router.get("/hr/job-grades", response_model=JobGradesListRes, tags=["hr"])
def list_job_grades(
    _principal: Principal = Depends(_require_hr),
    use_case: ListJobGradesUseCase = Depends(get_list_job_grades_use_case),
):
    result = use_case.execute()
    return JobGradesListRes(job_grades=[to_job_grade_res(g) for g in result.job_grades])
