"""
===============================================================================
TARJETA CRC — hr_system/interfaces/api/http/routers/accounts.py
===============================================================================

Class/Module:
    Accounts Router

Responsibilities:
    - Alta de cuentas (SuperAdmin / HR) con su employment.
    - Cambio de password propio.
    - Perfil del empleado autenticado.

Collaborators:
    - hr_system.container (factories DI)
    - hr_system.identity.dependencies (require_principal, require_roles)
    - error_mapping.raise_account_error
    - schemas.accounts (DTOs Pydantic)
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from hr_system.application.usecases.accounts import (
    ChangePasswordInput,
    ChangePasswordUseCase,
    CreateAccountInput,
    CreateAccountWithEmploymentUseCase,
    GetProfileUseCase,
)
from hr_system.container import (
    get_change_password_use_case,
    get_create_account_use_case,
    get_profile_use_case,
)
from hr_system.domain.entities import AccountRole
from hr_system.identity.dependencies import Principal, require_principal, require_roles

from ..error_mapping import raise_account_error
from ..mappers import to_account_res, to_employment_res
from ..schemas import AccountWithEmploymentRes, ChangePasswordReq, CreateAccountReq

router = APIRouter()

_require_account_manager = require_roles(AccountRole.SUPER_ADMIN, AccountRole.HR)
_require_principal = require_principal()


@router.post(
    "/accounts",
    response_model=AccountWithEmploymentRes,
    status_code=status.HTTP_201_CREATED,
    tags=["accounts"],
)
def create_account(
    req: CreateAccountReq,
    principal: Principal = Depends(_require_account_manager),
    use_case: CreateAccountWithEmploymentUseCase = Depends(get_create_account_use_case),
):
    """Crea cuenta + employment en una única transacción."""
    result = use_case.execute(
        CreateAccountInput(
            actor_role=principal.role,
            first_name=req.first_name,
            last_name=req.last_name,
            email=req.email,
            role=req.role,
            phone_number=req.phone_number,
            password=req.password,
            job_grade_code=req.job_grade_code,
            position_title=req.position_title,
            salary=req.salary,
            hire_date=req.hire_date,
        )
    )
    if result.error is not None:
        raise_account_error(result.error)

    return AccountWithEmploymentRes(
        account=to_account_res(result.account),
        employment=to_employment_res(result.employment),
    )


@router.post(
    "/accounts/me/password",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["accounts"],
)
def change_password(
    req: ChangePasswordReq,
    principal: Principal = Depends(_require_principal),
    use_case: ChangePasswordUseCase = Depends(get_change_password_use_case),
) -> None:
    """Cambia el password propio y cierra la sesión activa."""
    result = use_case.execute(
        ChangePasswordInput(
            account_id=principal.account_id,
            old_password=req.old_password,
            new_password=req.new_password,
        )
    )
    if result.error is not None:
        raise_account_error(result.error, account_id=principal.account_id)


@router.get(
    "/employee/profile",
    response_model=AccountWithEmploymentRes,
    tags=["employee"],
)
def get_profile(
    principal: Principal = Depends(_require_principal),
    use_case: GetProfileUseCase = Depends(get_profile_use_case),
):
    result = use_case.execute(principal.account_id)
    if result.error is not None:
        raise_account_error(result.error, account_id=principal.account_id)

    return AccountWithEmploymentRes(
        account=to_account_res(result.account),
        employment=(
            to_employment_res(result.employment) if result.employment else None
        ),
    )
