"""
===============================================================================
TARJETA CRC — schemas/accounts.py
===============================================================================

Módulo:
    Schemas HTTP para cuentas, perfil y login

Responsabilidades:
    - Definir DTOs de request/response de cuentas.
    - Validar formato básico (longitudes, email con "@").
    - Nunca exponer password_hash.

Colaboradores:
    - domain.entities.AccountRole / EmploymentStatus
===============================================================================
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from hr_system.domain.entities import AccountRole, EmploymentStatus


def _strip_email(v: str) -> str:
    cleaned = v.strip()
    if "@" not in cleaned:
        raise ValueError("email inválido")
    return cleaned


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------
class LoginReq(BaseModel):
    email: str = Field(..., min_length=3, max_length=320)
    password: str = Field(..., min_length=1, max_length=512)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        # R: Solo trim; el email se compara tal cual se guardó.
        return v.strip()


class CreateAccountReq(BaseModel):
    """Alta de cuenta + employment."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=320)
    role: AccountRole = Field(default=AccountRole.EMPLOYEE)
    phone_number: str | None = Field(default=None, max_length=32)
    password: str | None = Field(
        default=None,
        min_length=8,
        max_length=512,
        description="Si se omite se usa el password por defecto configurado",
    )
    job_grade_code: str | None = Field(default=None, max_length=32)
    position_title: str | None = Field(default=None, max_length=200)
    salary: Decimal | None = Field(default=None, ge=0)
    hire_date: date | None = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _strip_email(v)

    @field_validator("first_name", "last_name")
    @classmethod
    def strip_names(cls, v: str) -> str:
        cleaned = v.strip()
        if not cleaned:
            raise ValueError("no puede estar vacío")
        return cleaned


class ChangePasswordReq(BaseModel):
    old_password: str = Field(..., min_length=1, max_length=512)
    new_password: str = Field(..., min_length=8, max_length=512)


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------
class AccountRes(BaseModel):
    id: UUID
    first_name: str
    last_name: str
    email: str
    role: AccountRole
    phone_number: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class EmploymentRes(BaseModel):
    id: UUID
    account_id: UUID
    job_grade_id: UUID | None = None
    position_title: str | None = None
    salary: Decimal | None = None
    hire_date: date | None = None
    termination_date: date | None = None
    status: EmploymentStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AccountWithEmploymentRes(BaseModel):
    account: AccountRes
    employment: EmploymentRes | None = None


class LoginRes(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    account: AccountRes


class MeRes(BaseModel):
    account_id: UUID
    email: str
    role: AccountRole
