"""
===============================================================================
TARJETA CRC — schemas/leave_requests.py
===============================================================================

Módulo:
    Schemas HTTP para solicitudes de licencia

Responsabilidades:
    - Validar leave_type contra el catálogo cerrado (LeaveType).
    - Exponer solicitante / procesador embebidos (sin password_hash).
===============================================================================
"""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from hr_system.domain.entities import LeaveStatus, LeaveType

from .accounts import AccountRes


class ApplyLeaveReq(BaseModel):
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str | None = Field(default=None, max_length=2000)

    @field_validator("reason")
    @classmethod
    def strip_reason(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else None


class RejectLeaveReq(BaseModel):
    reason: str | None = Field(
        default=None,
        max_length=2000,
        description="Reemplaza el motivo original; vacío lo limpia",
    )


class LeaveRequestRes(BaseModel):
    id: UUID
    account_id: UUID
    leave_type: str
    start_date: date
    end_date: date
    reason: str | None = None
    status: LeaveStatus
    requested_at: datetime | None = None
    approver_id: UUID | None = None
    approved_at: datetime | None = None
    account: AccountRes | None = None
    approver: AccountRes | None = None


class LeaveRequestsListRes(BaseModel):
    leave_requests: list[LeaveRequestRes]
