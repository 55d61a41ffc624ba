"""Schemas HTTP para employments y escalafones."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from hr_system.domain.entities import EmploymentStatus

from .accounts import EmploymentRes


class UpdateEmploymentReq(BaseModel):
    """Patch: solo se aplican los campos presentes."""

    position_title: str | None = Field(default=None, max_length=200)
    job_grade_code: str | None = Field(default=None, min_length=1, max_length=32)
    salary: Decimal | None = Field(default=None, ge=0)
    status: EmploymentStatus | None = None

    @field_validator("status")
    @classmethod
    def reject_terminated(cls, v: EmploymentStatus | None) -> EmploymentStatus | None:
        if v == EmploymentStatus.TERMINATED:
            raise ValueError("usar /terminate para dar de baja")
        return v


class TerminateEmploymentReq(BaseModel):
    termination_date: date | None = None


class EmploymentsListRes(BaseModel):
    employments: list[EmploymentRes]


class JobGradeRes(BaseModel):
    id: UUID
    code: str
    name: str
    description: str | None = None
    min_salary: Decimal | None = None
    max_salary: Decimal | None = None
    created_at: datetime | None = None


class JobGradesListRes(BaseModel):
    job_grades: list[JobGradeRes]
