"""Mapeo entidad de dominio -> DTO HTTP (compartido entre routers)."""

from __future__ import annotations

from hr_system.domain.entities import Account, Employment, JobGrade, LeaveRequest

from .schemas import AccountRes, EmploymentRes, JobGradeRes, LeaveRequestRes


def to_account_res(account: Account) -> AccountRes:
    return AccountRes(
        id=account.id,
        first_name=account.first_name,
        last_name=account.last_name,
        email=account.email,
        role=account.role,
        phone_number=account.phone_number,
        created_at=account.created_at,
        updated_at=account.updated_at,
    )


def to_employment_res(employment: Employment) -> EmploymentRes:
    return EmploymentRes(
        id=employment.id,
        account_id=employment.account_id,
        job_grade_id=employment.job_grade_id,
        position_title=employment.position_title,
        salary=employment.salary,
        hire_date=employment.hire_date,
        termination_date=employment.termination_date,
        status=employment.status,
        created_at=employment.created_at,
        updated_at=employment.updated_at,
    )


def to_job_grade_res(grade: JobGrade) -> JobGradeRes:
    return JobGradeRes(
        id=grade.id,
        code=grade.code,
        name=grade.name,
        description=grade.description,
        min_salary=grade.min_salary,
        max_salary=grade.max_salary,
        created_at=grade.created_at,
    )


def to_leave_request_res(leave_request: LeaveRequest) -> LeaveRequestRes:
    return LeaveRequestRes(
        id=leave_request.id,
        account_id=leave_request.account_id,
        leave_type=leave_request.leave_type,
        start_date=leave_request.start_date,
        end_date=leave_request.end_date,
        reason=leave_request.reason,
        status=leave_request.status,
        requested_at=leave_request.requested_at,
        approver_id=leave_request.approver_id,
        approved_at=leave_request.approved_at,
        account=to_account_res(leave_request.account) if leave_request.account else None,
        approver=(
            to_account_res(leave_request.approver) if leave_request.approver else None
        ),
    )
