"""DTOs Pydantic de la API HTTP v1."""

from .accounts import (
    AccountRes,
    AccountWithEmploymentRes,
    ChangePasswordReq,
    CreateAccountReq,
    EmploymentRes,
    LoginReq,
    LoginRes,
    MeRes,
)
from .employments import (
    EmploymentsListRes,
    JobGradeRes,
    JobGradesListRes,
    TerminateEmploymentReq,
    UpdateEmploymentReq,
)
from .leave_requests import (
    ApplyLeaveReq,
    LeaveRequestRes,
    LeaveRequestsListRes,
    RejectLeaveReq,
)

__all__ = [
    "AccountRes",
    "AccountWithEmploymentRes",
    "ApplyLeaveReq",
    "ChangePasswordReq",
    "CreateAccountReq",
    "EmploymentRes",
    "EmploymentsListRes",
    "JobGradeRes",
    "JobGradesListRes",
    "LeaveRequestRes",
    "LeaveRequestsListRes",
    "LoginReq",
    "LoginRes",
    "MeRes",
    "RejectLeaveReq",
    "TerminateEmploymentReq",
    "UpdateEmploymentReq",
]
