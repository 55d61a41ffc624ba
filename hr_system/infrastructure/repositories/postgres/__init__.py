"""Implementaciones PostgreSQL (SQL crudo sobre psycopg)."""

from .account import PostgresAccountRepository
from .employment import PostgresEmploymentRepository
from .job_grade import PostgresJobGradeRepository
from .leave_request import PostgresLeaveRequestRepository
from .unit_of_work import PostgresProvisioningTransaction, PostgresUnitOfWork

__all__ = [
    "PostgresAccountRepository",
    "PostgresEmploymentRepository",
    "PostgresJobGradeRepository",
    "PostgresLeaveRequestRepository",
    "PostgresProvisioningTransaction",
    "PostgresUnitOfWork",
]
