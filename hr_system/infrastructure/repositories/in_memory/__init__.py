"""Implementaciones in-memory (tests unitarios / APP_ENV=test)."""

from .account import InMemoryAccountRepository
from .employment import InMemoryEmploymentRepository
from .job_grade import InMemoryJobGradeRepository
from .leave_request import InMemoryLeaveRequestRepository
from .store import InMemoryDatabase
from .unit_of_work import InMemoryProvisioningTransaction, InMemoryUnitOfWork

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryDatabase",
    "InMemoryEmploymentRepository",
    "InMemoryJobGradeRepository",
    "InMemoryLeaveRequestRepository",
    "InMemoryProvisioningTransaction",
    "InMemoryUnitOfWork",
]
