"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define persistence contracts for the domain layer (ports).
- Keep the application/domain independent from infrastructure (PostgreSQL, in-memory).
- Expose a unit of work so account + employment creation is all-or-nothing.

Collaborators
- domain.entities: Account, Employment, JobGrade, LeaveRequest, LeaveStatus
- infrastructure.repositories: postgres.*, in_memory.* implementations

Constraints
- Pure interfaces only: no side effects, no infrastructure imports, no SQL.
- "Not found" is None, never an exception.
- Storage failures raise crosscutting.exceptions.DatabaseError.

Notes
- We use typing.Protocol for structural subtyping ("duck typing").
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from datetime import datetime
from typing import List, Optional, Protocol
from uuid import UUID

from .entities import Account, Employment, JobGrade, LeaveRequest, LeaveStatus


class AccountRepository(Protocol):
    """R: Interface for account persistence (credential store)."""

    def get_by_email(self, email: str) -> Optional[Account]:
        """R: Exact (case-sensitive) email lookup."""
        ...

    def get_by_id(self, account_id: UUID) -> Optional[Account]: ...

    def create(self, account: Account) -> Account:
        """R: Insert; a duplicate email surfaces as DatabaseError."""
        ...

    def update_password(
        self, account_id: UUID, password_hash: str
    ) -> Optional[Account]:
        """R: Returns None if the account does not exist."""
        ...

    def ping(self) -> bool:
        """R: Health check; False when the store is unreachable."""
        ...


class EmploymentRepository(Protocol):
    """R: Interface for employment records."""

    def create(self, employment: Employment) -> Employment: ...

    def get_by_id(self, employment_id: UUID) -> Optional[Employment]: ...

    def get_by_account_id(self, account_id: UUID) -> Optional[Employment]: ...

    def update(self, employment: Employment) -> Optional[Employment]:
        """R: Full update of mutable fields; None if it does not exist."""
        ...

    def list_all(self) -> List[Employment]: ...


class JobGradeRepository(Protocol):
    """R: Read-only access to the job grade catalog."""

    def get_by_id(self, job_grade_id: UUID) -> Optional[JobGrade]: ...

    def get_by_code(self, code: str) -> Optional[JobGrade]: ...

    def list_all(self) -> List[JobGrade]: ...


class LeaveRequestRepository(Protocol):
    """
    R: Interface for leave requests.

    Read paths embed the requester (`account`) and the processor (`approver`).
    """

    def create(self, leave_request: LeaveRequest) -> LeaveRequest: ...

    def get_by_id(self, request_id: UUID) -> Optional[LeaveRequest]: ...

    def list_all(self) -> List[LeaveRequest]: ...

    def list_by_account(self, account_id: UUID) -> List[LeaveRequest]: ...

    def transition_status(
        self,
        request_id: UUID,
        *,
        expected_status: LeaveStatus,
        status: LeaveStatus,
        approver_id: UUID,
        approved_at: datetime,
        reason: Optional[str],
        update_reason: bool,
    ) -> Optional[LeaveRequest]:
        """
        R: Compare-and-set status update.

        Applies the change only if the stored status still equals
        expected_status. Returns the updated request, or None when the row is
        missing or another writer already moved it out of expected_status.
        """
        ...


class ProvisioningTransaction(Protocol):
    """R: Repositories bound to one open transaction."""

    accounts: AccountRepository
    employments: EmploymentRepository


class UnitOfWork(Protocol):
    """
    R: Transaction boundary.

    `with uow.begin() as tx:` commits when the block exits normally and rolls
    back (re-raising) when it exits with an exception. A failed commit raises
    DatabaseError.
    """

    def begin(self) -> AbstractContextManager[ProvisioningTransaction]: ...
