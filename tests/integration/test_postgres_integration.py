"""
Name: PostgreSQL Repository Integration Tests

Responsibilities:
  - Atomic account + employment provisioning against a real database
  - Constraint enforcement (unique email, date range)
  - Compare-and-set leave transitions and requester embedding
  - Seeded job grade catalog

Notes:
  - Requires running PostgreSQL instance
  - Mark with @pytest.mark.integration

Setup:
  RUN_INTEGRATION=1 INTEGRATION_DATABASE_URL=postgresql://... pytest tests/integration
"""

import os

import pytest

# Skip BEFORE importing hr_system.* to avoid triggering env validation during collection
if os.getenv("RUN_INTEGRATION") != "1":
    pytest.skip(
        "Set RUN_INTEGRATION=1 to run integration tests", allow_module_level=True
    )

from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import uuid4

from hr_system.crosscutting.exceptions import DatabaseError
from hr_system.domain.entities import (
    Account,
    AccountRole,
    Employment,
    LeaveRequest,
    LeaveStatus,
)
from hr_system.infrastructure.repositories.postgres import (
    PostgresAccountRepository,
    PostgresEmploymentRepository,
    PostgresJobGradeRepository,
    PostgresLeaveRequestRepository,
    PostgresUnitOfWork,
)

pytestmark = [pytest.mark.integration, pytest.mark.usefixtures("clean_tables")]


def _account(email: str, role: AccountRole = AccountRole.EMPLOYEE) -> Account:
    return Account(
        id=uuid4(),
        first_name="Jane",
        last_name="Doe",
        email=email,
        password_hash="argon2-hash",
        role=role,
    )


def _provision(email: str, role: AccountRole = AccountRole.EMPLOYEE) -> Account:
    account = _account(email, role)
    with PostgresUnitOfWork().begin() as tx:
        tx.accounts.create(account)
        tx.employments.create(
            Employment(
                id=uuid4(),
                account_id=account.id,
                position_title="Staff",
                salary=Decimal("50000.00"),
                hire_date=date(2024, 1, 15),
            )
        )
    return account


def _leave(account_id) -> LeaveRequest:
    return LeaveRequest(
        id=uuid4(),
        account_id=account_id,
        leave_type="annual",
        start_date=date(2025, 4, 1),
        end_date=date(2025, 4, 4),
        reason="trip",
        requested_at=datetime(2025, 3, 10, 9, 0, tzinfo=timezone.utc),
    )


def test_provisioning_commits_both_rows():
    account = _provision("jane@co.com")

    stored = PostgresAccountRepository().get_by_email("jane@co.com")
    employment = PostgresEmploymentRepository().get_by_account_id(account.id)

    assert stored is not None
    assert stored.role == AccountRole.EMPLOYEE
    assert employment is not None
    assert employment.salary == Decimal("50000.00")


def test_provisioning_rolls_back_account_when_employment_fails():
    account = _account("jane@co.com")

    with pytest.raises(DatabaseError):
        with PostgresUnitOfWork().begin() as tx:
            tx.accounts.create(account)
            # job_grade_id must reference job_grades
            tx.employments.create(
                Employment(id=uuid4(), account_id=account.id, job_grade_id=uuid4())
            )

    assert PostgresAccountRepository().get_by_email("jane@co.com") is None


def test_email_is_unique():
    _provision("jane@co.com")

    with pytest.raises(DatabaseError):
        PostgresAccountRepository().create(_account("jane@co.com"))


def test_email_lookup_is_case_sensitive():
    _provision("Jane@co.com")

    assert PostgresAccountRepository().get_by_email("jane@co.com") is None


def test_update_password():
    account = _provision("jane@co.com")

    updated = PostgresAccountRepository().update_password(account.id, "new-hash")

    assert updated is not None
    assert PostgresAccountRepository().get_by_id(account.id).password_hash == "new-hash"


def test_leave_date_range_is_enforced_by_database():
    account = _provision("jane@co.com")
    inverted = _leave(account.id)
    inverted.start_date, inverted.end_date = inverted.end_date, inverted.start_date

    with pytest.raises(DatabaseError):
        PostgresLeaveRequestRepository().create(inverted)


def test_leave_transition_is_compare_and_set():
    employee = _provision("emp@co.com")
    approver = _provision("hr@co.com", AccountRole.HR)
    repo = PostgresLeaveRequestRepository()
    request = repo.create(_leave(employee.id))
    when = datetime(2025, 3, 11, tzinfo=timezone.utc)

    first = repo.transition_status(
        request.id,
        expected_status=LeaveStatus.PENDING,
        status=LeaveStatus.APPROVED,
        approver_id=approver.id,
        approved_at=when,
        reason=None,
        update_reason=False,
    )
    second = repo.transition_status(
        request.id,
        expected_status=LeaveStatus.PENDING,
        status=LeaveStatus.REJECTED,
        approver_id=approver.id,
        approved_at=when,
        reason="too late",
        update_reason=True,
    )

    assert first.status == LeaveStatus.APPROVED
    assert first.reason == "trip"
    assert first.approver.email == "hr@co.com"
    assert second is None
    assert repo.get_by_id(request.id).status == LeaveStatus.APPROVED


def test_leave_reads_embed_requester():
    employee = _provision("emp@co.com")
    repo = PostgresLeaveRequestRepository()
    repo.create(_leave(employee.id))

    (listed,) = repo.list_by_account(employee.id)

    assert listed.account.email == "emp@co.com"
    assert listed.public().account.password_hash == ""
    assert len(repo.list_all()) == 1


def test_job_grade_catalog_is_seeded():
    codes = {grade.code for grade in PostgresJobGradeRepository().list_all()}

    assert {"P1", "P2", "P3", "M1", "M2", "D1"} <= codes
    assert PostgresJobGradeRepository().get_by_code("M1") is not None


def test_ping():
    assert PostgresAccountRepository().ping() is True
