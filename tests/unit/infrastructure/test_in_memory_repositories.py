"""
Name: In-Memory Repository Tests

Responsibilities:
  - Unit of work commit / rollback
  - Emulated constraints (unique email, FK, one employment per account)
  - Compare-and-set leave transitions
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from hr_system.crosscutting.exceptions import DatabaseError
from hr_system.domain.entities import Employment, LeaveStatus

pytestmark = pytest.mark.unit


def test_unit_of_work_commits_on_success(unit_of_work, account_factory, account_repo):
    account = account_factory.create(email="a@co.com")

    with unit_of_work.begin() as tx:
        tx.accounts.create(account)
        tx.employments.create(Employment(id=uuid4(), account_id=account.id))

    assert account_repo.get_by_email("a@co.com") is not None


def test_unit_of_work_rolls_back_on_error(
    unit_of_work, account_factory, in_memory_db
):
    account = account_factory.create(email="a@co.com")

    with pytest.raises(RuntimeError):
        with unit_of_work.begin() as tx:
            tx.accounts.create(account)
            raise RuntimeError("boom")

    assert in_memory_db.accounts == {}


def test_duplicate_email_is_a_database_error(account_repo, account_factory):
    account_repo.create(account_factory.create(email="a@co.com"))

    with pytest.raises(DatabaseError):
        account_repo.create(account_factory.create(email="a@co.com"))


def test_employment_requires_existing_account(employment_repo):
    with pytest.raises(DatabaseError):
        employment_repo.create(Employment(id=uuid4(), account_id=uuid4()))


def test_one_employment_per_account(seed_account, employment_repo):
    account = seed_account()

    with pytest.raises(DatabaseError):
        employment_repo.create(Employment(id=uuid4(), account_id=account.id))


def test_stored_entities_are_copies(seed_account, account_repo):
    account = seed_account(first_name="Jane")

    fetched = account_repo.get_by_id(account.id)
    fetched.first_name = "Mutated"

    assert account_repo.get_by_id(account.id).first_name == "Jane"


def test_update_password_unknown_account(account_repo):
    assert account_repo.update_password(uuid4(), "hash") is None


def test_leave_request_requires_existing_account(leave_repo, leave_request_factory):
    with pytest.raises(DatabaseError):
        leave_repo.create(leave_request_factory.create(uuid4()))


def test_transition_applies_only_from_expected_status(
    leave_repo, leave_request_factory, seed_account
):
    employee = seed_account()
    approver = seed_account()
    request = leave_repo.create(leave_request_factory.create(employee.id))
    when = datetime(2025, 4, 1, tzinfo=timezone.utc)

    updated = leave_repo.transition_status(
        request.id,
        expected_status=LeaveStatus.PENDING,
        status=LeaveStatus.APPROVED,
        approver_id=approver.id,
        approved_at=when,
        reason=None,
        update_reason=False,
    )
    stale = leave_repo.transition_status(
        request.id,
        expected_status=LeaveStatus.PENDING,
        status=LeaveStatus.REJECTED,
        approver_id=approver.id,
        approved_at=when,
        reason="late",
        update_reason=True,
    )

    assert updated.status == LeaveStatus.APPROVED
    assert updated.reason == request.reason
    assert updated.approver.id == approver.id
    assert stale is None
    assert leave_repo.get_by_id(request.id).status == LeaveStatus.APPROVED


def test_transition_unknown_request(leave_repo):
    assert (
        leave_repo.transition_status(
            uuid4(),
            expected_status=LeaveStatus.PENDING,
            status=LeaveStatus.APPROVED,
            approver_id=uuid4(),
            approved_at=datetime.now(timezone.utc),
            reason=None,
            update_reason=False,
        )
        is None
    )


def test_reads_embed_requester(leave_repo, leave_request_factory, seed_account):
    employee = seed_account(email="emp@co.com")
    request = leave_repo.create(leave_request_factory.create(employee.id))

    fetched = leave_repo.get_by_id(request.id)

    assert fetched.account.email == "emp@co.com"
    assert fetched.approver is None
