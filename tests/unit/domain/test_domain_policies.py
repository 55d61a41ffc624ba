"""
Name: Domain Entities and Policies Tests

Responsibilities:
  - Leave state machine (PENDING -> APPROVED | REJECTED, terminals are final)
  - Processor roles and account provisioning rules
  - Entities never leak password hashes through public()
"""

from datetime import date
from uuid import uuid4

import pytest

from hr_system.domain.account_policy import can_create_account
from hr_system.domain.entities import (
    Account,
    AccountRole,
    LeaveRequest,
    LeaveStatus,
)
from hr_system.domain.leave_policy import (
    can_transition,
    is_leave_processor,
    is_terminal,
    is_valid_date_range,
)

pytestmark = pytest.mark.unit


def _account(role: AccountRole) -> Account:
    return Account(
        id=uuid4(),
        first_name="A",
        last_name="B",
        email="a@co.com",
        password_hash="argon2-hash",
        role=role,
    )


@pytest.mark.parametrize(
    "current,target,expected",
    [
        (LeaveStatus.PENDING, LeaveStatus.APPROVED, True),
        (LeaveStatus.PENDING, LeaveStatus.REJECTED, True),
        (LeaveStatus.PENDING, LeaveStatus.PENDING, False),
        (LeaveStatus.APPROVED, LeaveStatus.REJECTED, False),
        (LeaveStatus.APPROVED, LeaveStatus.APPROVED, False),
        (LeaveStatus.REJECTED, LeaveStatus.APPROVED, False),
        (LeaveStatus.REJECTED, LeaveStatus.PENDING, False),
    ],
)
def test_leave_transitions(current, target, expected):
    assert can_transition(current, target) is expected


def test_terminal_states():
    assert is_terminal(LeaveStatus.APPROVED)
    assert is_terminal(LeaveStatus.REJECTED)
    assert not is_terminal(LeaveStatus.PENDING)


def test_date_range_allows_single_day():
    assert is_valid_date_range(date(2025, 1, 1), date(2025, 1, 1))
    assert is_valid_date_range(date(2025, 1, 1), date(2025, 1, 2))
    assert not is_valid_date_range(date(2025, 1, 2), date(2025, 1, 1))


def test_leave_processors():
    assert is_leave_processor(_account(AccountRole.HR))
    assert is_leave_processor(_account(AccountRole.SUPER_ADMIN))
    assert not is_leave_processor(_account(AccountRole.EMPLOYEE))
    assert not is_leave_processor(None)


def test_nobody_creates_super_admins():
    for actor in AccountRole:
        assert not can_create_account(actor, AccountRole.SUPER_ADMIN)


def test_role_values_are_stable():
    assert [int(r) for r in AccountRole] == [0, 1, 2]


def test_account_public_drops_hash_without_mutating():
    account = _account(AccountRole.HR)

    public = account.public()

    assert public.password_hash == ""
    assert account.password_hash == "argon2-hash"
    assert public.email == account.email


def test_leave_request_public_strips_embedded_accounts():
    requester = _account(AccountRole.EMPLOYEE)
    approver = _account(AccountRole.HR)
    request = LeaveRequest(
        id=uuid4(),
        account_id=requester.id,
        leave_type="annual",
        start_date=date(2025, 1, 1),
        end_date=date(2025, 1, 2),
        account=requester,
        approver=approver,
    )

    public = request.public()

    assert public.account.password_hash == ""
    assert public.approver.password_hash == ""
    assert request.account.password_hash == "argon2-hash"
