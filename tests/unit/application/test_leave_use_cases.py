"""
Name: Leave Request Workflow Tests

Responsibilities:
  - Apply: date range validated before any write
  - Approve / Reject: processor guard, exactly-once transition
  - Concurrent processing: only one writer wins
  - Listing embeds accounts without password hashes
"""

from datetime import date, timedelta
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from hr_system.application.usecases.leave import (
    ApplyLeaveInput,
    ApplyLeaveUseCase,
    ApproveLeaveRequestUseCase,
    GetLeaveRequestUseCase,
    LeaveErrorCode,
    ListLeaveRequestsUseCase,
    RejectLeaveRequestUseCase,
)
from hr_system.crosscutting.exceptions import DatabaseError
from hr_system.domain.entities import AccountRole, LeaveStatus

pytestmark = pytest.mark.unit


@pytest.fixture
def apply_leave(account_repo, leave_repo, fixed_clock) -> ApplyLeaveUseCase:
    return ApplyLeaveUseCase(
        accounts=account_repo, leave_requests=leave_repo, clock=fixed_clock
    )


@pytest.fixture
def approve(account_repo, leave_repo, fixed_clock) -> ApproveLeaveRequestUseCase:
    return ApproveLeaveRequestUseCase(
        accounts=account_repo, leave_requests=leave_repo, clock=fixed_clock
    )


@pytest.fixture
def reject(account_repo, leave_repo, fixed_clock) -> RejectLeaveRequestUseCase:
    return RejectLeaveRequestUseCase(
        accounts=account_repo, leave_requests=leave_repo, clock=fixed_clock
    )


@pytest.fixture
def employee(seed_account):
    return seed_account(role=AccountRole.EMPLOYEE, email="emp@co.com")


@pytest.fixture
def hr(seed_account):
    return seed_account(role=AccountRole.HR, email="hr@co.com")


@pytest.fixture
def pending(leave_repo, leave_request_factory, employee):
    return leave_repo.create(leave_request_factory.create(employee.id))


# =============================================================================
# Apply
# =============================================================================


class TestApplyLeave:
    def test_creates_pending_request(self, apply_leave, employee, fixed_clock):
        result = apply_leave.execute(
            ApplyLeaveInput(
                account_id=employee.id,
                leave_type="annual",
                start_date=date(2025, 5, 5),
                end_date=date(2025, 5, 9),
                reason="Vacation",
            )
        )

        request = result.leave_request
        assert result.error is None
        assert request.status == LeaveStatus.PENDING
        assert request.approver_id is None
        assert request.approved_at is None
        assert request.requested_at == fixed_clock.now()
        assert request.account.email == "emp@co.com"
        assert request.account.password_hash == ""

    def test_same_day_range_is_valid(self, apply_leave, employee):
        result = apply_leave.execute(
            ApplyLeaveInput(employee.id, "sick", date(2025, 5, 5), date(2025, 5, 5))
        )

        assert result.error is None

    def test_end_before_start_is_rejected_without_writing(
        self, apply_leave, employee, in_memory_db
    ):
        result = apply_leave.execute(
            ApplyLeaveInput(employee.id, "annual", date(2025, 5, 9), date(2025, 5, 5))
        )

        assert result.error.code == LeaveErrorCode.INVALID_DATE_RANGE
        assert in_memory_db.leave_requests == {}

    def test_unknown_account(self, apply_leave):
        result = apply_leave.execute(
            ApplyLeaveInput(uuid4(), "annual", date(2025, 5, 5), date(2025, 5, 6))
        )

        assert result.error.code == LeaveErrorCode.ACCOUNT_NOT_FOUND

    def test_blank_leave_type(self, apply_leave, employee):
        result = apply_leave.execute(
            ApplyLeaveInput(employee.id, "  ", date(2025, 5, 5), date(2025, 5, 6))
        )

        assert result.error.code == LeaveErrorCode.VALIDATION_ERROR

    def test_storage_failure(self, account_repo, fixed_clock, employee):
        leave_requests = MagicMock()
        leave_requests.create.side_effect = DatabaseError("disk full")
        use_case = ApplyLeaveUseCase(
            accounts=account_repo, leave_requests=leave_requests, clock=fixed_clock
        )

        result = use_case.execute(
            ApplyLeaveInput(employee.id, "annual", date(2025, 5, 5), date(2025, 5, 6))
        )

        assert result.error.code == LeaveErrorCode.LEAVE_APPLY_FAILED


# =============================================================================
# Approve / Reject
# =============================================================================


class TestProcessLeaveRequest:
    def test_hr_approves_pending_request(self, approve, pending, hr, fixed_clock):
        result = approve.execute(pending.id, hr.id)

        request = result.leave_request
        assert result.error is None
        assert request.status == LeaveStatus.APPROVED
        assert request.approver_id == hr.id
        assert request.approved_at == fixed_clock.now()
        assert request.approver.email == "hr@co.com"
        assert request.approver.password_hash == ""

    def test_super_admin_can_reject(self, reject, pending, seed_account):
        admin = seed_account(role=AccountRole.SUPER_ADMIN)

        result = reject.execute(pending.id, admin.id, "  Team is short-staffed ")

        assert result.leave_request.status == LeaveStatus.REJECTED
        assert result.leave_request.reason == "Team is short-staffed"
        assert result.leave_request.approver_id == admin.id

    def test_reject_without_reason_clears_it(self, reject, pending, hr):
        result = reject.execute(pending.id, hr.id, "   ")

        assert result.leave_request.reason is None

    def test_approve_keeps_requester_reason(self, approve, pending, hr):
        result = approve.execute(pending.id, hr.id)

        assert result.leave_request.reason == pending.reason

    def test_employee_cannot_process(self, approve, reject, pending, employee, leave_repo):
        approved = approve.execute(pending.id, employee.id)
        rejected = reject.execute(pending.id, employee.id)

        assert approved.error.code == LeaveErrorCode.INVALID_PROCESSOR
        assert rejected.error.code == LeaveErrorCode.INVALID_PROCESSOR
        assert leave_repo.get_by_id(pending.id).status == LeaveStatus.PENDING

    def test_unknown_processor(self, approve, pending):
        result = approve.execute(pending.id, uuid4())

        assert result.error.code == LeaveErrorCode.INVALID_PROCESSOR

    def test_processor_guard_runs_before_lookup(self, account_repo, fixed_clock, employee):
        leave_requests = MagicMock()
        use_case = ApproveLeaveRequestUseCase(
            accounts=account_repo, leave_requests=leave_requests, clock=fixed_clock
        )

        use_case.execute(uuid4(), employee.id)

        leave_requests.get_by_id.assert_not_called()

    def test_unknown_request(self, approve, hr):
        result = approve.execute(uuid4(), hr.id)

        assert result.error.code == LeaveErrorCode.LEAVE_REQUEST_NOT_FOUND

    def test_request_is_processed_exactly_once(
        self, approve, reject, pending, hr, fixed_clock, leave_repo
    ):
        first = approve.execute(pending.id, hr.id)
        fixed_clock.advance(minutes=5)

        again = approve.execute(pending.id, hr.id)
        flipped = reject.execute(pending.id, hr.id, "changed my mind")

        assert first.error is None
        assert again.error.code == LeaveErrorCode.INVALID_LEAVE_REQUEST_STATE
        assert flipped.error.code == LeaveErrorCode.INVALID_LEAVE_REQUEST_STATE
        stored = leave_repo.get_by_id(pending.id)
        assert stored.status == LeaveStatus.APPROVED
        assert stored.approved_at == first.leave_request.approved_at

    def test_lost_race_reports_invalid_state(
        self, account_repo, leave_repo, fixed_clock, pending, hr, seed_account
    ):
        other_hr = seed_account(role=AccountRole.HR)

        class _RacingRepo:
            """R: Another processor wins between our read and our write."""

            def get_by_id(self, request_id):
                snapshot = leave_repo.get_by_id(request_id)
                RejectLeaveRequestUseCase(
                    accounts=account_repo, leave_requests=leave_repo, clock=fixed_clock
                ).execute(request_id, other_hr.id, "first")
                return snapshot

            def transition_status(self, *args, **kwargs):
                return leave_repo.transition_status(*args, **kwargs)

        use_case = ApproveLeaveRequestUseCase(
            accounts=account_repo, leave_requests=_RacingRepo(), clock=fixed_clock
        )

        result = use_case.execute(pending.id, hr.id)

        assert result.error.code == LeaveErrorCode.INVALID_LEAVE_REQUEST_STATE
        stored = leave_repo.get_by_id(pending.id)
        assert stored.status == LeaveStatus.REJECTED
        assert stored.approver_id == other_hr.id

    def test_update_failure(self, account_repo, fixed_clock, pending, hr, leave_repo):
        leave_requests = MagicMock(wraps=leave_repo)
        leave_requests.transition_status.side_effect = DatabaseError("deadlock")
        use_case = ApproveLeaveRequestUseCase(
            accounts=account_repo, leave_requests=leave_requests, clock=fixed_clock
        )

        result = use_case.execute(pending.id, hr.id)

        assert result.error.code == LeaveErrorCode.LEAVE_REQUEST_UPDATE_FAILED


# =============================================================================
# Read side
# =============================================================================


class TestListLeaveRequests:
    def test_list_all_newest_first(
        self, account_repo, leave_repo, leave_request_factory, employee, hr
    ):
        older = leave_request_factory.create(employee.id)
        newer = leave_request_factory.create(hr.id)
        newer.requested_at = older.requested_at + timedelta(hours=1)
        leave_repo.create(older)
        leave_repo.create(newer)

        result = ListLeaveRequestsUseCase(
            accounts=account_repo, leave_requests=leave_repo
        ).list_all()

        assert [r.id for r in result.leave_requests] == [newer.id, older.id]
        assert all(r.account.password_hash == "" for r in result.leave_requests)

    def test_list_by_account_only_returns_own(
        self, account_repo, leave_repo, leave_request_factory, employee, hr
    ):
        mine = leave_repo.create(leave_request_factory.create(employee.id))
        leave_repo.create(leave_request_factory.create(hr.id))

        result = ListLeaveRequestsUseCase(
            accounts=account_repo, leave_requests=leave_repo
        ).list_by_account(employee.id)

        assert [r.id for r in result.leave_requests] == [mine.id]

    def test_list_by_unknown_account(self, account_repo, leave_repo):
        result = ListLeaveRequestsUseCase(
            accounts=account_repo, leave_requests=leave_repo
        ).list_by_account(uuid4())

        assert result.error.code == LeaveErrorCode.ACCOUNT_NOT_FOUND

    def test_get_by_id(self, leave_repo, pending):
        use_case = GetLeaveRequestUseCase(leave_requests=leave_repo)

        assert use_case.execute(pending.id).leave_request.id == pending.id
        assert (
            use_case.execute(uuid4()).error.code
            == LeaveErrorCode.LEAVE_REQUEST_NOT_FOUND
        )
