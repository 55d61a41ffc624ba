"""
Name: PostgreSQL Repository Unit Tests

Responsibilities:
  - Driver errors are translated to DatabaseError
  - Leave transitions are guarded by the expected status in SQL
  - Health check never raises

Notes:
  - Pool and connection are mocked (no real DB)
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock
from uuid import uuid4

import psycopg
import pytest

from hr_system.crosscutting.exceptions import DatabaseError
from hr_system.domain.entities import LeaveStatus
from hr_system.infrastructure.repositories.postgres import (
    PostgresAccountRepository,
    PostgresLeaveRequestRepository,
)

pytestmark = pytest.mark.unit


def _pool_with(conn: MagicMock) -> MagicMock:
    pool = MagicMock()
    pool.connection.return_value.__enter__.return_value = conn
    return pool


def test_lookup_driver_error_becomes_database_error():
    conn = MagicMock()
    conn.execute.side_effect = psycopg.OperationalError("server closed the connection")
    repo = PostgresAccountRepository(pool=_pool_with(conn))

    with pytest.raises(DatabaseError):
        repo.get_by_email("a@co.com")


def test_lookup_miss_returns_none():
    conn = MagicMock()
    conn.execute.return_value.fetchone.return_value = None
    repo = PostgresAccountRepository(pool=_pool_with(conn))

    assert repo.get_by_email("a@co.com") is None
    query, params = conn.execute.call_args.args
    assert "WHERE email = %s" in query
    assert params == ("a@co.com",)


def test_transition_is_conditional_on_expected_status():
    conn = MagicMock()
    conn.execute.return_value.fetchone.return_value = None
    repo = PostgresLeaveRequestRepository(pool=_pool_with(conn))
    request_id = uuid4()

    result = repo.transition_status(
        request_id,
        expected_status=LeaveStatus.PENDING,
        status=LeaveStatus.APPROVED,
        approver_id=uuid4(),
        approved_at=datetime(2025, 4, 1, tzinfo=timezone.utc),
        reason=None,
        update_reason=False,
    )

    assert result is None
    query, params = conn.execute.call_args.args
    assert "WHERE id = %s AND status = %s" in query
    assert params[0] == "approved"
    assert params[-2:] == (request_id, "pending")


def test_ping_reports_false_on_driver_error():
    conn = MagicMock()
    conn.execute.side_effect = psycopg.OperationalError("no route to host")

    assert PostgresAccountRepository(pool=_pool_with(conn)).ping() is False


def test_ping_reports_false_without_pool():
    from hr_system.infrastructure.db.pool import reset_pool

    reset_pool()

    assert PostgresAccountRepository().ping() is False


def test_ping_ok():
    conn = MagicMock()

    assert PostgresAccountRepository(pool=_pool_with(conn)).ping() is True
