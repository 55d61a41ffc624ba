"""
Name: Database Pool Tests

Responsibilities:
  - Test pool lifecycle (init, get, close, reset)
  - Test statement_timeout configuration of new connections
  - Offline unit tests (no real DB)

Notes:
  - Uses mocking for ConnectionPool
  - Tests pool singleton behavior
"""

from unittest.mock import MagicMock, patch

import pytest


@pytest.mark.unit
class TestPoolLifecycle:
    """Test pool initialization and cleanup."""

    def test_init_pool_creates_pool(self):
        """init_pool should create a ConnectionPool."""
        from hr_system.infrastructure.db.pool import init_pool, reset_pool

        reset_pool()

        with patch("hr_system.infrastructure.db.pool.ConnectionPool") as MockPool:
            mock_pool = MagicMock()
            MockPool.return_value = mock_pool

            result = init_pool("postgresql://test", min_size=2, max_size=10)

            MockPool.assert_called_once()
            assert result == mock_pool

        reset_pool()

    def test_init_pool_twice_raises_error(self):
        """init_pool called twice should raise PoolAlreadyInitializedError."""
        from hr_system.infrastructure.db.errors import PoolAlreadyInitializedError
        from hr_system.infrastructure.db.pool import init_pool, reset_pool

        reset_pool()

        with patch("hr_system.infrastructure.db.pool.ConnectionPool"):
            init_pool("postgresql://test", min_size=2, max_size=10)

            with pytest.raises(PoolAlreadyInitializedError):
                init_pool("postgresql://test", min_size=2, max_size=10)

        reset_pool()

    def test_get_pool_without_init_raises_error(self):
        """get_pool before init_pool should raise PoolNotInitializedError."""
        from hr_system.infrastructure.db.errors import PoolNotInitializedError
        from hr_system.infrastructure.db.pool import get_pool, reset_pool

        reset_pool()

        with pytest.raises(PoolNotInitializedError):
            get_pool()

    def test_close_pool_clears_singleton(self):
        """close_pool should close and clear the singleton."""
        from hr_system.infrastructure.db.errors import PoolNotInitializedError
        from hr_system.infrastructure.db.pool import (
            close_pool,
            get_pool,
            init_pool,
            reset_pool,
        )

        reset_pool()

        with patch("hr_system.infrastructure.db.pool.ConnectionPool") as MockPool:
            mock_pool = MagicMock()
            MockPool.return_value = mock_pool

            init_pool("postgresql://test", min_size=1, max_size=2)
            close_pool()

            mock_pool.close.assert_called_once()
            with pytest.raises(PoolNotInitializedError):
                get_pool()

    def test_close_pool_is_idempotent(self):
        from hr_system.infrastructure.db.pool import close_pool, reset_pool

        reset_pool()
        close_pool()
        close_pool()


@pytest.mark.unit
class TestConnectionConfiguration:
    def test_statement_timeout_is_applied(self):
        from hr_system.infrastructure.db.pool import _configure_connection

        conn = MagicMock()

        _configure_connection(conn, statement_timeout_ms=5000)

        conn.execute.assert_called_once_with("SET statement_timeout = 5000")
        conn.commit.assert_called_once()

    def test_zero_timeout_leaves_connection_untouched(self):
        from hr_system.infrastructure.db.pool import _configure_connection

        conn = MagicMock()

        _configure_connection(conn, statement_timeout_ms=0)

        conn.execute.assert_not_called()

    def test_init_pool_wires_configure_callback(self):
        from hr_system.infrastructure.db.pool import init_pool, reset_pool

        reset_pool()

        with patch("hr_system.infrastructure.db.pool.ConnectionPool") as MockPool:
            init_pool(
                "postgresql://test", min_size=1, max_size=2, statement_timeout_ms=750
            )

            configure = MockPool.call_args.kwargs["configure"]
            conn = MagicMock()
            configure(conn)
            conn.execute.assert_called_once_with("SET statement_timeout = 750")

        reset_pool()
