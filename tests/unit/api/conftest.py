"""
Name: API Test Fixtures

Responsibilities:
  - Build the real FastAPI app on in-memory adapters (APP_ENV=test)
  - Seed accounts through the container singletons
  - Log in through the real /auth/login endpoint

Notes:
  - Container caches are reset per test by the root conftest, so each test
    gets an empty in-memory database and session cache.
"""

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from hr_system.container import (
    get_account_repository,
    get_employment_repository,
    get_job_grade_repository,
    get_password_hasher,
)
from hr_system.domain.entities import (
    Account,
    AccountRole,
    Employment,
    EmploymentStatus,
    JobGrade,
)

DEFAULT_PASSWORD = "Welcome-2025!"
PASSWORD = "Passw0rd-123"


@pytest.fixture
def client(monkeypatch) -> TestClient:
    monkeypatch.setenv("DEFAULT_PASSWORD", DEFAULT_PASSWORD)

    from hr_system.api.main import create_app

    return TestClient(create_app(), raise_server_exceptions=False)


@pytest.fixture
def job_grades():
    repo = get_job_grade_repository()
    repo.add(JobGrade(id=uuid4(), code="P1", name="Associate Engineer"))
    repo.add(JobGrade(id=uuid4(), code="M1", name="Manager"))
    return repo


@pytest.fixture
def seed():
    """R: Create account + active employment; returns the stored account."""

    def _seed(
        role: AccountRole, email: str | None = None, password: str = PASSWORD
    ) -> Account:
        account = get_account_repository().create(
            Account(
                id=uuid4(),
                first_name="Test",
                last_name=role.name.title(),
                email=email or f"{role.name.lower()}-{uuid4().hex[:6]}@co.com",
                password_hash=get_password_hasher().hash(password),
                role=role,
            )
        )
        get_employment_repository().create(
            Employment(
                id=uuid4(),
                account_id=account.id,
                position_title="Staff",
                salary=Decimal("60000"),
                hire_date=date(2024, 1, 15),
                status=EmploymentStatus.ACTIVE,
            )
        )
        return account

    return _seed


@pytest.fixture
def login(client):
    def _login(email: str, password: str = PASSWORD) -> str:
        response = client.post(
            "/v1/auth/login", json={"email": email, "password": password}
        )
        assert response.status_code == 200, response.text
        return response.json()["access_token"]

    return _login


@pytest.fixture
def auth_headers(seed, login):
    """R: Seed an account of the given role and return its Bearer headers."""

    def _headers(role: AccountRole, email: str | None = None) -> dict:
        account = seed(role, email=email)
        return {"Authorization": f"Bearer {login(account.email)}"}

    return _headers


@pytest.fixture
def error_codes():
    """R: Domain codes carried in problem+json `errors`."""

    def _codes(response) -> list:
        return [e["code"] for e in response.json().get("errors", []) if "code" in e]

    return _codes
