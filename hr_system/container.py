"""
===============================================================================
TARJETA CRC — hr_system/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Componer dependencias (repositorios, cache, identidad, casos de uso)
    siguiendo DIP.
  - Exponer factories para FastAPI (Depends).
  - Mantener singletons con caching (lru_cache) para recursos compartidos.
  - Ser el ÚNICO lector de Settings: el resto recibe valores por constructor.

Colaboradores:
  - hr_system.crosscutting.config.get_settings
  - hr_system.domain.* (puertos)
  - hr_system.infrastructure.* (implementaciones)
  - hr_system.identity.* (token codec, sesiones, autenticación)
  - hr_system.application.usecases.* (casos de uso)

Notas:
  - Este archivo NO contiene lógica de negocio.
  - Este archivo NO depende de FastAPI (solo expone factories).
  - APP_ENV ∈ {test, testing, ci} => adapters in-memory (sin Postgres/Redis).
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application.usecases import (
    ApplyLeaveUseCase,
    ApproveLeaveRequestUseCase,
    ChangePasswordUseCase,
    CreateAccountWithEmploymentUseCase,
    GetEmploymentUseCase,
    GetLeaveRequestUseCase,
    GetProfileUseCase,
    ListEmploymentsUseCase,
    ListJobGradesUseCase,
    ListLeaveRequestsUseCase,
    RejectLeaveRequestUseCase,
    TerminateEmploymentUseCase,
    UpdateEmploymentUseCase,
)
from .crosscutting.config import get_settings
from .domain.cache import CachePort
from .domain.repositories import (
    AccountRepository,
    EmploymentRepository,
    JobGradeRepository,
    LeaveRequestRepository,
    UnitOfWork,
)
from .domain.services import Clock, PasswordHasher
from .identity.authentication import AuthenticationService
from .identity.passwords import Argon2PasswordHasher
from .identity.sessions import SessionService
from .identity.token_codec import JWTTokenCodec
from .infrastructure.cache import InMemoryCache, RedisCache
from .infrastructure.clock import SystemClock
from .infrastructure.repositories import (
    InMemoryAccountRepository,
    InMemoryDatabase,
    InMemoryEmploymentRepository,
    InMemoryJobGradeRepository,
    InMemoryLeaveRequestRepository,
    InMemoryUnitOfWork,
    PostgresAccountRepository,
    PostgresEmploymentRepository,
    PostgresJobGradeRepository,
    PostgresLeaveRequestRepository,
    PostgresUnitOfWork,
)

# =============================================================================
# Helpers internos
# =============================================================================


def _is_test_env() -> bool:
    """app_env ∈ {"test", "testing", "ci"} => se favorecen in-memory adapters."""
    return get_settings().is_test()


@lru_cache(maxsize=1)
def get_in_memory_database() -> InMemoryDatabase:
    """Base in-memory compartida por todos los repos in-memory (solo test)."""
    return InMemoryDatabase()


# =============================================================================
# Servicios base (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_clock() -> Clock:
    return SystemClock()


@lru_cache(maxsize=1)
def get_password_hasher() -> PasswordHasher:
    return Argon2PasswordHasher()


@lru_cache(maxsize=1)
def get_cache() -> CachePort:
    """Cache de sesiones/perfiles (in-memory en test; Redis en runtime)."""
    if _is_test_env():
        return InMemoryCache()
    settings = get_settings()
    return RedisCache(
        redis_url=settings.redis_url,
        socket_timeout_seconds=settings.redis_socket_timeout_seconds,
    )


# =============================================================================
# Repositorios (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_account_repository() -> AccountRepository:
    if _is_test_env():
        return InMemoryAccountRepository(get_in_memory_database())
    return PostgresAccountRepository()


@lru_cache(maxsize=1)
def get_employment_repository() -> EmploymentRepository:
    if _is_test_env():
        return InMemoryEmploymentRepository(get_in_memory_database())
    return PostgresEmploymentRepository()


@lru_cache(maxsize=1)
def get_job_grade_repository() -> JobGradeRepository:
    if _is_test_env():
        return InMemoryJobGradeRepository(get_in_memory_database())
    return PostgresJobGradeRepository()


@lru_cache(maxsize=1)
def get_leave_request_repository() -> LeaveRequestRepository:
    if _is_test_env():
        return InMemoryLeaveRequestRepository(get_in_memory_database())
    return PostgresLeaveRequestRepository()


@lru_cache(maxsize=1)
def get_unit_of_work() -> UnitOfWork:
    if _is_test_env():
        return InMemoryUnitOfWork(get_in_memory_database())
    return PostgresUnitOfWork()


# =============================================================================
# Identidad (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_token_codec() -> JWTTokenCodec:
    settings = get_settings()
    return JWTTokenCodec(
        secret=settings.jwt_secret,
        issuer=settings.jwt_issuer,
        clock=get_clock(),
    )


@lru_cache(maxsize=1)
def get_session_service() -> SessionService:
    return SessionService(
        codec=get_token_codec(),
        cache=get_cache(),
        ttl_seconds=get_settings().jwt_access_ttl_seconds,
    )


@lru_cache(maxsize=1)
def get_authentication_service() -> AuthenticationService:
    return AuthenticationService(
        accounts=get_account_repository(),
        password_hasher=get_password_hasher(),
    )


# =============================================================================
# Casos de uso (factory por request)
# =============================================================================


def get_create_account_use_case() -> CreateAccountWithEmploymentUseCase:
    """Caso de uso: alta atómica de cuenta + employment."""
    return CreateAccountWithEmploymentUseCase(
        unit_of_work=get_unit_of_work(),
        job_grades=get_job_grade_repository(),
        password_hasher=get_password_hasher(),
        clock=get_clock(),
        default_password=get_settings().default_password,
    )


def get_change_password_use_case() -> ChangePasswordUseCase:
    """Caso de uso: cambio de password propio (revoca la sesión)."""
    return ChangePasswordUseCase(
        accounts=get_account_repository(),
        password_hasher=get_password_hasher(),
        sessions=get_session_service(),
    )


def get_profile_use_case() -> GetProfileUseCase:
    """Caso de uso: perfil propio (read-through cache)."""
    return GetProfileUseCase(
        accounts=get_account_repository(),
        employments=get_employment_repository(),
        cache=get_cache(),
        ttl_seconds=get_settings().profile_cache_ttl_seconds,
    )


def get_apply_leave_use_case() -> ApplyLeaveUseCase:
    return ApplyLeaveUseCase(
        accounts=get_account_repository(),
        leave_requests=get_leave_request_repository(),
        clock=get_clock(),
    )


def get_approve_leave_request_use_case() -> ApproveLeaveRequestUseCase:
    return ApproveLeaveRequestUseCase(
        accounts=get_account_repository(),
        leave_requests=get_leave_request_repository(),
        clock=get_clock(),
    )


def get_reject_leave_request_use_case() -> RejectLeaveRequestUseCase:
    return RejectLeaveRequestUseCase(
        accounts=get_account_repository(),
        leave_requests=get_leave_request_repository(),
        clock=get_clock(),
    )


def get_list_leave_requests_use_case() -> ListLeaveRequestsUseCase:
    return ListLeaveRequestsUseCase(
        accounts=get_account_repository(),
        leave_requests=get_leave_request_repository(),
    )


def get_get_leave_request_use_case() -> GetLeaveRequestUseCase:
    return GetLeaveRequestUseCase(leave_requests=get_leave_request_repository())


def get_get_employment_use_case() -> GetEmploymentUseCase:
    return GetEmploymentUseCase(employments=get_employment_repository())


def get_list_employments_use_case() -> ListEmploymentsUseCase:
    return ListEmploymentsUseCase(employments=get_employment_repository())


def get_update_employment_use_case() -> UpdateEmploymentUseCase:
    return UpdateEmploymentUseCase(
        employments=get_employment_repository(),
        job_grades=get_job_grade_repository(),
    )


def get_terminate_employment_use_case() -> TerminateEmploymentUseCase:
    return TerminateEmploymentUseCase(
        employments=get_employment_repository(), clock=get_clock()
    )


def get_list_job_grades_use_case() -> ListJobGradesUseCase:
    return ListJobGradesUseCase(job_grades=get_job_grade_repository())
