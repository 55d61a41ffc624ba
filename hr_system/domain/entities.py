"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Módulo:
    Entidades del Dominio (Account, Employment, JobGrade, LeaveRequest)

Responsabilidades:
    - Definir estructuras centrales del negocio de RR.HH. (sin infraestructura).
    - Catálogos cerrados: AccountRole, EmploymentStatus, LeaveStatus, LeaveType.
    - Helpers mínimos para mantener invariantes simples (ej: nunca exponer
      password_hash hacia afuera).

Colaboradores:
    - domain.repositories: persisten/recuperan estas entidades.
    - application/usecases: construyen/consumen estas entidades.
    - interfaces/api: serializan DTOs basados en estas entidades.

Principios:
    - Sin dependencias a DB/Redis/FastAPI.
    - Datos + comportamiento mínimo.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal
from enum import Enum, IntEnum
from typing import Optional
from uuid import UUID


# ---------------------------------------------------------------------------
# Account
# ---------------------------------------------------------------------------


class AccountRole(IntEnum):
    """
    Roles del sistema.

    Los valores numéricos son parte del contrato: viajan en el claim "role"
    del token y se persisten como SMALLINT.
    """

    SUPER_ADMIN = 0
    HR = 1
    EMPLOYEE = 2


@dataclass
class Account:
    """
    Cuenta de acceso (identidad + credencial).

    Invariantes:
      - email único (comparación case-sensitive, tal cual se persiste).
      - password_hash nunca se serializa hacia afuera: usar public().
    """

    id: UUID
    first_name: str
    last_name: str
    email: str
    password_hash: str
    role: AccountRole = AccountRole.EMPLOYEE
    phone_number: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def public(self) -> Account:
        """Copia con el hash de password vaciado (para respuestas/caché)."""
        return replace(self, password_hash="")


def strip_password(account: Account | None) -> Account | None:
    return account.public() if account is not None else None


# ---------------------------------------------------------------------------
# Job grade
# ---------------------------------------------------------------------------


@dataclass
class JobGrade:
    """Escalafón salarial (catálogo, code único)."""

    id: UUID
    code: str
    name: str
    description: Optional[str] = None
    min_salary: Optional[Decimal] = None
    max_salary: Optional[Decimal] = None
    created_at: Optional[datetime] = None


# ---------------------------------------------------------------------------
# Employment
# ---------------------------------------------------------------------------


class EmploymentStatus(str, Enum):
    ACTIVE = "active"
    ON_LEAVE = "on_leave"
    TERMINATED = "terminated"


@dataclass
class Employment:
    """
    Relación laboral de una cuenta.

    Invariantes:
      - Se crea en la misma transacción que su Account.
      - status es monótono hacia TERMINATED (no hay "des-terminar").
    """

    id: UUID
    account_id: UUID
    job_grade_id: Optional[UUID] = None
    position_title: Optional[str] = None
    salary: Optional[Decimal] = None
    hire_date: Optional[date] = None
    termination_date: Optional[date] = None
    status: EmploymentStatus = EmploymentStatus.ACTIVE
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_terminated(self) -> bool:
        return self.status == EmploymentStatus.TERMINATED


# ---------------------------------------------------------------------------
# Leave request
# ---------------------------------------------------------------------------


class LeaveStatus(str, Enum):
    """Estados del workflow. APPROVED y REJECTED son terminales."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class LeaveType(str, Enum):
    ANNUAL = "annual"
    SICK = "sick"
    PERSONAL = "personal"
    VACATION = "vacation"


@dataclass
class LeaveRequest:
    """
    Solicitud de licencia.

    Notas:
      - approved_at se usa para ambos resultados (aprobada o rechazada).
      - account / approver se completan en lecturas (embedding del requester
        y del procesador) y siempre salen sin password_hash.
    """

    id: UUID
    account_id: UUID
    leave_type: str
    start_date: date
    end_date: date
    reason: Optional[str] = None
    status: LeaveStatus = LeaveStatus.PENDING
    requested_at: Optional[datetime] = None
    approver_id: Optional[UUID] = None
    approved_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    account: Optional[Account] = None
    approver: Optional[Account] = None

    @property
    def is_pending(self) -> bool:
        return self.status == LeaveStatus.PENDING

    def public(self) -> LeaveRequest:
        """Copia con las cuentas embebidas sin password_hash."""
        return replace(
            self,
            account=strip_password(self.account),
            approver=strip_password(self.approver),
        )
