"""
===============================================================================
TARJETA CRC — domain/leave_policy.py
===============================================================================

Módulo:
    Política del workflow de licencias (máquina de estados + rol procesador)

Responsabilidades:
    - Definir transiciones válidas: PENDING -> APPROVED | REJECTED.
    - Definir quién puede procesar solicitudes (HR / SuperAdmin).
    - Ser 100% testeable: funciones puras, inputs explícitos.

Colaboradores:
    - domain.entities: AccountRole, LeaveStatus, LeaveRequest
    - application.usecases.leave.process_leave_request (guard compartido)

Reglas:
    - APPROVED y REJECTED son terminales (sin transiciones salientes).
    - end_date >= start_date (mismo día es válido).
===============================================================================
"""

from __future__ import annotations

from datetime import date
from typing import Final, FrozenSet, Mapping

from .entities import Account, AccountRole, LeaveStatus

LEAVE_PROCESSOR_ROLES: Final[FrozenSet[AccountRole]] = frozenset(
    {AccountRole.HR, AccountRole.SUPER_ADMIN}
)

_TRANSITIONS: Final[Mapping[LeaveStatus, FrozenSet[LeaveStatus]]] = {
    LeaveStatus.PENDING: frozenset({LeaveStatus.APPROVED, LeaveStatus.REJECTED}),
    LeaveStatus.APPROVED: frozenset(),
    LeaveStatus.REJECTED: frozenset(),
}


def can_transition(current: LeaveStatus, target: LeaveStatus) -> bool:
    return target in _TRANSITIONS.get(current, frozenset())


def is_terminal(status: LeaveStatus) -> bool:
    return not _TRANSITIONS.get(status)


def is_leave_processor(account: Account | None) -> bool:
    """True si la cuenta existe y su rol puede aprobar/rechazar."""
    return account is not None and account.role in LEAVE_PROCESSOR_ROLES


def is_valid_date_range(start_date: date, end_date: date) -> bool:
    return end_date >= start_date
