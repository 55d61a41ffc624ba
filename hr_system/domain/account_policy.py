"""
===============================================================================
TARJETA CRC — domain/account_policy.py
===============================================================================

Módulo:
    Política de alta de cuentas (quién puede crear qué rol)

Responsabilidades:
    - Decidir si un actor con rol X puede crear una cuenta con rol Y.

Reglas:
    - SuperAdmin puede crear HR o Employee.
    - HR solo puede crear Employee.
    - Nadie crea SuperAdmin por API; Employee no crea cuentas.
===============================================================================
"""

from __future__ import annotations

from typing import Final, FrozenSet, Mapping

from .entities import AccountRole

_CREATABLE_ROLES: Final[Mapping[AccountRole, FrozenSet[AccountRole]]] = {
    AccountRole.SUPER_ADMIN: frozenset({AccountRole.HR, AccountRole.EMPLOYEE}),
    AccountRole.HR: frozenset({AccountRole.EMPLOYEE}),
    AccountRole.EMPLOYEE: frozenset(),
}


def can_create_account(actor_role: AccountRole, target_role: AccountRole) -> bool:
    return target_role in _CREATABLE_ROLES.get(actor_role, frozenset())
