"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/account.py
============================================================
Class: PostgresAccountRepository

Responsibilities:
  - Cargar cuentas para autenticación (por email / por id).
  - Crear cuentas y actualizar el hash de password.
  - Mapear filas crudas -> entidad de dominio `Account` y validar `AccountRole`.
  - Exponer fallos consistentes vía `DatabaseError` con logging estructurado.

Collaborators:
  - PostgresRepository (pool / conexión de transacción)
  - domain.entities.Account / AccountRole
  - Tabla: accounts

Constraints / Notes:
  - Retorna None cuando no existe el recurso.
  - Rol inválido persistido => DatabaseError (drift de datos).
  - Email: comparación exacta; la normalización es política de arriba.
============================================================
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from ....crosscutting.exceptions import DatabaseError
from ....domain.entities import Account, AccountRole
from .base import ACCOUNT_FIELDS, PostgresRepository, account_columns

_ACCOUNT_COLUMNS = account_columns()


def row_to_account(row: tuple) -> Account:
    """
    Convierte una fila de `accounts` a entidad `Account`.

    Política:
    - Role casting estricto: valor fuera del enum -> DatabaseError.
    """
    (
        account_id,
        first_name,
        last_name,
        email,
        password_hash,
        role,
        phone_number,
        created_at,
        updated_at,
    ) = row[: len(ACCOUNT_FIELDS)]

    try:
        account_role = AccountRole(role)
    except ValueError as exc:
        raise DatabaseError(f"Invalid account role in database: {role}") from exc

    return Account(
        id=account_id,
        first_name=first_name,
        last_name=last_name,
        email=email,
        password_hash=password_hash,
        role=account_role,
        phone_number=phone_number,
        created_at=created_at,
        updated_at=updated_at,
    )


class PostgresAccountRepository(PostgresRepository):
    """R: Implementación PostgreSQL del repositorio de cuentas."""

    def get_by_email(self, email: str) -> Optional[Account]:
        row = self._fetchone(
            query=f"SELECT {_ACCOUNT_COLUMNS} FROM accounts WHERE email = %s",
            params=(email,),
            context_msg="PostgresAccountRepository: get_by_email failed",
            extra={"email": email},
        )
        return row_to_account(row) if row else None

    def get_by_id(self, account_id: UUID) -> Optional[Account]:
        row = self._fetchone(
            query=f"SELECT {_ACCOUNT_COLUMNS} FROM accounts WHERE id = %s",
            params=(account_id,),
            context_msg="PostgresAccountRepository: get_by_id failed",
            extra={"account_id": str(account_id)},
        )
        return row_to_account(row) if row else None

    def create(self, account: Account) -> Account:
        """
        Inserta la cuenta.

        Nota:
        - Email duplicado => uq_accounts_email => DatabaseError.
        """
        row = self._fetchone(
            query=f"""
                INSERT INTO accounts (
                    id, first_name, last_name, email, password_hash, role, phone_number
                )
                VALUES (%s, %s, %s, %s, %s, %s, %s)
                RETURNING {_ACCOUNT_COLUMNS}
            """,
            params=(
                account.id,
                account.first_name,
                account.last_name,
                account.email,
                account.password_hash,
                int(account.role),
                account.phone_number,
            ),
            context_msg="PostgresAccountRepository: create failed",
            extra={"account_id": str(account.id), "email": account.email},
        )
        if not row:
            raise DatabaseError(
                "PostgresAccountRepository: create failed (no row returned)"
            )
        return row_to_account(row)

    def update_password(
        self, account_id: UUID, password_hash: str
    ) -> Optional[Account]:
        row = self._fetchone(
            query=f"""
                UPDATE accounts
                SET password_hash = %s, updated_at = now()
                WHERE id = %s
                RETURNING {_ACCOUNT_COLUMNS}
            """,
            params=(password_hash, account_id),
            context_msg="PostgresAccountRepository: update_password failed",
            extra={"account_id": str(account_id)},
        )
        return row_to_account(row) if row else None
