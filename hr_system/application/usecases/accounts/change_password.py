"""
===============================================================================
USE CASE: Change Password
===============================================================================

Business Goal:
    Permitir que una cuenta cambie su propio password verificando el actual,
    y cerrar la sesión activa para forzar un login nuevo.

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Class:
    ChangePasswordUseCase

Collaborators:
    - AccountRepository.get_by_id / update_password
    - PasswordHasher.verify / hash
    - SessionService.revoke (best-effort)

Error Mapping:
    - VALIDATION_ERROR: password nuevo vacío o igual al actual
    - ACCOUNT_NOT_FOUND: la cuenta no existe
    - INVALID_CREDENTIALS: password actual incorrecto
    - PASSWORD_HASHING_FAILED: el hasher falló
    - PASSWORD_UPDATE_FAILED: no se pudo persistir el hash
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from ....domain.repositories import AccountRepository
from ....domain.services import PasswordHasher
from ....identity.errors import PasswordHashingError, SessionCheckFailedError
from .account_results import AccountError, AccountErrorCode, PasswordChangeResult


class SessionRevoker(Protocol):
    def revoke(self, account_id: UUID) -> None: ...


@dataclass(frozen=True)
class ChangePasswordInput:
    account_id: UUID
    old_password: str
    new_password: str


class ChangePasswordUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        password_hasher: PasswordHasher,
        sessions: SessionRevoker,
    ) -> None:
        self._accounts = accounts
        self._hasher = password_hasher
        self._sessions = sessions

    def execute(self, input_data: ChangePasswordInput) -> PasswordChangeResult:
        if not input_data.new_password:
            return self._error(
                AccountErrorCode.VALIDATION_ERROR, "New password is required."
            )
        if input_data.new_password == input_data.old_password:
            return self._error(
                AccountErrorCode.VALIDATION_ERROR,
                "New password must differ from the current one.",
            )

        account = self._accounts.get_by_id(input_data.account_id)
        if account is None:
            return self._error(AccountErrorCode.ACCOUNT_NOT_FOUND, "Account not found.")

        if not self._hasher.verify(account.password_hash, input_data.old_password):
            return self._error(
                AccountErrorCode.INVALID_CREDENTIALS, "Current password is incorrect."
            )

        try:
            new_hash = self._hasher.hash(input_data.new_password)
        except PasswordHashingError as exc:
            logger.error(
                "ChangePassword: password hashing failed", extra={"error": exc.message}
            )
            return self._error(
                AccountErrorCode.PASSWORD_HASHING_FAILED, "Failed to hash password."
            )

        try:
            updated = self._accounts.update_password(account.id, new_hash)
        except DatabaseError as exc:
            logger.error(
                "ChangePassword: update failed",
                extra={"account_id": str(account.id), "error": exc.message},
            )
            return self._error(
                AccountErrorCode.PASSWORD_UPDATE_FAILED, "Failed to update password."
            )
        if updated is None:
            return self._error(AccountErrorCode.ACCOUNT_NOT_FOUND, "Account not found.")

        # R: El password ya cambió; si el cache no responde la sesión vieja
        # sigue viva hasta su expiración.
        try:
            self._sessions.revoke(account.id)
        except SessionCheckFailedError as exc:
            logger.warning(
                "ChangePassword: session revoke failed",
                extra={"account_id": str(account.id), "error": exc.message},
            )

        logger.info("Password actualizado", extra={"account_id": str(account.id)})
        return PasswordChangeResult(changed=True)

    @staticmethod
    def _error(code: AccountErrorCode, message: str) -> PasswordChangeResult:
        return PasswordChangeResult(error=AccountError(code=code, message=message))
