"""
===============================================================================
USE CASE: Get Profile
===============================================================================

Business Goal:
    Devolver el perfil de la cuenta autenticada (datos personales + employment).

Why (Context / Intención):
    - Es la lectura más frecuente del portal del empleado: los datos de cuenta
      se leen a través del cache (`account_profile:<id>`).
    - El cache es best-effort: si falla, se lee de la base y se loguea.
    - Nunca se cachea el password_hash.

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Class:
    GetProfileUseCase

Collaborators:
    - AccountRepository.get_by_id
    - EmploymentRepository.get_by_account_id
    - CachePort (get / set)

Error Mapping:
    - ACCOUNT_NOT_FOUND: la cuenta no existe
===============================================================================
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Final
from uuid import UUID

from ....crosscutting.exceptions import CacheError
from ....crosscutting.logger import logger
from ....domain.cache import CachePort
from ....domain.entities import Account, AccountRole
from ....domain.repositories import AccountRepository, EmploymentRepository
from .account_results import AccountError, AccountErrorCode, ProfileResult

PROFILE_KEY_PREFIX: Final[str] = "account_profile:"


def profile_key(account_id: UUID) -> str:
    return f"{PROFILE_KEY_PREFIX}{account_id}"


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_dt(value: Any) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def encode_profile(account: Account) -> str:
    return json.dumps(
        {
            "id": str(account.id),
            "first_name": account.first_name,
            "last_name": account.last_name,
            "email": account.email,
            "role": int(account.role),
            "phone_number": account.phone_number,
            "created_at": _iso(account.created_at),
            "updated_at": _iso(account.updated_at),
        }
    )


def decode_profile(raw: str) -> Account:
    data = json.loads(raw)
    return Account(
        id=UUID(data["id"]),
        first_name=data["first_name"],
        last_name=data["last_name"],
        email=data["email"],
        password_hash="",
        role=AccountRole(data["role"]),
        phone_number=data.get("phone_number"),
        created_at=_parse_dt(data.get("created_at")),
        updated_at=_parse_dt(data.get("updated_at")),
    )


class GetProfileUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        employments: EmploymentRepository,
        cache: CachePort,
        ttl_seconds: int,
    ) -> None:
        self._accounts = accounts
        self._employments = employments
        self._cache = cache
        self._ttl_seconds = ttl_seconds

    def execute(self, account_id: UUID) -> ProfileResult:
        account = self._read_cached(account_id)
        if account is None:
            stored = self._accounts.get_by_id(account_id)
            if stored is None:
                return ProfileResult(
                    error=AccountError(
                        code=AccountErrorCode.ACCOUNT_NOT_FOUND,
                        message="Account not found.",
                    )
                )
            account = stored.public()
            self._write_cached(account)

        employment = self._employments.get_by_account_id(account_id)
        return ProfileResult(account=account, employment=employment)

    def _read_cached(self, account_id: UUID) -> Account | None:
        try:
            raw = self._cache.get(profile_key(account_id))
        except CacheError as exc:
            logger.warning(
                "GetProfile: cache read failed", extra={"error": exc.message}
            )
            return None
        if raw is None:
            return None
        try:
            return decode_profile(raw)
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning(
                "GetProfile: discarding malformed cache entry",
                extra={"account_id": str(account_id), "error": str(exc)},
            )
            return None

    def _write_cached(self, account: Account) -> None:
        try:
            self._cache.set(
                profile_key(account.id), encode_profile(account), self._ttl_seconds
            )
        except CacheError as exc:
            logger.warning(
                "GetProfile: cache write failed", extra={"error": exc.message}
            )
