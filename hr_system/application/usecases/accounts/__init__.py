"""
===============================================================================
ACCOUNT USE CASES PACKAGE (Public API / Exports)
===============================================================================

Responsibilities:
    - Re-exportar casos de uso de cuentas, sus DTOs y resultados.
    - Definir __all__ como contrato de API pública del paquete.
===============================================================================
"""

from __future__ import annotations

from .account_results import (
    AccountError,
    AccountErrorCode,
    AccountResult,
    PasswordChangeResult,
    ProfileResult,
)
from .change_password import ChangePasswordInput, ChangePasswordUseCase
from .create_account import CreateAccountInput, CreateAccountWithEmploymentUseCase
from .get_profile import GetProfileUseCase, profile_key

__all__ = [
    "AccountError",
    "AccountErrorCode",
    "AccountResult",
    "ChangePasswordInput",
    "ChangePasswordUseCase",
    "CreateAccountInput",
    "CreateAccountWithEmploymentUseCase",
    "GetProfileUseCase",
    "PasswordChangeResult",
    "ProfileResult",
    "profile_key",
]
