"""
===============================================================================
LEAVE USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Name:
    Leave Request Use Case Results

Business Goal:
    Contrato estable de resultados/errores para el workflow de licencias:
    alta, aprobación, rechazo y consultas.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    leave_results models (module)

Responsibilities:
    - LeaveErrorCode / LeaveError.
    - LeaveRequestResult (single) y LeaveRequestListResult (lista).

Collaborators:
    - domain.entities.LeaveRequest
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ....domain.entities import LeaveRequest


class LeaveErrorCode(str, Enum):
    """
    Códigos:
      - VALIDATION_ERROR: input inválido (tipo de licencia vacío).
      - ACCOUNT_NOT_FOUND: el solicitante no existe.
      - INVALID_DATE_RANGE: end_date < start_date.
      - LEAVE_APPLY_FAILED: el insert falló.
      - INVALID_PROCESSOR: el procesador no existe o no es HR/SuperAdmin.
      - LEAVE_REQUEST_NOT_FOUND: la solicitud no existe.
      - INVALID_LEAVE_REQUEST_STATE: la solicitud ya no está pendiente.
      - LEAVE_REQUEST_UPDATE_FAILED: el update falló.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    LEAVE_APPLY_FAILED = "LEAVE_APPLY_FAILED"
    INVALID_PROCESSOR = "INVALID_PROCESSOR"
    LEAVE_REQUEST_NOT_FOUND = "LEAVE_REQUEST_NOT_FOUND"
    INVALID_LEAVE_REQUEST_STATE = "INVALID_LEAVE_REQUEST_STATE"
    LEAVE_REQUEST_UPDATE_FAILED = "LEAVE_REQUEST_UPDATE_FAILED"


@dataclass(frozen=True)
class LeaveError:
    code: LeaveErrorCode
    message: str


@dataclass
class LeaveRequestResult:
    """
    Contrato:
      - éxito => leave_request presente (cuentas embebidas sin password_hash)
      - fallo => error presente
    """

    leave_request: LeaveRequest | None = None
    error: LeaveError | None = None


@dataclass
class LeaveRequestListResult:
    leave_requests: List[LeaveRequest] = field(default_factory=list)
    error: LeaveError | None = None
