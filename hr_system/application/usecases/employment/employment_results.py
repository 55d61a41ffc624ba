"""
===============================================================================
EMPLOYMENT USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Responsibilities:
    - EmploymentErrorCode / EmploymentError.
    - EmploymentResult (single) y EmploymentListResult.

Códigos:
    - VALIDATION_ERROR: inputs inválidos (salario negativo, job grade
      inexistente, fecha de baja anterior al alta).
    - EMPLOYMENT_NOT_FOUND: no existe el registro.
    - EMPLOYMENT_TERMINATED: el registro está dado de baja (no se edita).
    - ALREADY_TERMINATED: baja repetida.
    - EMPLOYMENT_UPDATE_FAILED: falla de storage en el update.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ....domain.entities import Employment


class EmploymentErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    EMPLOYMENT_NOT_FOUND = "EMPLOYMENT_NOT_FOUND"
    EMPLOYMENT_TERMINATED = "EMPLOYMENT_TERMINATED"
    ALREADY_TERMINATED = "ALREADY_TERMINATED"
    EMPLOYMENT_UPDATE_FAILED = "EMPLOYMENT_UPDATE_FAILED"


@dataclass(frozen=True)
class EmploymentError:
    code: EmploymentErrorCode
    message: str


@dataclass
class EmploymentResult:
    employment: Employment | None = None
    error: EmploymentError | None = None


@dataclass
class EmploymentListResult:
    employments: List[Employment] = field(default_factory=list)
    error: EmploymentError | None = None
