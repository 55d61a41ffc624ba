"""
===============================================================================
TARJETA CRC — domain/__init__.py
===============================================================================

Módulo:
    Exportaciones de la Capa de Dominio (API pública del dominio)

Responsabilidades:
    - Centralizar exports para imports limpios en application/interfaces.
    - Evitar imports profundos y acoplamientos innecesarios.

Reglas:
    - Solo re-exporta contratos/entidades del dominio.
    - No importar infraestructura aquí.
===============================================================================
"""

from .cache import CachePort
from .entities import (
    Account,
    AccountRole,
    Employment,
    EmploymentStatus,
    JobGrade,
    LeaveRequest,
    LeaveStatus,
    LeaveType,
)
from .repositories import (
    AccountRepository,
    EmploymentRepository,
    JobGradeRepository,
    LeaveRequestRepository,
    ProvisioningTransaction,
    UnitOfWork,
)
from .services import Clock, PasswordHasher

__all__ = [
    # Entities
    "Account",
    "AccountRole",
    "Employment",
    "EmploymentStatus",
    "JobGrade",
    "LeaveRequest",
    "LeaveStatus",
    "LeaveType",
    # Repository Interfaces (Ports)
    "AccountRepository",
    "EmploymentRepository",
    "JobGradeRepository",
    "LeaveRequestRepository",
    "ProvisioningTransaction",
    "UnitOfWork",
    # Service Interfaces (Ports)
    "CachePort",
    "Clock",
    "PasswordHasher",
]
