"""
============================================================
TARJETA CRC
============================================================
Class: hr_system.infrastructure.repositories (Package exports)

Responsibilities:
- Exponer implementaciones concretas de repositorios (Postgres e InMemory)
  en un único punto de importación.

Collaborators:
- Repositorios Postgres (SQL crudo)
- Repositorios InMemory (testing)
============================================================
"""

# ---------------------------
# In-memory implementations
# Usados para tests unitarios rápidos. No persisten datos tras reiniciar la app.
# ---------------------------
from .in_memory import (
    InMemoryAccountRepository,
    InMemoryDatabase,
    InMemoryEmploymentRepository,
    InMemoryJobGradeRepository,
    InMemoryLeaveRequestRepository,
    InMemoryUnitOfWork,
)

# ---------------------------
# Postgres implementations
# Implementaciones de producción con persistencia real y transacciones.
# ---------------------------
from .postgres import (
    PostgresAccountRepository,
    PostgresEmploymentRepository,
    PostgresJobGradeRepository,
    PostgresLeaveRequestRepository,
    PostgresUnitOfWork,
)

__all__ = [
    # Postgres
    "PostgresAccountRepository",
    "PostgresEmploymentRepository",
    "PostgresJobGradeRepository",
    "PostgresLeaveRequestRepository",
    "PostgresUnitOfWork",
    # In-memory
    "InMemoryAccountRepository",
    "InMemoryDatabase",
    "InMemoryEmploymentRepository",
    "InMemoryJobGradeRepository",
    "InMemoryLeaveRequestRepository",
    "InMemoryUnitOfWork",
]
