"""
===============================================================================
TARJETA CRC — router.py (Router raíz / Composición)
===============================================================================

Responsabilidades:
  - Definir el APIRouter raíz que se incluye en FastAPI (app.include_router).
  - Centralizar responses RFC7807 para OpenAPI.
  - Componer routers por feature (accounts / leave / employments / job grades).

Notas:
  - Este router se incluye desde hr_system/api/main.py con prefix="/v1".
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter

from ....crosscutting.error_responses import OPENAPI_ERROR_RESPONSES
from .routers.accounts import router as accounts_router
from .routers.employments import router as employments_router
from .routers.job_grades import router as job_grades_router
from .routers.leave_requests import router as leave_requests_router


def build_router() -> APIRouter:
    """Construye el router raíz v1 (sin side-effects al importar módulos)."""
    api_router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)

    api_router.include_router(accounts_router)
    api_router.include_router(leave_requests_router)
    api_router.include_router(employments_router)
    api_router.include_router(job_grades_router)

    return api_router


router = build_router()

__all__ = ["router", "build_router"]
