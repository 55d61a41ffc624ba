"""
===============================================================================
TARJETA CRC — hr_system/crosscutting/middleware.py (Contexto de request)
===============================================================================

Responsabilidades:
  - Aceptar o generar X-Request-Id y devolverlo en toda respuesta.
  - Poblar las ContextVars (request_id / method / path) para los logs.
  - Emitir una línea de acceso por request, con nivel según el status.
  - Limpiar el contexto al terminar, haya o no excepción.

Colaboradores:
  - hr_system/context.py
  - crosscutting/logger.py
===============================================================================
"""

from __future__ import annotations

import logging
import re
import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ..context import clear_context, set_request_context
from .logger import logger

REQUEST_ID_HEADER = "X-Request-Id"

# R: ids del cliente: cortos y sin caracteres que rompan headers/logs.
_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")


def resolve_request_id(incoming: str | None) -> str:
    candidate = (incoming or "").strip()
    if _REQUEST_ID_PATTERN.match(candidate):
        return candidate
    return uuid.uuid4().hex


def _access_log_level(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Correlación y access log; /healthz no genera línea de acceso."""

    quiet_paths = frozenset({"/healthz"})

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        set_request_context(
            request_id=request_id, method=request.method, path=request.url.path
        )
        request.state.request_id = request_id

        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        except Exception:
            logger.exception("Request abortado por excepción no controlada")
            raise
        finally:
            if request.url.path not in self.quiet_paths:
                logger.log(
                    _access_log_level(status_code),
                    "%s %s -> %s",
                    request.method,
                    request.url.path,
                    status_code,
                    extra={
                        "status_code": status_code,
                        "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                    },
                )
            clear_context()
