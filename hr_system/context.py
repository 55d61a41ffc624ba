"""
===============================================================================
TARJETA CRC — hr_system/context.py (Contexto por request)
===============================================================================

Responsabilidades:
  - Guardar los datos de correlación del request en curso (request_id,
    method, path y, tras autenticar, account_id).
  - Exponerlos al logger sin pasarlos como parámetro por todo el stack.

Colaboradores:
  - crosscutting.middleware: abre el contexto al inicio del request.
  - identity.dependencies: agrega account_id al resolver el principal.
  - crosscutting.logger: lee get_context_dict() en cada línea.

Notas:
  - La ContextVar guarda un dict mutable por request. Las dependencias sync
    corren en el threadpool con una copia del contexto; la copia apunta al
    mismo dict, así que account_id llega también a los logs del endpoint.
===============================================================================
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Optional

_request_context: ContextVar[Optional[dict[str, str]]] = ContextVar(
    "hr_request_context", default=None
)


def set_request_context(
    *, request_id: str = "", method: str = "", path: str = ""
) -> None:
    """Abre un contexto nuevo; los valores vacíos no se registran."""
    values = {"request_id": request_id, "method": method, "path": path}
    _request_context.set({k: v for k, v in values.items() if v})


def set_account_context(account_id: str = "") -> None:
    ctx = _request_context.get()
    if ctx is not None and account_id:
        ctx["account_id"] = account_id


def get_context_dict() -> dict[str, str]:
    return dict(_request_context.get() or {})


def clear_context() -> None:
    _request_context.set(None)
