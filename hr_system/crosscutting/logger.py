"""
===============================================================================
TARJETA CRC — hr_system/crosscutting/logger.py (Logging estructurado)
===============================================================================

Responsabilidades:
  - Emitir un objeto JSON por línea (parseable por el colector de logs).
  - Adjuntar el contexto del request (request_id / method / path).
  - Enmascarar credenciales: passwords, hashes, tokens y secretos nunca salen
    en claro, ni siquiera anidados dentro de un `extra`.

Patrones aplicados:
  - Formatter pluggable: JSON en runtime, texto plano para desarrollo local.
  - Configuración tardía: el logger existe al importar y `configure_logging`
    ajusta nivel/formato cuando la app ya tiene Settings.

Colaboradores:
  - hr_system/context.py (ContextVars del request)
  - hr_system/api/main.py (llama a configure_logging)
===============================================================================
"""

from __future__ import annotations

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any

from ..context import get_context_dict

LOGGER_NAME = "hr-system"
MASK = "[redacted]"

# R: Atributos propios de LogRecord; lo demás en __dict__ vino por `extra=`.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}

# R: Match por substring: cubre old_password, password_hash, jwt_secret, etc.
_SENSITIVE_FRAGMENTS = ("password", "secret", "token", "authorization", "credential")

_MAX_STRING = 4_000
_MAX_DEPTH = 4


def _is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(fragment in lowered for fragment in _SENSITIVE_FRAGMENTS)


def scrub(value: Any, *, key: str = "", depth: int = 0) -> Any:
    """Copia apta para log: claves sensibles enmascaradas, strings acotados."""
    if key and _is_sensitive(key):
        return MASK
    if depth > _MAX_DEPTH:
        return "[depth limit]"
    if isinstance(value, str):
        return value if len(value) <= _MAX_STRING else value[:_MAX_STRING] + "[…]"
    if isinstance(value, (bytes, bytearray)):
        return f"<{len(value)} bytes>"
    if isinstance(value, dict):
        return {str(k): scrub(v, key=str(k), depth=depth + 1) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [scrub(v, key=key, depth=depth + 1) for v in value]
    return value


def _extras(record: logging.LogRecord) -> dict[str, Any]:
    return {
        k: scrub(v, key=k)
        for k, v in record.__dict__.items()
        if k not in _RECORD_ATTRS and not k.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """LogRecord -> una línea JSON (UUID, Decimal y fechas via `default=str`)."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "src": f"{record.module}:{record.lineno}",
        }
        entry.update(get_context_dict())
        entry.update(_extras(record))

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, exc_tb = record.exc_info
            entry["exc"] = {
                "type": exc_type.__name__,
                "detail": str(exc_value),
                "trace": traceback.format_exception(exc_type, exc_value, exc_tb),
            }

        return json.dumps(entry, ensure_ascii=False, default=str)


class PlainFormatter(logging.Formatter):
    """Formato legible para consola local; conserva request_id y extras."""

    def format(self, record: logging.LogRecord) -> str:
        context = get_context_dict()
        prefix = f"[{context['request_id']}] " if context.get("request_id") else ""
        extras = _extras(record)
        suffix = f" {json.dumps(extras, default=str)}" if extras else ""
        line = f"{record.levelname:<7} {prefix}{record.getMessage()}{suffix}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def configure_logging(level: str = "INFO", *, use_json: bool = True) -> logging.Logger:
    """
    Ajusta nivel y formato del logger global.

    Idempotente: reemplaza el formatter del handler existente en lugar de
    apilar handlers cuando la app se crea más de una vez (tests).
    """
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))

    if not log.handlers:
        log.addHandler(logging.StreamHandler(sys.stdout))
    formatter = JSONFormatter() if use_json else PlainFormatter()
    for handler in log.handlers:
        handler.setFormatter(formatter)

    return log


# Instancia global (import-friendly); main.create_app la reconfigura.
logger = configure_logging()
