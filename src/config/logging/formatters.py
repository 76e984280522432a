"""Formatter JSON dos logs da engine."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "session_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter com os campos fixos em ordem alfabética.

    Campos passados via `extra` (from_state, to_state, label, result)
    são anexados ao objeto. Um disparo bem-sucedido sai assim:

        {"asctime": "...", "level": "DEBUG",
         "logger": "fsm_engine.manager.machine",
         "message": "fsm_transition_performed", "service": "fsm-engine",
         "session_id": "turnstile-1", "label": "coin",
         "from_state": "locked", "to_state": "unlocked"}
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
