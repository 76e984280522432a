"""Logging JSON do fsm-engine.

configure_logging instala um único handler no logger raiz; cada record
sai como um objeto JSON com session_id e service, o que permite filtrar
as tentativas de transição de um Machine específico.
"""

from config.logging.config import (
    DEFAULT_SERVICE_NAME,
    VALID_LOG_LEVELS,
    configure_logging,
    get_logger,
)
from config.logging.filters import SessionIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "VALID_LOG_LEVELS",
    "SessionIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
