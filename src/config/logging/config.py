"""Configuração do logging estruturado.

A engine só emite records via `logging.getLogger(__name__)`; quem chama
configure_logging é o host ou o script de CLI, uma vez na inicialização:

    configure_logging(level="DEBUG", service_name="turnstile")
    Machine(definition, session_id="turnstile-1").perform_transition("coin")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import SessionIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "fsm-engine"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    session_id_getter: Callable[[], str] | None = None,
) -> None:
    """Troca os handlers do logger raiz por um único handler JSON.

    Args:
        level: Nível do logger raiz e do handler.
        service_name: Valor do campo `service`.
        session_id_getter: session_id padrão para records sem `extra`.

    Raises:
        ValueError: Nível fora de VALID_LOG_LEVELS.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(SessionIdFilter(service_name, session_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
