"""Settings base do fsm-engine.

Configurações do host que embute a engine: nome do serviço e nível de
log usados por configure_logging.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from config.logging.config import VALID_LOG_LEVELS


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        service_name: Nome do serviço para logs
        debug: Modo debug ativo (LOG_LEVEL padrão passa a DEBUG)
        log_level: Nível do logger raiz configurado por configure_logging
    """

    service_name: str = "fsm-engine"
    debug: bool = False
    log_level: str = "INFO"

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")

        return errors


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    debug = os.getenv("DEBUG", "").lower() in ("true", "1", "yes")
    return BaseSettings(
        service_name=os.getenv("SERVICE_NAME", "fsm-engine"),
        debug=debug,
        log_level=os.getenv("LOG_LEVEL", "DEBUG" if debug else "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
