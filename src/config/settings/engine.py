"""Settings da engine de máquina de estados.

Controlam apenas efeitos laterais (logs e histórico); a semântica das
transições não depende de configuração.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class EngineSettings:
    """Configurações do Machine.

    Attributes:
        log_transitions: Emite log estruturado a cada tentativa de transição
        history_limit: Máximo de TransitionRecords mantidos por Machine
            (0 desativa o histórico)
    """

    log_transitions: bool = True
    history_limit: int = 256

    def validate(self) -> list[str]:
        """Valida configurações da engine.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.history_limit < 0:
            errors.append("FSM_HISTORY_LIMIT deve ser >= 0")

        return errors


def ensure_valid_engine_settings(settings: EngineSettings) -> EngineSettings:
    """Levanta ValueError se as settings tiverem erros de validação."""
    errors = settings.validate()
    if errors:
        raise ValueError(f"EngineSettings inválidas: {'; '.join(errors)}")
    return settings


def _parse_history_limit(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"FSM_HISTORY_LIMIT deve ser inteiro: {raw!r}") from None


def _load_engine_from_env() -> EngineSettings:
    """Carrega EngineSettings de variáveis de ambiente."""
    return EngineSettings(
        log_transitions=os.getenv("FSM_LOG_TRANSITIONS", "true").lower() in ("true", "1", "yes"),
        history_limit=_parse_history_limit(os.getenv("FSM_HISTORY_LIMIT", "256")),
    )


@lru_cache(maxsize=1)
def get_engine_settings() -> EngineSettings:
    """Retorna instância cacheada e validada de EngineSettings.

    Raises:
        ValueError: FSM_HISTORY_LIMIT não inteiro ou negativo
    """
    return ensure_valid_engine_settings(_load_engine_from_env())
