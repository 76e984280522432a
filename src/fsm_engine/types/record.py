"""Registro imutável de transições executadas.

Cada transição bem-sucedida de um Machine gera um TransitionRecord,
mantido em histórico limitado para auditoria e diagnóstico.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class TransitionRecord:
    """
    Representa uma transição efetivamente executada.

    Attributes:
        from_state: Label do estado de origem
        to_state: Label do estado de destino
        label: Label da transição disparada
        timestamp: Momento da transição (UTC)
    """

    from_state: str
    to_state: str
    label: str
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(UTC)
    )

    @property
    def is_self_loop(self) -> bool:
        """True se a transição não mudou de estado."""
        return self.from_state == self.to_state

    def to_log_dict(self) -> dict[str, Any]:
        """
        Retorna representação para logs estruturados.

        Returns:
            Dict serializável em JSON
        """
        return {
            "from_state": self.from_state,
            "to_state": self.to_state,
            "label": self.label,
            "timestamp": self.timestamp.isoformat(),
        }
