"""
Exports públicos do módulo fsm_engine/types.

Assinaturas de hooks e registros de transição.
"""

from fsm_engine.types.hooks import Action, Gate, Logger
from fsm_engine.types.record import TransitionRecord

__all__ = [
    "Action",
    "Gate",
    "Logger",
    "TransitionRecord",
]
