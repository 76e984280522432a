"""Assinaturas dos hooks anexáveis a estados e transições.

Todo hook recebe um único argumento: o estado relevante no momento da
chamada. Gates devolvem bool; actions não devolvem nada.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from fsm_engine.states.state import State

# Predicado sem efeitos colaterais avaliado contra o estado atual
Gate: TypeAlias = "Callable[[State], bool]"

# Hook com efeito colateral (entry, exit ou disparo de transição)
Action: TypeAlias = "Callable[[State], None]"

# Canal lateral de diagnóstico do Machine (uma linha legível por tentativa)
Logger: TypeAlias = Callable[[str], None]
