"""
Transição rotulada entre dois estados.

O label só precisa ser único entre as transições que partem de um
mesmo estado. O estado de origem é guardado como referência fraca:
quem mantém os estados vivos é a Definition.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fsm_engine.states.state import State
    from fsm_engine.types.hooks import Action, Gate


class Transition:
    """
    Aresta rotulada do grafo de estados.

    Attributes:
        label: Label da transição (chave em State.transitions)
        next_state: Estado de destino
        gate: Predicado opcional avaliado contra o estado atual
        action: Hook opcional chamado com o novo estado após o disparo
    """

    __slots__ = ("_state_ref", "action", "gate", "label", "next_state")

    def __init__(
        self,
        label: str,
        next_state: State,
        gate: Gate | None = None,
        action: Action | None = None,
    ) -> None:
        self.label = label
        self.next_state = next_state
        self.gate = gate
        self.action = action
        self._state_ref: weakref.ReferenceType[State] | None = None

    @property
    def state(self) -> State | None:
        """Estado de origem (None se ainda não anexada ou já coletado)."""
        if self._state_ref is None:
            return None
        return self._state_ref()

    @state.setter
    def state(self, value: State | None) -> None:
        self._state_ref = weakref.ref(value) if value is not None else None

    def __str__(self) -> str:
        return f"Transition({self.label})"

    def __repr__(self) -> str:
        source = self.state
        source_label = source.label if source is not None else None
        return (
            f"Transition(label={self.label!r}, "
            f"state={source_label!r}, "
            f"next_state={self.next_state.label!r})"
        )
