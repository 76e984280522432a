"""
Estado de uma máquina de estados.

Um State é identificado por seu label (único dentro de uma Definition,
sensível a maiúsculas) e é dono do mapa de transições que partem dele.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fsm_engine.transitions.transition import Transition
    from fsm_engine.types.hooks import Action


class State:
    """
    Estado rotulado com transições de saída e hooks opcionais.

    Attributes:
        label: Identificador do estado (chave em Definition.states)
        transitions: Mapa label da transição → Transition de saída
        entry_action: Hook chamado com o novo estado ao entrar nele
        exit_action: Hook chamado com o estado ao sair dele
    """

    __slots__ = ("__weakref__", "entry_action", "exit_action", "label", "transitions")

    def __init__(
        self,
        label: str,
        transitions: Iterable[Transition] = (),
    ) -> None:
        """
        Cria o estado, opcionalmente já com transições de saída.

        Args:
            label: Identificador do estado
            transitions: Transições adicionadas via add_transition, em ordem
        """
        self.label = label
        self.transitions: dict[str, Transition] = {}
        self.entry_action: Action | None = None
        self.exit_action: Action | None = None
        for transition in transitions:
            self.add_transition(transition)

    def add_transition(self, transition: Transition) -> None:
        """
        Anexa uma transição de saída a este estado.

        Define a back-reference da transição e sobrescreve qualquer
        transição anterior com o mesmo label (último a escrever vence).
        """
        transition.state = self
        self.transitions[transition.label] = transition

    def transition_labels(self) -> frozenset[str]:
        """Conjunto de labels das transições de saída."""
        return frozenset(self.transitions)

    def __str__(self) -> str:
        return f"State({self.label})"

    def __repr__(self) -> str:
        return f"State(label={self.label!r}, transitions={sorted(self.transitions)!r})"
