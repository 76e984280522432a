"""
Definition: o grafo estático de estados e transições.

A Definition é dona dos estados (mapa label → State) e guarda o estado
inicial. É o "programa" compartilhado, em modo somente leitura, pelos
Machines construídos sobre ela.
"""

from __future__ import annotations

import logging

from fsm_engine.grammar.formatter import format_definition
from fsm_engine.grammar.graphviz import render_graphviz
from fsm_engine.grammar.parser import apply_definition_formats
from fsm_engine.states.state import State

logger = logging.getLogger(__name__)


class Definition:
    """
    Contêiner do grafo de estados.

    O primeiro estado adicionado torna-se o inicial quando nenhum foi
    designado; depois disso add_state nunca o reatribui. A atribuição
    explícita via `initial_state` continua permitida.

    Attributes:
        states: Mapa label → State
        initial_state: Estado em que novos Machines começam
    """

    __slots__ = ("_initial_state", "states")

    def __init__(self) -> None:
        self.states: dict[str, State] = {}
        self._initial_state: State | None = None

    @property
    def initial_state(self) -> State | None:
        """Estado inicial (None enquanto a Definition estiver vazia)."""
        return self._initial_state

    @initial_state.setter
    def initial_state(self, state: State | None) -> None:
        self._initial_state = state

    def add_state(self, state: State) -> None:
        """
        Registra o estado sob seu label (sobrescreve o de mesmo label).

        Aplica a regra do estado inicial implícito.
        """
        self.states[state.label] = state
        if self._initial_state is None:
            self._initial_state = state
            logger.debug(
                "fsm_initial_state_set",
                extra={
                    "component": "fsm_definition",
                    "action": "add_state",
                    "state": state.label,
                },
            )

    def __iadd__(self, state: State) -> Definition:
        self.add_state(state)
        return self

    def state_for_label(self, label: str) -> State:
        """
        Busca ou cria o estado com o label informado.

        Args:
            label: Label do estado

        Returns:
            O State existente, ou um novo State vazio já registrado
        """
        state = self.states.get(label)
        if state is None:
            state = State(label)
            self.add_state(state)
        return state

    def process_definition_formats(self, text: str) -> int:
        """
        Aplica regras `SOURCE -> DEST (LABEL);` a esta Definition.

        Returns:
            Quantidade de statements aplicados

        Raises:
            InvalidRuleError: Statement fora da gramática; os anteriores
                permanecem aplicados
        """
        return apply_definition_formats(self, text)

    def definition_formats(self) -> str:
        """Serializa a topologia na gramática textual (linhas ordenadas)."""
        return format_definition(self)

    def graph_viz(self) -> str:
        """Exporta a topologia em DOT."""
        return render_graphviz(self)

    def _signature(self) -> tuple[str | None, dict[str, frozenset[str]]]:
        initial = self._initial_state.label if self._initial_state is not None else None
        return initial, {
            label: state.transition_labels() for label, state in self.states.items()
        }

    def __eq__(self, other: object) -> bool:
        """
        Igualdade estrutural.

        Compara o label do estado inicial e, para cada label de estado,
        o conjunto de labels de transição. Hooks não participam.
        """
        if not isinstance(other, Definition):
            return NotImplemented
        if self._signature() != other._signature():
            return False
        return all(
            state.label == other.states[label].label
            for label, state in self.states.items()
        )

    def __repr__(self) -> str:
        initial = self._initial_state.label if self._initial_state is not None else None
        return f"Definition(initial_state={initial!r}, states={sorted(self.states)!r})"
