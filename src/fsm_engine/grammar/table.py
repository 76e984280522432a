"""
Tabela de transições: para cada label de transição, o destino a partir
de cada estado.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fsm_engine.definition.definition import Definition

MISSING_CELL = "..."
COLUMN_SEPARATOR = " | "


@dataclass(frozen=True, slots=True)
class TransitionTable:
    """
    Visão tabular da topologia.

    Attributes:
        state_labels: Colunas (labels de estado, ordenados)
        transition_labels: Linhas (labels de transição, ordenados)
        cells: transition label → state label → label do destino
    """

    state_labels: tuple[str, ...]
    transition_labels: tuple[str, ...]
    cells: dict[str, dict[str, str]]

    def destination(self, transition_label: str, state_label: str) -> str | None:
        """Destino da transição a partir do estado, se existir."""
        return self.cells.get(transition_label, {}).get(state_label)


def transition_table(definition: Definition) -> TransitionTable:
    """Monta a TransitionTable de uma Definition."""
    cells: dict[str, dict[str, str]] = {}
    for state in definition.states.values():
        for label, transition in state.transitions.items():
            cells.setdefault(label, {})[state.label] = transition.next_state.label

    return TransitionTable(
        state_labels=tuple(sorted(definition.states)),
        transition_labels=tuple(sorted(cells)),
        cells=cells,
    )


def format_transition_table(definition: Definition) -> str:
    """
    Renderiza a tabela como texto.

    Primeira linha: labels dos estados. Demais: `label: destino | ...`,
    com '...' onde o estado não possui a transição.
    """
    table = transition_table(definition)
    lines = [COLUMN_SEPARATOR.join(table.state_labels)]
    for transition_label in table.transition_labels:
        row = [
            table.destination(transition_label, state_label) or MISSING_CELL
            for state_label in table.state_labels
        ]
        lines.append(f"{transition_label}: {COLUMN_SEPARATOR.join(row)}")
    return "\n".join(lines)
