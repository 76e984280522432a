"""
Serialização de uma Definition de volta para a gramática textual.

Só a topologia é serializada: gates, actions e comentários se perdem.
As linhas são ordenadas lexicograficamente, tornando a saída
determinística e independente da ordem de inserção.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fsm_engine.definition.definition import Definition


def format_rule(source: str, dest: str, label: str) -> str:
    """Formata uma regra `SOURCE -> DEST (LABEL);`."""
    return f"{source} -> {dest} ({label});"


def definition_format_lines(definition: Definition) -> list[str]:
    """Uma linha por transição, já ordenadas."""
    lines = [
        format_rule(state.label, transition.next_state.label, transition.label)
        for state in definition.states.values()
        for transition in state.transitions.values()
    ]
    lines.sort()
    return lines


def format_definition(definition: Definition) -> str:
    """Serializa a topologia da Definition (linhas separadas por '\\n')."""
    return "\n".join(definition_format_lines(definition))
