"""
Exportação de uma Definition para GraphViz (somente escrita).

Gera um bloco `digraph` com um nó sintético `start` apontando para o
estado inicial, um nó por estado e uma aresta rotulada por transição.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fsm_engine.definition.definition import Definition

START_NODE = "start"

NODE_DEFAULTS = "node [shape=circle, height=1, width=1]"
START_NODE_STYLE = (
    'label="", shape=circle, style=filled, color=black, height=0.25, width=0.25'
)


def _quote(identifier: str) -> str:
    # Identificadores da gramática podem conter '.' e '-', inválidos sem aspas
    escaped = identifier.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render_graphviz(definition: Definition) -> str:
    """
    Renderiza a Definition em linguagem DOT.

    Estados e arestas são emitidos ordenados por label. Sem estado
    inicial, o nó `start` é emitido sem aresta.

    Returns:
        Texto DOT terminado em '\\n'
    """
    lines = ["digraph {", f"\t{NODE_DEFAULTS}", f"\t{START_NODE} [{START_NODE_STYLE}]"]

    states = sorted(definition.states.values(), key=lambda s: s.label)
    for state in states:
        lines.append(f"\t{_quote(state.label)} [label={_quote(state.label)}]")

    if definition.initial_state is not None:
        lines.append(f"\t{START_NODE} -> {_quote(definition.initial_state.label)}")

    for state in states:
        for label in sorted(state.transitions):
            transition = state.transitions[label]
            lines.append(
                f"\t{_quote(state.label)} -> {_quote(transition.next_state.label)}"
                f" [label={_quote(label)}]"
            )

    lines.append("}")
    return "\n".join(lines) + "\n"
