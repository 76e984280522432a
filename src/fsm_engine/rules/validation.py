"""
Validação estrutural de uma Definition.

A engine não impede construções inconsistentes (o modelo é livre para
montagem incremental); estas verificações existem para o host checar a
topologia antes de criar Machines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fsm_engine.definition.definition import Definition


def validate_definition(definition: Definition) -> list[str]:
    """
    Valida a integridade da Definition.

    Verifica:
    - Existe estado inicial e ele está registrado em `states`
    - Cada estado está registrado sob o próprio label
    - Cada transição está registrada sob o próprio label
    - O destino de cada transição é o estado registrado com aquele label
    - A back-reference de cada transição aponta para o estado que a contém

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    initial = definition.initial_state
    if initial is None:
        errors.append("Definition sem estado inicial")
    elif definition.states.get(initial.label) is not initial:
        errors.append(f"Estado inicial {initial.label} não está registrado")

    for key, state in definition.states.items():
        if state.label != key:
            errors.append(f"Estado {state.label} registrado sob o label {key}")

        for label, transition in state.transitions.items():
            edge = f"{state.label} -> {transition.next_state.label} ({label})"
            if transition.label != label:
                errors.append(
                    f"Transição {edge}: registrada sob {label}, label é {transition.label}"
                )
            if definition.states.get(transition.next_state.label) is not transition.next_state:
                errors.append(f"Transição {edge}: destino fora da Definition")
            if transition.state is not state:
                errors.append(f"Transição {edge}: back-reference inconsistente")

    return errors


def is_valid_definition(definition: Definition) -> bool:
    """True se validate_definition não encontrar erros."""
    return not validate_definition(definition)
