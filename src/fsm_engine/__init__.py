"""
fsm-engine: máquina de estados finitos genérica e embutível.

O host declara estados e transições rotuladas (diretamente ou via a
gramática `SOURCE -> DEST (LABEL);`), anexa gates e hooks, e dirige a
máquina submetendo labels de transição.

Estrutura:
    - states/: State (transições de saída, entry/exit hooks)
    - transitions/: Transition (destino, gate, action)
    - definition/: Definition (grafo, estado inicial, igualdade estrutural)
    - grammar/: parser, serialização, GraphViz, tabela de transições
    - rules/: validação estrutural
    - manager/: Machine (execução)
    - types/: assinaturas de hooks e TransitionRecord
"""

from fsm_engine.definition import Definition
from fsm_engine.grammar import (
    TransitionTable,
    format_transition_table,
    transition_table,
)
from fsm_engine.manager import Machine, create_machine
from fsm_engine.rules import is_valid_definition, validate_definition
from fsm_engine.states import State
from fsm_engine.transitions import Transition
from fsm_engine.types import Action, Gate, Logger, TransitionRecord
from utils.errors import (
    CannotPerformTransitionError,
    InvalidRuleError,
    MissingInitialStateError,
    NoTransitionError,
    StateMachineError,
)

__all__ = [
    "Action",
    "CannotPerformTransitionError",
    "Definition",
    "Gate",
    "InvalidRuleError",
    "Logger",
    "Machine",
    "MissingInitialStateError",
    "NoTransitionError",
    "State",
    "StateMachineError",
    "Transition",
    "TransitionRecord",
    "TransitionTable",
    "create_machine",
    "format_transition_table",
    "is_valid_definition",
    "transition_table",
    "validate_definition",
]
