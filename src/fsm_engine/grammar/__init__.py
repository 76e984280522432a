"""
Exports públicos do módulo fsm_engine/grammar.

Codec da gramática `SOURCE -> DEST (LABEL);`, exportação GraphViz e
tabela de transições.
"""

from fsm_engine.grammar.formatter import (
    definition_format_lines,
    format_definition,
    format_rule,
)
from fsm_engine.grammar.graphviz import render_graphviz
from fsm_engine.grammar.parser import (
    RULE_PATTERN,
    apply_definition_formats,
    parse_statement,
    split_statements,
    strip_comments,
)
from fsm_engine.grammar.table import (
    TransitionTable,
    format_transition_table,
    transition_table,
)

__all__ = [
    "RULE_PATTERN",
    "TransitionTable",
    "apply_definition_formats",
    "definition_format_lines",
    "format_definition",
    "format_rule",
    "format_transition_table",
    "parse_statement",
    "render_graphviz",
    "split_statements",
    "strip_comments",
    "transition_table",
]
