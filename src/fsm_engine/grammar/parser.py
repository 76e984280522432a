"""
Parser da gramática textual de transições.

Formato (um statement por regra, terminado em ';'):

    SOURCE -> DEST (LABEL);

- Linhas iniciadas por '#' são descartadas; em demais linhas, '#' e o
  restante da linha são removidos (comentário ao final da regra).
- Um statement pode ocupar várias linhas físicas; quebras de linha e
  espaços repetidos são colapsados.
- O ';' final do último statement é opcional.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from fsm_engine.transitions.transition import Transition
from utils.errors import InvalidRuleError

if TYPE_CHECKING:
    from fsm_engine.definition.definition import Definition

logger = logging.getLogger(__name__)

COMMENT_MARKER = "#"
STATEMENT_TERMINATOR = ";"

_IDENTIFIER = r"[a-z0-9_.\-]+"
RULE_PATTERN = re.compile(
    rf"\s*({_IDENTIFIER})\s*->\s*({_IDENTIFIER})\s*\(\s*({_IDENTIFIER})\s*\)\s*",
    re.IGNORECASE | re.ASCII,
)

_WHITESPACE = re.compile(r"\s+")


def strip_comments(text: str) -> str:
    """Remove linhas de comentário e comentários ao final de linhas."""
    kept: list[str] = []
    for line in text.splitlines():
        if line.strip().startswith(COMMENT_MARKER):
            continue
        kept.append(line.split(COMMENT_MARKER, 1)[0])
    return "\n".join(kept)


def split_statements(text: str) -> list[str]:
    """
    Quebra o texto em statements normalizados.

    Args:
        text: Texto bruto na gramática de transições

    Returns:
        Statements não vazios, com espaços colapsados, na ordem original
    """
    statements: list[str] = []
    for raw in strip_comments(text).split(STATEMENT_TERMINATOR):
        statement = _WHITESPACE.sub(" ", raw).strip()
        if statement:
            statements.append(statement)
    return statements


def parse_statement(statement: str) -> tuple[str, str, str] | None:
    """
    Extrai (source, dest, label) de um statement.

    Returns:
        Tupla com os identificadores preservando maiúsculas, ou None se o
        statement não corresponder à regra por inteiro
    """
    match = RULE_PATTERN.fullmatch(statement)
    if match is None:
        return None
    source, dest, label = match.groups()
    return source, dest, label


def apply_definition_formats(definition: Definition, text: str) -> int:
    """
    Aplica as regras do texto à Definition, em ordem.

    Estados citados e ainda inexistentes são criados via state_for_label
    (origem antes do destino), o que define o estado inicial implícito.
    A aplicação não é atômica: regras anteriores à falha permanecem.

    Args:
        definition: Definition que recebe estados e transições
        text: Texto na gramática de transições

    Returns:
        Quantidade de statements aplicados

    Raises:
        InvalidRuleError: Ao primeiro statement que não corresponde à regra
    """
    applied = 0
    for statement in split_statements(text):
        parsed = parse_statement(statement)
        if parsed is None:
            logger.warning(
                "fsm_grammar_invalid_rule",
                extra={
                    "component": "fsm_grammar",
                    "action": "parse",
                    "result": "invalid_rule",
                    "applied": applied,
                },
            )
            raise InvalidRuleError(statement, applied)

        source_label, dest_label, transition_label = parsed
        source = definition.state_for_label(source_label)
        dest = definition.state_for_label(dest_label)
        source.add_transition(Transition(transition_label, next_state=dest))
        applied += 1

    logger.debug(
        "fsm_grammar_parsed",
        extra={
            "component": "fsm_grammar",
            "action": "parse",
            "result": "ok",
            "applied": applied,
        },
    )
    return applied
