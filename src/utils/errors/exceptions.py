"""Exceções da engine de máquina de estados.

Todas as falhas são levantadas de forma síncrona para o chamador e nunca
são repetidas internamente. Exceções levantadas dentro de hooks (gate,
action, entry/exit) não passam por aqui: propagam sem encapsulamento.
"""

from __future__ import annotations


class StateMachineError(RuntimeError):
    """Base para falhas reportadas pela engine."""


class NoTransitionError(StateMachineError):
    """O estado atual não possui transição com o label pedido."""

    def __init__(self, label: str, state_label: str) -> None:
        self.label = label
        self.state_label = state_label
        super().__init__(
            f"Nenhuma transição '{label}' a partir do estado '{state_label}'"
        )


class CannotPerformTransitionError(StateMachineError):
    """A transição existe, mas o gate recusou a tentativa."""

    def __init__(self, label: str, state_label: str) -> None:
        self.label = label
        self.state_label = state_label
        super().__init__(
            f"Gate recusou a transição '{label}' a partir do estado '{state_label}'"
        )


class InvalidRuleError(StateMachineError):
    """Statement da gramática não corresponde a `SOURCE -> DEST (LABEL)`.

    Attributes:
        statement: Texto do statement rejeitado (já normalizado)
        applied: Quantidade de statements aplicados antes da falha
    """

    def __init__(self, statement: str, applied: int) -> None:
        self.statement = statement
        self.applied = applied
        super().__init__(
            f"Regra inválida: {statement!r} ({applied} statement(s) aplicados antes)"
        )


class MissingInitialStateError(StateMachineError):
    """Definition sem estado inicial não pode ser executada."""
