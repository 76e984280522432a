"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CannotPerformTransitionError,
    InvalidRuleError,
    MissingInitialStateError,
    NoTransitionError,
    StateMachineError,
)

__all__ = [
    "CannotPerformTransitionError",
    "InvalidRuleError",
    "MissingInitialStateError",
    "NoTransitionError",
    "StateMachineError",
]
