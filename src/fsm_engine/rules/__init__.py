"""
Exports públicos do módulo fsm_engine/rules.

Invariantes estruturais de uma Definition.
"""

from fsm_engine.rules.validation import is_valid_definition, validate_definition

__all__ = [
    "is_valid_definition",
    "validate_definition",
]
