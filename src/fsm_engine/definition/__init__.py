"""
Exports públicos do módulo fsm_engine/definition.
"""

from fsm_engine.definition.definition import Definition

__all__ = ["Definition"]
