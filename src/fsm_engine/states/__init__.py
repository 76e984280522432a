"""
Exports públicos do módulo fsm_engine/states.
"""

from fsm_engine.states.state import State

__all__ = ["State"]
