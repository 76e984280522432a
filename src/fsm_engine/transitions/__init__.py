"""
Exports públicos do módulo fsm_engine/transitions.
"""

from fsm_engine.transitions.transition import Transition

__all__ = ["Transition"]
