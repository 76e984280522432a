"""
Exports públicos do módulo fsm_engine/manager.

Machine: execução de transições sobre uma Definition.
"""

from fsm_engine.manager.machine import Machine, create_machine

__all__ = [
    "Machine",
    "create_machine",
]
