"""Agregador de settings do fsm-engine.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    get_base_settings,
)
from config.settings.engine import (
    EngineSettings,
    ensure_valid_engine_settings,
    get_engine_settings,
)

__all__ = [
    # Base
    "BaseSettings",
    # Engine
    "EngineSettings",
    "ensure_valid_engine_settings",
    "get_base_settings",
    "get_engine_settings",
]
