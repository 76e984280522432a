"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    get_base_settings,
)

__all__ = [
    "BaseSettings",
    "get_base_settings",
]
