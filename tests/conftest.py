"""Configuração do pytest para o projeto fsm-engine."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import get_base_settings, get_engine_settings  # noqa: E402

TURNSTILE = (
    "locked -> locked (push); locked -> unlocked (coin); "
    "unlocked -> locked (push); unlocked -> unlocked (coin);"
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são cacheadas; cada teste enxerga o ambiente atual."""
    get_base_settings.cache_clear()
    get_engine_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_engine_settings.cache_clear()


@pytest.fixture
def turnstile_text() -> str:
    return TURNSTILE
