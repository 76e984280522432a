#!/usr/bin/env python3
"""Renderiza um arquivo na gramatica `SOURCE -> DEST (LABEL);`.

Uso:
    python scripts/render_definition.py kiosk.definition --format dot

Formatos: formats (gramatica normalizada), dot (GraphViz), table.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from config.logging import configure_logging, get_logger
from config.settings import get_base_settings
from fsm_engine import (
    Definition,
    InvalidRuleError,
    format_transition_table,
    validate_definition,
)

logger = get_logger(__name__)

RENDERERS = {
    "formats": Definition.definition_formats,
    "dot": Definition.graph_viz,
    "table": format_transition_table,
}


def render(text: str, output_format: str) -> str:
    """Interpreta o texto numa Definition nova e renderiza no formato pedido.

    Raises:
        InvalidRuleError: Texto fora da gramatica.
        ValueError: Definition estruturalmente invalida.
    """
    definition = Definition()
    applied = definition.process_definition_formats(text)
    errors = validate_definition(definition)
    if errors:
        raise ValueError("; ".join(errors))
    logger.info(
        "definition_rendered",
        extra={"component": "render_definition", "applied": applied, "format": output_format},
    )
    return RENDERERS[output_format](definition)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", type=Path, help="Arquivo com a definicao da maquina.")
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=sorted(RENDERERS),
        default="formats",
        help="Formato de saida (padrao: formats).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Nivel de log. Se omitido, usa LOG_LEVEL do ambiente.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_base_settings()
    configure_logging(
        level=args.log_level or settings.log_level,
        service_name=settings.service_name,
    )

    text = args.path.read_text(encoding="utf-8")
    try:
        print(render(text, args.output_format))
    except InvalidRuleError as exc:
        print(f"[erro] {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"[erro] definicao invalida: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
