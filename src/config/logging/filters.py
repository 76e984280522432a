"""Filter que marca cada record com a sessão do Machine e o serviço."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class SessionIdFilter(logging.Filter):
    """Garante os campos session_id e service em todo record.

    O Machine já envia `session_id` no `extra` de seus logs. Records de
    outros módulos (parser, Definition, CLI) recebem o valor do getter,
    ou string vazia quando não há getter.
    """

    def __init__(
        self,
        service_name: str,
        session_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_session_id = session_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "session_id", None)
        record.session_id = existing if existing else self._get_session_id()
        record.service = self._service_name
        return True
