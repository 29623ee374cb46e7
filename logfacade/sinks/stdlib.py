"""
Default sink: hands records to a stdlib ``logging.Logger``.
"""

import logging
from typing import Any, Dict, Optional

from .base import Sink
from .levels import resolve_level


class LoggingSink(Sink):
    """
    Sink backed by stdlib logging.

    Records are built with ``makeRecord`` and carry the metadata on
    ``record.meta`` so formatters and handlers can render it.
    """

    def __init__(self, name: str = "logfacade", level: str = "info"):
        super().__init__(level)
        self.logger = logging.getLogger(name)

    def write(self, level: str, message: str, meta: Optional[Dict[str, Any]]) -> None:
        levelno = resolve_level(level)
        if not self.logger.isEnabledFor(levelno):
            return

        record = self.logger.makeRecord(
            self.logger.name, levelno, "(logfacade)", 0, message, (), None
        )
        record.meta = meta or {}
        self.logger.handle(record)
