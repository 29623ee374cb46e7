"""
Human-readable formatting for records emitted through the facade.

Records produced by ``LoggingSink`` carry their metadata on ``record.meta``;
the development formatter prints it after the message as ``key=value`` pairs.
"""

import json
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

# Values longer than this are truncated on the summary line
MAX_VALUE_LENGTH = 60

# Multi-line fields printed below the summary line instead of inline
BLOCK_FIELDS = ("errorStack",)


def create_development_formatter() -> logging.Formatter:
    """
    Create a human-readable formatter for development environments.

    Output looks like::

        14:02:11.532 | INFO    | user signed in | userId=42 filename=app/auth.py
    """

    class DevelopmentFormatter(logging.Formatter):
        def format(self, record: logging.LogRecord) -> str:
            timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[
                :-3
            ]
            line = f"{timestamp} | {record.levelname:7} | {record.getMessage()}"

            meta: Optional[Dict[str, Any]] = getattr(record, "meta", None)
            if not meta:
                return line

            pairs = self._format_pairs(meta)
            if pairs:
                line = f"{line} | {pairs}"

            blocks = self._format_blocks(meta)
            return "\n".join([line, *blocks]) if blocks else line

        def _format_pairs(self, meta: Dict[str, Any]) -> str:
            """Format inline key=value pairs."""
            parts: List[str] = []
            for key, value in meta.items():
                if key in BLOCK_FIELDS:
                    continue
                parts.append(f"{key}={self._format_value(value)}")
            return " ".join(parts)

        def _format_blocks(self, meta: Dict[str, Any]) -> List[str]:
            blocks = []
            for key in BLOCK_FIELDS:
                value = meta.get(key)
                if value:
                    blocks.append(str(value))
            return blocks

        def _format_value(self, value: Any) -> str:
            if isinstance(value, str):
                text = value
            else:
                try:
                    text = json.dumps(value, default=str, ensure_ascii=False)
                except (TypeError, ValueError):
                    text = repr(value)

            # Truncate long values
            if len(text) > MAX_VALUE_LENGTH:
                text = text[: MAX_VALUE_LENGTH - 3] + "..."
            return text

    return DevelopmentFormatter()
