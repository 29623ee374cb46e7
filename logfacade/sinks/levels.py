"""
Level names understood by the sinks and their stdlib ``logging`` numbers.
"""

import logging
from typing import Dict, Union

from ..exceptions import SinkError

VERBOSE = 15
SILLY = 5

logging.addLevelName(VERBOSE, "VERBOSE")
logging.addLevelName(SILLY, "SILLY")

# npm-style level names, most severe first
LEVELS: Dict[str, int] = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "verbose": VERBOSE,
    "debug": logging.DEBUG,
    "silly": SILLY,
}

# Stdlib spellings accepted as well
_ALIASES: Dict[str, int] = {
    "critical": logging.CRITICAL,
    "fatal": logging.CRITICAL,
    "warning": logging.WARNING,
}


def resolve_level(level: Union[str, int]) -> int:
    """Map a level name (or number) to its stdlib logging number."""
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    if isinstance(level, str):
        key = level.lower()
        if key in LEVELS:
            return LEVELS[key]
        if key in _ALIASES:
            return _ALIASES[key]
    raise SinkError(f"Unknown log level: {level!r}")
