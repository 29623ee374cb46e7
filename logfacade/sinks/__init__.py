"""
Sinks: the leveled backends that receive resolved log records.
"""

from .base import Sink, SinkEntry
from .levels import LEVELS, resolve_level
from .memory import MemorySink
from .stdlib import LoggingSink

__all__ = ["LEVELS", "LoggingSink", "MemorySink", "Sink", "SinkEntry", "resolve_level"]
