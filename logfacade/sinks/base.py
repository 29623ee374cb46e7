"""
Sink abstraction for the backend that receives resolved log records.

Defines the interface every sink implements so the facade can hand records
to stdlib logging, to memory, or to any other backend in the same way.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

from ..exceptions import SinkError
from .levels import resolve_level

Callback = Callable[..., Any]


@dataclass
class SinkEntry:
    """
    One record as seen by a sink.

    Attributes:
        level: Level name the record was logged at
        message: Final message text
        meta: Metadata mapping, if any
        timestamp: When the sink received the record (UTC)
    """

    level: str
    message: str
    meta: Optional[Dict[str, Any]] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Sink(ABC):
    """
    Leveled logging backend.

    Subclasses implement ``write``. ``log`` applies the level threshold and
    runs the completion callback as ``callback(None, level, message, meta)``
    once the record has been handed over.
    """

    def __init__(self, level: str = "info"):
        self.level = level
        self._timers: Dict[str, float] = {}

    def is_enabled(self, level: str) -> bool:
        return resolve_level(level) >= resolve_level(self.level)

    def log(
        self,
        level: str,
        message: str,
        meta: Optional[Dict[str, Any]] = None,
        callback: Optional[Callback] = None,
    ) -> None:
        if self.is_enabled(level):
            self.write(level, message, meta)
        if callback is not None:
            callback(None, level, message, meta)

    @abstractmethod
    def write(self, level: str, message: str, meta: Optional[Dict[str, Any]]) -> None:
        """Persist or transport one record."""

    def profile(self, label: str = "default", meta: Optional[Dict[str, Any]] = None):
        """
        Start or stop a named timer.

        The first call with a label starts the timer. The second call stops it
        and logs ``label`` at info level with ``durationMs`` in the meta.
        """
        started = self._timers.pop(label, None)
        if started is None:
            self._timers[label] = time.perf_counter()
            return self

        duration_ms = int((time.perf_counter() - started) * 1000)
        profile_meta = dict(meta or {})
        profile_meta["durationMs"] = duration_ms
        self.log("info", label, profile_meta)
        return self

    def query(
        self, options: Optional[Mapping[str, Any]] = None, callback: Optional[Callback] = None
    ) -> List[SinkEntry]:
        raise SinkError(f"{type(self).__name__} does not support query")

    def stream(self, options: Optional[Mapping[str, Any]] = None) -> Iterator[SinkEntry]:
        raise SinkError(f"{type(self).__name__} does not support stream")
