"""
In-memory sink keeping every record it receives.
"""

from datetime import datetime
from typing import Any, Dict, Iterator, List, Mapping, Optional

from .base import Callback, Sink, SinkEntry
from .levels import resolve_level


class MemorySink(Sink):
    """Sink that stores records in a list and supports query and stream."""

    def __init__(self, level: str = "silly"):
        super().__init__(level)
        self.entries: List[SinkEntry] = []

    def write(self, level: str, message: str, meta: Optional[Dict[str, Any]]) -> None:
        self.entries.append(SinkEntry(level=level, message=message, meta=meta))

    def clear(self) -> None:
        self.entries.clear()

    def query(
        self, options: Optional[Mapping[str, Any]] = None, callback: Optional[Callback] = None
    ) -> List[SinkEntry]:
        """
        Select stored records.

        Options:
            level: Only records at this level
            from: Earliest timestamp (inclusive)
            until: Latest timestamp (inclusive)
            limit: Maximum number of records (default 10)
            order: "desc" (newest first, default) or "asc"

        The results are returned, and passed as ``callback(None, results)``
        when a callback is given.
        """
        options = options or {}
        level = options.get("level")
        since: Optional[datetime] = options.get("from")
        until: Optional[datetime] = options.get("until")
        limit = options.get("limit", 10)

        results = [
            entry
            for entry in self.entries
            if (level is None or resolve_level(entry.level) == resolve_level(level))
            and (since is None or entry.timestamp >= since)
            and (until is None or entry.timestamp <= until)
        ]
        if options.get("order", "desc") == "desc":
            results.reverse()
        if limit is not None:
            results = results[:limit]

        if callback is not None:
            callback(None, results)
        return results

    def stream(self, options: Optional[Mapping[str, Any]] = None) -> Iterator[SinkEntry]:
        """Yield stored records starting at index ``options["start"]`` (default 0)."""
        start = (options or {}).get("start", 0)
        for entry in self.entries[start:]:
            yield entry
