"""
The facade logger: turns loose log calls into records for a sink.
"""

from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional, Sequence

from ..config.settings import get_settings
from ..meta.errors import describe_error
from ..meta.transform import modify_meta
from ..models.core import EMPTY_MESSAGE, ClassifiedArgs, LogCall
from ..sinks.base import Sink
from ..sinks.stdlib import LoggingSink
from .classifier import classify
from .composer import compose_message, format_message
from .options import LoggerOptions

if TYPE_CHECKING:
    from .runtime import RuntimeConfig

# Reserved meta properties that can be renamed through meta_aliases
FILENAME_PROPERTY = "filename"


class Logger:
    """
    Leveled logger accepting arguments in almost any order.

    Examples::

        log = logfacade.create(__file__)
        log.info("this is message")
        log.info({"a": 1, "b": 2})
        log.info({"a": 1}, "id= %s", 1)
        log.info({"a": 1}, "object= %j", {"a": 1})
        log.error(err)                      # err.meta is merged into the meta
        log.error(err, "extra message")     # "extra message && <err message>"
        log.error({"a": 1}, err)            # meta wins over err.meta

    In production mode the ``$mask`` and ``$rewriter`` meta directives are
    applied and stripped before the record reaches the sink; outside it they
    are passed through untouched.
    """

    def __init__(self, options: LoggerOptions, runtime: "RuntimeConfig"):
        self.options = options
        self.runtime = runtime
        self.filename = options.filename
        self.sink: Sink = options.sink or LoggingSink(
            name=options.name or get_settings().logger_name, level=options.level
        )

    # Level shortcuts

    def error(self, *args: Any) -> None:
        self.log("error", *args)

    def warn(self, *args: Any) -> None:
        self.log("warn", *args)

    def info(self, *args: Any) -> None:
        self.log("info", *args)

    def verbose(self, *args: Any) -> None:
        self.log("verbose", *args)

    def debug(self, *args: Any) -> None:
        self.log("debug", *args)

    def silly(self, *args: Any) -> None:
        self.log("silly", *args)

    def log(self, level: str, *args: Any) -> None:
        """
        Log with arguments in any supported order.

        Accepted shapes::

            log(level, [meta], [error], message, [param1, ... paramN], [callback])
            log(level, [error], [meta], [message, [params...]], [callback])
            log(level, [meta], [error], [callback])

        A call without arguments beyond the level does nothing.
        """
        if not args:
            return None
        self._emit(self.build(level, classify(args)))

    def emit(
        self,
        level: str,
        message: Optional[str] = None,
        *,
        params: Sequence[Any] = (),
        meta: Optional[Mapping[str, Any]] = None,
        error: Any = None,
        callback: Optional[Callable[..., Any]] = None,
    ) -> None:
        """Log with every part of the call named explicitly."""
        classified = ClassifiedArgs(
            message=format_message(message, params) if message is not None else None,
            template=message,
            params=list(params),
            meta=meta,
            error=error,
            callback=callback,
        )
        self._emit(self.build(level, classified))

    def build(self, level: str, classified: ClassifiedArgs) -> LogCall:
        """
        Resolve classified arguments into a ``LogCall``.

        Merges the error into the meta and message, substitutes the empty
        message placeholder and, in production mode, sanitizes the meta.
        """
        message = classified.message
        meta = classified.meta
        error = classified.error

        if error is not None:
            merged = self.options.modify_meta_when_log_error(error, meta)
            if merged:
                meta = merged
            message = compose_message(
                message, describe_error(error).message, self.options.message_connector
            )

        if meta is not None and self.runtime.is_production_env:
            meta = modify_meta(meta)

        return LogCall(
            level=level,
            message=message or EMPTY_MESSAGE,
            meta=meta,
            error=error,
            callback=classified.callback,
        )

    def _emit(self, call: LogCall) -> None:
        meta = call.meta
        for rewriter in self.options.rewriters:
            meta = rewriter(call.level, call.message, meta)

        message = call.message
        for message_filter in self.options.filters:
            message = message_filter(call.level, message, meta)

        meta = self._apply_aliases(meta)
        self.sink.log(call.level, message, meta or None, call.callback)

    def _apply_aliases(self, meta: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
        """Add the logger's filename under its configured key, never overwriting."""
        key = self.options.meta_aliases.get(FILENAME_PROPERTY, FILENAME_PROPERTY)
        if not key or (meta is not None and key in meta):
            return dict(meta) if meta is not None else None

        aliased = dict(meta or {})
        aliased[key] = self.filename
        return aliased

    # Sink passthroughs

    def query(self, options: Optional[Mapping[str, Any]] = None, callback=None):
        return self.sink.query(options, callback)

    def profile(self, label: str = "default", meta: Optional[Dict[str, Any]] = None):
        self.sink.profile(label, meta)
        return self

    def stream(self, options: Optional[Mapping[str, Any]] = None):
        return self.sink.stream(options)
