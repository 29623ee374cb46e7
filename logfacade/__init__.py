"""
logfacade - order-independent logging facade over leveled sinks.

Call sites pass a message template, params, a flat metadata mapping, an error
and a callback in almost any order; the facade sorts them out, folds the error
into the metadata and, in production, masks or rewrites sensitive metadata.

Example::

    import logfacade

    logfacade.init(is_production_env=True)
    log = logfacade.create(__file__)
    log.info({"user": "ann", "password": "x", "$mask": ["password"]}, "login %s", "ok")
"""

__version__ = "0.1.0"

from .config import Settings, configure_logging, get_settings
from .core import Logger, LoggerOptions, classify, create, format_message, init
from .exceptions import (
    ConfigurationError,
    LogFacadeError,
    NotInitializedError,
    SinkError,
)
from .meta import keep_meta, mask, mask_meta, merge_error_meta, modify_meta
from .models import ErrorInfo, LogCall
from .sinks import LoggingSink, MemorySink, Sink

__all__ = [
    # Primary API
    "init",
    "create",
    "Logger",
    "LoggerOptions",
    # Metadata helpers
    "mask",
    "mask_meta",
    "modify_meta",
    "merge_error_meta",
    "keep_meta",
    # Advanced usage
    "classify",
    "format_message",
    "ErrorInfo",
    "LogCall",
    "Sink",
    "LoggingSink",
    "MemorySink",
    # Configuration
    "Settings",
    "configure_logging",
    "get_settings",
    # Errors
    "LogFacadeError",
    "ConfigurationError",
    "NotInitializedError",
    "SinkError",
]
