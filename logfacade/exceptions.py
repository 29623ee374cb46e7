"""
Custom exceptions for the logging facade.
"""


class LogFacadeError(Exception):
    """Base exception for logfacade errors."""

    pass


class ConfigurationError(LogFacadeError):
    """Raised when a logger cannot be constructed from its options."""

    pass


class NotInitializedError(ConfigurationError):
    """Raised when a logger is created before ``init()`` was called."""

    pass


class SinkError(LogFacadeError):
    """Raised when a sink cannot serve a request (unknown level, unsupported operation)."""

    pass
