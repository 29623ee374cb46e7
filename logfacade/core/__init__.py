"""
Facade core: argument classification, message composition and loggers.
"""

from .classifier import classify, render_args
from .composer import compose_message, format_message
from .logger import Logger
from .options import LoggerOptions
from .runtime import RuntimeConfig, create, get_runtime, init, is_initialized

__all__ = [
    "Logger",
    "LoggerOptions",
    "RuntimeConfig",
    "classify",
    "compose_message",
    "create",
    "format_message",
    "get_runtime",
    "init",
    "is_initialized",
    "render_args",
]
