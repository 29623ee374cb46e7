"""
Process-wide initialization and logger creation.

``init()`` must run once at process start, before any ``create()``. Repeat
calls are ignored, so libraries may call it defensively without overriding
the application's choice.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from ..config.settings import get_settings
from ..exceptions import ConfigurationError, NotInitializedError
from .logger import Logger
from .options import LoggerOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeConfig:
    """Settings shared by every logger of the process."""

    is_production_env: bool = False


# Global runtime instance, set once by init()
_runtime: Optional[RuntimeConfig] = None


def init(is_production_env: Optional[bool] = None) -> RuntimeConfig:
    """
    Initialize the facade for this process.

    Args:
        is_production_env: Sanitize metadata before it reaches sinks.
            Defaults to ``Settings.is_production_env`` (env
            ``LOGFACADE_IS_PRODUCTION_ENV``).

    Returns:
        The runtime configuration in effect, which is the first one on
        repeat calls
    """
    global _runtime
    if _runtime is not None:
        logger.debug(
            "init() already called; keeping is_production_env=%s",
            _runtime.is_production_env,
        )
        return _runtime

    if is_production_env is None:
        is_production_env = get_settings().is_production_env

    _runtime = RuntimeConfig(is_production_env=bool(is_production_env))
    return _runtime


def is_initialized() -> bool:
    return _runtime is not None


def get_runtime() -> RuntimeConfig:
    """Get the process runtime configuration."""
    if _runtime is None:
        raise NotInitializedError("You should initialize the log module first.")
    return _runtime


def create(
    options: Union[None, str, Mapping[str, Any], LoggerOptions] = None, **overrides: Any
) -> Logger:
    """
    Create a logger.

    Args:
        options: ``LoggerOptions``, a mapping of options, or just the filename
            (usually ``__file__``)
        **overrides: Individual options, applied on top of ``options``

    Raises:
        NotInitializedError: ``init()`` has not been called
        ConfigurationError: ``filename`` is missing or invalid
    """
    runtime = get_runtime()

    if isinstance(options, LoggerOptions):
        params = dict(options)
    elif isinstance(options, str):
        params = {"filename": options}
    else:
        params = dict(options or {})
    params.update(overrides)

    if not isinstance(params.get("filename"), str):
        raise ConfigurationError("Missing parameter `filename` for creating new logger.")

    try:
        logger_options = LoggerOptions.model_validate(params)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid logger options: {e}") from e

    return Logger(logger_options, runtime)
