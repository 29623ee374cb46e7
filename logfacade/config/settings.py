"""
Process settings and logging configuration.
"""

import logging
import sys
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Facade settings with environment variable support."""

    # Runtime mode
    is_production_env: bool = Field(
        default=False,
        description="Sanitize metadata ($mask / $rewriter) before it reaches the sink",
    )

    # Defaults for new loggers
    message_connector: str = Field(
        default=" && ", description="Joins a log message with the error message"
    )
    logger_name: str = Field(
        default="logfacade", description="Stdlib logger used by the default sink"
    )
    log_level: str = Field(default="INFO", description="Level for configure_logging")

    class Config:
        env_prefix = "LOGFACADE_"
        env_file = ".env"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure the ``logfacade`` logger tree with development-friendly output.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to ``Settings.log_level``.
    """
    from ..utils.logging.structured import create_development_formatter

    settings = get_settings()
    log_level = getattr(logging, (level or settings.log_level).upper())

    app_logger = logging.getLogger(settings.logger_name)
    app_logger.setLevel(log_level)

    for handler in app_logger.handlers[:]:
        app_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(create_development_formatter())
    app_logger.addHandler(console_handler)

    # Prevent propagation to root logger to avoid duplication
    app_logger.propagate = False


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
