"""
Logger construction options.
"""

from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field

from ..config.settings import get_settings
from ..meta.errors import merge_error_meta

ErrorMetaHook = Callable[[Any, Optional[Dict[str, Any]]], Optional[Dict[str, Any]]]
Rewriter = Callable[[str, str, Optional[Dict[str, Any]]], Optional[Dict[str, Any]]]
MessageFilter = Callable[[str, str, Optional[Dict[str, Any]]], str]


def _default_connector() -> str:
    return get_settings().message_connector


class LoggerOptions(BaseModel):
    """
    Options recognized when creating a logger.

    The camel-case spellings (``MESSAGE_CONNECTOR``, ``metaAliases``,
    ``modifyMetaWhenLogError``) are accepted as aliases.
    """

    filename: str = Field(description="File path identifying this logger")
    message_connector: str = Field(
        default_factory=_default_connector,
        alias="MESSAGE_CONNECTOR",
        description="Joins the log message and the error message",
    )
    meta_aliases: Dict[str, Optional[str]] = Field(
        default_factory=lambda: {"filename": "filename"},
        alias="metaAliases",
        description="Reserved meta property -> key it is written under (None disables)",
    )
    modify_meta_when_log_error: ErrorMetaHook = Field(
        default=merge_error_meta,
        alias="modifyMetaWhenLogError",
        description="Builds the meta of a call that carries an error",
    )
    rewriters: List[Rewriter] = Field(
        default_factory=list,
        description="Functions (level, message, meta) -> meta run on every call",
    )
    filters: List[MessageFilter] = Field(
        default_factory=list,
        description="Functions (level, message, meta) -> message run on every call",
    )
    level: str = Field(default="info", description="Lowest level the sink emits")
    name: Optional[str] = Field(default=None, description="Stdlib logger name")
    sink: Optional[Any] = Field(default=None, description="Sink receiving records")

    class Config:
        populate_by_name = True
        extra = "ignore"
