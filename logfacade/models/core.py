"""
Core data models for logfacade.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field

# Reserved meta keys read by modify_meta
MASK_KEY = "$mask"
REWRITER_KEY = "$rewriter"

EMPTY_MESSAGE = "(empty message)"


class ErrorInfo(BaseModel):
    """
    Normalized view of an error passed to a log call.

    Callers may also pass an ``ErrorInfo`` directly to ``Logger.log`` as an
    explicitly tagged error when the value would not otherwise be recognized
    as one.
    """

    name: str = Field(default="Error", description="Error class name")
    message: str = Field(default="", description="Error message text")
    code: Any = Field(default=None, description="Application error code")
    stack: Optional[str] = Field(default=None, description="Formatted traceback")
    detail: Any = Field(default=None, description="Free-form error detail")
    meta: Optional[Dict[Any, Any]] = Field(
        default=None, description="Metadata carried by the error"
    )
    original: Any = Field(default=None, description="The error object as passed in")


@dataclass
class ClassifiedArgs:
    """
    Result of splitting the variadic arguments of one log call.

    Attributes:
        message: Resolved message (already formatted when params were given)
        template: The string argument the message came from, if any
        params: Substitution params that followed the template
        meta: Metadata mapping, if one was found
        error: Error object as passed in, if one was found
        callback: Trailing completion callback, if one was given
        args: Working arguments after the callback was removed
    """

    message: Optional[str] = None
    template: Optional[str] = None
    params: List[Any] = field(default_factory=list)
    meta: Optional[Dict[str, Any]] = None
    error: Any = None
    callback: Optional[Callable[..., Any]] = None
    args: List[Any] = field(default_factory=list)


@dataclass
class LogCall:
    """One fully resolved log invocation, ready to be handed to a sink."""

    level: str
    message: str
    meta: Optional[Dict[str, Any]] = None
    error: Any = None
    callback: Optional[Callable[..., Any]] = None
