"""
Error normalization and error -> metadata merging.
"""

import traceback
from typing import Any, Dict, Mapping, Optional

from ..models.core import ErrorInfo


def is_error_like(value: Any) -> bool:
    """
    Tell whether ``value`` should be treated as the error of a log call.

    Exceptions and ``ErrorInfo`` instances always qualify. Other objects
    qualify by shape: string ``name`` and ``message`` attributes. Mappings never
    qualify, they are metadata.
    """
    if isinstance(value, (BaseException, ErrorInfo)):
        return True
    if value is None or isinstance(value, (Mapping, str, bytes, type)):
        return False
    return isinstance(getattr(value, "name", None), str) and isinstance(
        getattr(value, "message", None), str
    )


def _format_stack(error: BaseException) -> str:
    if error.__traceback__ is not None:
        lines = traceback.format_exception(type(error), error, error.__traceback__)
    else:
        lines = traceback.format_exception_only(type(error), error)
    return "".join(lines).rstrip("\n")


def describe_error(error: Any) -> ErrorInfo:
    """Build an ``ErrorInfo`` for any error-like value."""
    if isinstance(error, ErrorInfo):
        return error

    meta = getattr(error, "meta", None)
    if not isinstance(meta, Mapping):
        meta = None

    if isinstance(error, BaseException):
        return ErrorInfo(
            name=type(error).__name__,
            message=str(error),
            code=getattr(error, "code", None),
            stack=_format_stack(error),
            detail=getattr(error, "detail", None),
            meta=meta,
            original=error,
        )

    stack = getattr(error, "stack", None)
    return ErrorInfo(
        name=getattr(error, "name", "Error"),
        message=getattr(error, "message", ""),
        code=getattr(error, "code", None),
        stack=stack if isinstance(stack, str) else None,
        detail=getattr(error, "detail", None),
        meta=meta,
        original=error,
    )


def merge_error_meta(error: Any, meta: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Build call metadata from an error and the caller's metadata.

    Precedence per key: ``errorName``, ``errorCode``, ``errorStack`` and
    ``errorDetail`` from the error, then ``meta``, then ``error.meta``. A key
    holding ``None`` counts as unset and may be filled by a later source.
    Always returns a new dict.
    """
    info = describe_error(error)
    merged: Dict[str, Any] = {
        "errorName": info.name,
        "errorCode": info.code,
        "errorStack": info.stack,
        "errorDetail": info.detail,
    }
    merged = {key: value for key, value in merged.items() if value is not None}

    for source in (meta, info.meta):
        if not source:
            continue
        for key, value in source.items():
            if merged.get(key) is None:
                merged[key] = value

    return merged


def keep_meta(error: Any, meta: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
    """Error hook that leaves the caller's metadata as it is."""
    return meta
