"""
Field masking for log metadata.

``mask`` replaces the value at a path inside a metadata mapping with a
redaction label derived from the value's type, or with an explicit
replacement. Masking a path that holds no value never adds it.

Mutation contract: ``mask`` and ``mask_meta`` write into the mapping they are
given. Nested containers on a dotted path are copied before they are written
to, so a dict or list that is shared with the caller is left untouched; only
the top-level mapping itself is modified.
"""

import logging
import numbers
import re
from datetime import date, time
from typing import Any, List, Mapping, MutableMapping, Sequence, Union

logger = logging.getLogger(__name__)

MaskSpec = Union[str, Sequence[str], Mapping[str, Any]]
Path = Union[str, Sequence[Union[str, int]]]

_MISSING = object()

# "a.b[0].c" -> "a", "b", 0, "c"
_PATH_SEGMENT = re.compile(r"\[(\d+)\]|[^.\[\]]+")


def secret_label(value: Any) -> str:
    """Return the default redaction label for ``value``."""
    if isinstance(value, str):
        return "[secret String]"
    if isinstance(value, bool):
        return "[secret Boolean]"
    if isinstance(value, numbers.Number):
        return "[secret Number]"
    if isinstance(value, (date, time)):
        return "[secret Date]"
    return "[secret Object]"


def parse_path(container: Any, path: Path) -> List[Union[str, int]]:
    """
    Split ``path`` into segments.

    A string naming an existing top-level key is used as-is, so keys that
    contain dots stay addressable.
    """
    if isinstance(path, (list, tuple)):
        return list(path)
    if isinstance(container, Mapping) and path in container:
        return [path]

    segments: List[Union[str, int]] = []
    for match in _PATH_SEGMENT.finditer(str(path)):
        index = match.group(1)
        segments.append(int(index) if index is not None else match.group(0))
    return segments


def _child(container: Any, segment: Union[str, int]) -> Any:
    if isinstance(container, Mapping):
        return container.get(segment, _MISSING)
    if isinstance(container, (list, tuple)):
        if isinstance(segment, str) and segment.isdigit():
            segment = int(segment)
        if isinstance(segment, int) and -len(container) <= segment < len(container):
            return container[segment]
    return _MISSING


def _assign(container: Any, segment: Union[str, int], value: Any) -> None:
    if isinstance(container, list) and isinstance(segment, str):
        segment = int(segment)
    container[segment] = value


def _writable_copy(container: Any) -> Any:
    if isinstance(container, Mapping):
        return dict(container)
    return list(container)


def get_path(container: Any, path: Path, default: Any = None) -> Any:
    """Read the value at ``path``; ``default`` when any segment is missing."""
    value = _lookup(container, parse_path(container, path))
    return default if value is _MISSING else value


def _lookup(container: Any, segments: List[Union[str, int]]) -> Any:
    if not segments:
        return _MISSING
    value = container
    for segment in segments:
        value = _child(value, segment)
        if value is _MISSING:
            return _MISSING
    return value


def _store(meta: MutableMapping[str, Any], segments: List[Union[str, int]], value: Any):
    *parents, last = segments
    target: Any = meta
    for segment in parents:
        child = _writable_copy(_child(target, segment))
        _assign(target, segment, child)
        target = child
    _assign(target, last, value)


def mask(meta: MutableMapping[str, Any], path: Path, alternative: Any = _MISSING):
    """
    Replace the value at ``path`` with ``alternative`` or a default label.

    Default labels by value type:
      - str => '[secret String]'
      - bool => '[secret Boolean]'
      - int / float / Decimal => '[secret Number]'
      - date / datetime / time => '[secret Date]'
      - dict / list / bytes / anything else => '[secret Object]'

    A path with no value (missing or ``None``) is left alone.

    Args:
        meta: Mapping to modify in place
        path: Key, dotted path (``"user.tokens[0]"``) or segment sequence
        alternative: Replacement value; omit to use the default label
    """
    segments = parse_path(meta, path)
    value = _lookup(meta, segments)
    if value is _MISSING or value is None:
        return None

    if alternative is _MISSING:
        alternative = secret_label(value)

    _store(meta, segments, alternative)
    return None


def mask_meta(meta: MutableMapping[str, Any], masks: MaskSpec) -> None:
    """
    Mask the fields of ``meta`` named by ``masks``.

    Args:
        meta: Mapping to modify in place
        masks: A list of paths (default labels), a mapping of
            path -> replacement, or a single path
    """
    if isinstance(masks, (list, tuple)):
        for path in masks:
            mask(meta, path)
    elif isinstance(masks, Mapping):
        for path, alternative in masks.items():
            mask(meta, path, alternative)
    elif isinstance(masks, str):
        mask(meta, masks)
    else:
        logger.debug("Ignoring unsupported $mask value of type %s", type(masks).__name__)
