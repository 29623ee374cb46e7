"""
Message composition: printf-style substitution and error text joining.
"""

import json
import logging
import re
from typing import Any, List, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)

# %[(name)][flags][width][.precision]type
_CONVERSION = re.compile(
    r"%(?:\((?P<key>[^)]*)\))?"
    r"(?P<flags>[-+ #0]*)(?P<width>\d+)?(?:\.(?P<precision>\d+))?"
    r"(?P<type>[%sdiufFeEgGxXocbjr])"
)

_NUMERIC = {
    "d": int,
    "i": int,
    "u": int,
    "x": int,
    "X": int,
    "o": int,
    "f": float,
    "F": float,
    "e": float,
    "E": float,
    "g": float,
    "G": float,
}


def _to_json(value: Any) -> str:
    return json.dumps(value, default=str, ensure_ascii=False)


def _convert(spec: str, conversion: str, value: Any) -> str:
    if conversion == "j":
        return (spec + "s") % _to_json(value)
    if conversion == "b":
        return (spec + "s") % format(int(value), "b")
    if isinstance(value, str) and conversion in _NUMERIC:
        value = _NUMERIC[conversion](float(value))
    return (spec + conversion) % (value,)


def _substitute(template: str, params: List[Any]) -> str:
    named = params[0] if len(params) == 1 and isinstance(params[0], Mapping) else None
    pieces: List[str] = []
    position = 0
    last = 0

    for match in _CONVERSION.finditer(template):
        pieces.append(template[last : match.start()])
        last = match.end()

        conversion = match.group("type")
        if conversion == "%":
            pieces.append("%")
            continue

        key = match.group("key")
        if key is not None:
            if named is None:
                raise KeyError(key)
            value = named[key]
        else:
            if position >= len(params):
                raise TypeError("not enough arguments for format string")
            value = params[position]
            position += 1

        spec = "%" + match.group("flags")
        if match.group("width"):
            spec += match.group("width")
        if match.group("precision") is not None:
            spec += "." + match.group("precision")
        pieces.append(_convert(spec, conversion, value))

    pieces.append(template[last:])
    return "".join(pieces)


def format_message(template: str, params: Sequence[Any]) -> str:
    """
    Fill ``template`` with ``params`` using printf-style conversions.

    Supports ``%s %d %i %u %f %e %g %x %X %c %r``, ``%o`` (octal), ``%b`` (binary) and
    ``%j`` (JSON), flags, width, precision, ``%%`` and ``%(name)s`` when the
    only param is a mapping. Extra params are ignored.

    Without params the template is returned verbatim, so a literal ``%`` in a
    plain message is never interpreted. Formatting never raises: when params
    do not fit the template, the template is returned followed by the params.
    """
    if not params:
        return template

    try:
        return _substitute(template, list(params))
    except (KeyError, TypeError, ValueError, OverflowError) as e:
        logger.debug("Message template %r could not be filled: %s", template, e)
        return " ".join([template, *(str(param) for param in params)])


def compose_message(
    message: Optional[str], error_message: str, connector: str = " && "
) -> str:
    """Append an error's message text to a resolved log message."""
    if message:
        return message + connector + error_message
    return error_message
