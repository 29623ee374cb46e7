"""
Argument classification for the loose ``log(level, *args)`` call style.

Arguments may come in almost any order::

    log("info", "plain message")
    log("info", meta)
    log("info", meta, "id=%s", 1)
    log("error", err)
    log("error", err, "extra message")          # err message is appended
    log("error", meta, err, "message", callback)

Rules, in order:
  1. A trailing callable is the completion callback.
  2. The first string among the first three remaining arguments is the
     message template; every argument after it is a substitution param.
  3. Arguments before the template (or the first two arguments when there is
     no template) are scanned from last to first: error-like values become the
     error, mappings become the meta. Later assignments win, so the argument
     closest to the front takes precedence.
  4. With no message, meta or error, the arguments themselves are rendered
     as the message.
"""

from typing import Any, List, Mapping, Sequence

from ..meta.errors import is_error_like
from ..models.core import ClassifiedArgs
from .composer import format_message

# How many leading arguments may hold the message template
TEMPLATE_SEARCH_WINDOW = 3
# Arguments inspected for meta / error when no template is found
PRE_ARGS_WITHOUT_TEMPLATE = 2


def render_args(args: Sequence[Any]) -> str:
    """Comma-join arguments, flattening nested lists, ``None`` as empty."""
    rendered: List[str] = []
    for arg in args:
        if arg is None:
            rendered.append("")
        elif isinstance(arg, (list, tuple)):
            rendered.append(render_args(arg))
        else:
            rendered.append(str(arg))
    return ",".join(rendered)


def classify(args: Sequence[Any]) -> ClassifiedArgs:
    """
    Split the variadic arguments of a log call into their roles.

    Never raises; arguments that fit no role are ignored.

    Args:
        args: Arguments that followed the level

    Returns:
        ClassifiedArgs with message, params, meta, error and callback
    """
    result = ClassifiedArgs()
    working = list(args)

    if working and callable(working[-1]):
        result.callback = working.pop()
    result.args = working

    message_index = next(
        (
            index
            for index, arg in enumerate(working[:TEMPLATE_SEARCH_WINDOW])
            if isinstance(arg, str)
        ),
        -1,
    )

    if message_index != -1:
        result.template = working[message_index]
        result.params = working[message_index + 1 :]
        result.message = format_message(result.template, result.params)
        pre_args = working[:message_index]
    else:
        pre_args = working[:PRE_ARGS_WITHOUT_TEMPLATE]

    for arg in reversed(pre_args):
        if is_error_like(arg):
            result.error = arg
        elif isinstance(arg, Mapping):
            result.meta = arg

    if result.message is None and result.meta is None and result.error is None and working:
        result.message = render_args(working)

    return result
