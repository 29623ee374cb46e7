"""
Metadata sanitization driven by the ``$mask`` and ``$rewriter`` directives.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from ..models.core import MASK_KEY, REWRITER_KEY
from .masking import mask_meta

DIRECTIVE_KEYS = (MASK_KEY, REWRITER_KEY)


def rewrite_meta(
    meta: Dict[str, Any], rewriter: Callable[[Dict[str, Any]], Any]
) -> Dict[str, Any]:
    """Replace ``meta`` wholesale with the rewriter's result. Do not rely on deep fields."""
    rewritten = rewriter(meta)
    return {} if rewritten is None else rewritten


def modify_meta(meta: Mapping[str, Any]) -> Mapping[str, Any]:
    """
    Apply the ``$mask`` and ``$rewriter`` directives carried by ``meta``.

    Masking runs first, on the pre-rewrite mapping. The rewriter's return value
    then replaces the working meta entirely. Both directive keys are dropped
    from the result whether or not they had any effect.

    A mapping without directive keys is returned unchanged (the same object).
    Otherwise the caller's mapping is never modified: all work happens on a
    shallow copy. Exceptions raised by a rewriter propagate.

    Args:
        meta: Metadata mapping, possibly carrying directives

    Returns:
        Sanitized metadata
    """
    if not any(key in meta for key in DIRECTIVE_KEYS):
        return meta

    masks = meta.get(MASK_KEY)
    rewriter: Optional[Callable[[Dict[str, Any]], Any]] = meta.get(REWRITER_KEY)
    working: Dict[str, Any] = dict(meta)

    if masks:
        mask_meta(working, masks)

    if rewriter:
        working = rewrite_meta(working, rewriter)

    return {key: value for key, value in working.items() if key not in DIRECTIVE_KEYS}
