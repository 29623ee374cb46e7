"""
Metadata pipeline: masking, directive handling and error merging.
"""

from .errors import describe_error, is_error_like, keep_meta, merge_error_meta
from .masking import get_path, mask, mask_meta, secret_label
from .transform import modify_meta

__all__ = [
    "describe_error",
    "get_path",
    "is_error_like",
    "keep_meta",
    "mask",
    "mask_meta",
    "merge_error_meta",
    "modify_meta",
    "secret_label",
]
