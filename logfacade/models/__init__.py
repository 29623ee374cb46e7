"""
Data models for logfacade.
"""

from .core import EMPTY_MESSAGE, MASK_KEY, REWRITER_KEY, ClassifiedArgs, ErrorInfo, LogCall

__all__ = [
    "EMPTY_MESSAGE",
    "MASK_KEY",
    "REWRITER_KEY",
    "ClassifiedArgs",
    "ErrorInfo",
    "LogCall",
]
