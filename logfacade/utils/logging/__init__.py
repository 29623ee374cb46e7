"""
Formatting helpers for the stdlib logging backend.
"""

from .structured import create_development_formatter

__all__ = ["create_development_formatter"]
