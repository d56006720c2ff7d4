# src/sentex/parser/__init__.py
"""
Grammar validator for sentex sentences.
"""

from .parser import (
    Parser,
    CONSECUTIVE_COMMAS,
    CONSECUTIVE_HYPHENS,
    MISSING_STOP,
    EXTRA_TOKENS,
    LEXICAL_ERRORS,
)

__all__ = [
    "Parser",
    "CONSECUTIVE_COMMAS",
    "CONSECUTIVE_HYPHENS",
    "MISSING_STOP",
    "EXTRA_TOKENS",
    "LEXICAL_ERRORS",
]
