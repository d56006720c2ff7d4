# src/sentex/__init__.py
"""
sentex - scanner and grammar validator for simple punctuated sentences.
"""

from .lexer import Lexer
from .parser import Parser
from .pipeline import scan, validate, check_sentence, ScanResult, ValidationResult
from .sentex_ast import ASTNode
from .sentex_token import Token

__version__ = "0.1.0"

__all__ = [
    "Lexer",
    "Parser",
    "scan",
    "validate",
    "check_sentence",
    "ScanResult",
    "ValidationResult",
    "ASTNode",
    "Token",
]
