"""
Scan-then-validate pipeline.

``scan`` runs the lexer to the end of input and sorts INVALID tokens into a
lexical error registry; ``validate`` feeds the remaining stream (and the
lexical errors) to the parser. Both return plain result objects, so nothing
leaks from one input to the next.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .lexer import Lexer
from .parser import Parser
from .presentation import accepted_string
from .sentex_ast import ASTNode
from .sentex_token import Token, INVALID
from .error_reporter import ErrorRegistry
from .config import debug_log

logger = logging.getLogger("sentex.pipeline")


@dataclass
class ScanResult:
    tokens: Tuple[Token, ...]
    lexical_errors: ErrorRegistry
    symbol_table: List[str] = field(default_factory=list)


@dataclass
class ValidationResult:
    ast: Optional[ASTNode]
    errors: ErrorRegistry
    accepted_tokens: List[Token] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.ast is not None and not self.errors

    @property
    def accepted_string(self) -> str:
        return accepted_string(self.accepted_tokens)


def scan(source: str, filename: str = "<stdin>") -> ScanResult:
    lexer = Lexer(source, filename)
    tokens = []
    lexical_errors = ErrorRegistry("lexical")

    for tok in lexer.tokenize():
        if tok.type == INVALID:
            lexical_errors.report(f"Invalid token: {tok.literal}")
        else:
            tokens.append(tok)

    debug_log(logger, "Scanned %s: %d tokens, %d lexical errors",
              filename, len(tokens), len(lexical_errors))
    return ScanResult(tuple(tokens), lexical_errors, lexer.symbol_table)


def validate(scan_result: ScanResult) -> ValidationResult:
    parser = Parser(scan_result.tokens, scan_result.lexical_errors)
    ast = parser.parse()
    return ValidationResult(ast, parser.errors, parser.accepted_tokens)


def check_sentence(source: str, filename: str = "<stdin>") -> Tuple[ScanResult, ValidationResult]:
    scan_result = scan(source, filename)
    return scan_result, validate(scan_result)
