## src/sentex/parser/parser.py
import logging

from ..sentex_token import (
    Token, STARTWORD, WORD, COMMA, HYPHEN, STOP, QUOTATION, END,
)
from ..sentex_ast import ASTNode, SENTENCE
from ..error_reporter import ErrorRegistry
from ..config import debug_log
from ..presentation import accepted_string

logger = logging.getLogger("sentex.parser")

CONSECUTIVE_COMMAS = "Consecutive commas found."
CONSECUTIVE_HYPHENS = "Consecutive hyphens found."
MISSING_STOP = "Expected STOP at the end."
EXTRA_TOKENS = "Extra tokens found after full stop."
LEXICAL_ERRORS = "Lexical errors found. Invalid tokens in the sentence."

# AST label for each terminal kind
_LABELS = {
    STARTWORD: "Startword: {}",
    WORD: "Word: {}",
    COMMA: "Comma",
    HYPHEN: "Hyphen",
    QUOTATION: "Quotation: {}",
    STOP: "Stop",
}

_EXPECTED_NAMES = {
    STARTWORD: "Startword",
    WORD: "Word",
    COMMA: "Comma",
    HYPHEN: "Hyphen",
    QUOTATION: "Quotation",
    STOP: "Stop",
}


class Parser:
    """Recursive-descent validator for ``Startword Body Stop`` sentences.

    ``tokens`` is the stream produced by the lexer with INVALID tokens
    already removed; ``lexical_errors`` is whatever the scan reported about
    them. Any lexical error fails an otherwise valid sentence.
    """

    def __init__(self, tokens, lexical_errors=()):
        self.tokens = tuple(tokens)
        self.lexical_errors = tuple(lexical_errors)
        self.current_pos = 0
        self.errors = ErrorRegistry("syntax")
        self.accepted_tokens = []

    def parse(self):
        """Return the ``Sentence`` root, or None with ``errors`` filled in."""
        root = self.parse_sentence()
        if root is None:
            debug_log(logger, "Rejected after %d tokens: %s", self.current_pos, self.errors[-1])
        else:
            debug_log(logger, "Accepted sentence with %d terminals", len(root.children))
        return root

    def has_errors(self):
        return len(self.errors) > 0

    def accepted_string(self):
        return accepted_string(self.accepted_tokens)

    # --- token cursor ---

    def cur_token(self):
        if self.current_pos >= len(self.tokens):
            return Token(END, "")
        return self.tokens[self.current_pos]

    def cur_token_is(self, token_type):
        return self.cur_token().type == token_type

    def at_end(self):
        return self.current_pos >= len(self.tokens)

    def advance_token(self):
        if self.current_pos < len(self.tokens):
            self.current_pos += 1

    # --- grammar ---

    def parse_sentence(self):
        sentence = ASTNode(SENTENCE)

        if not self.parse_terminal(sentence, STARTWORD):
            return None

        last_was_comma = False
        last_was_hyphen = False

        while not self.at_end() and not self.cur_token_is(STOP):
            tok = self.cur_token()

            if tok.type == COMMA:
                if last_was_comma:
                    return self._fail(CONSECUTIVE_COMMAS)
                self.parse_terminal(sentence, COMMA)
                last_was_comma, last_was_hyphen = True, False

            elif tok.type == HYPHEN:
                if last_was_hyphen:
                    error = self.check_hyphen_pair()
                    if error:
                        return self._fail(error)
                self.parse_terminal(sentence, HYPHEN)
                last_was_comma, last_was_hyphen = False, True

            elif tok.type in (WORD, QUOTATION):
                self.parse_terminal(sentence, tok.type)
                last_was_comma, last_was_hyphen = False, False

            else:
                return self._fail(f"Unexpected token: {tok.literal}")

        if not self.cur_token_is(STOP):
            return self._fail(MISSING_STOP)
        self.parse_terminal(sentence, STOP)

        if not self.at_end():
            return self._fail(EXTRA_TOKENS)

        if self.lexical_errors:
            return self._fail(LEXICAL_ERRORS)

        return sentence

    def parse_terminal(self, parent, expected):
        """Match one token of kind ``expected`` and hang its node on ``parent``."""
        tok = self.cur_token()
        if tok.type != expected:
            self._fail(f"Expected {_EXPECTED_NAMES[expected]}, got: {tok.literal}")
            return None

        node = parent.add_child(ASTNode(_LABELS[expected].format(tok.literal)))
        self.accepted_tokens.append(tok)
        self.advance_token()
        return node

    def check_hyphen_pair(self):
        """Decide whether a second consecutive hyphen may stand.

        Counts the commas between the current (second) hyphen and the next
        STOP, or the end of the stream. Exactly one comma allows the pair.
        Read-only: the cursor does not move.
        """
        commas = 0
        for tok in self.tokens[self.current_pos:]:
            if tok.type == STOP:
                break
            if tok.type == COMMA:
                commas += 1
                if commas > 1:
                    return CONSECUTIVE_COMMAS

        if commas == 0:
            return CONSECUTIVE_HYPHENS
        return None

    def _fail(self, message):
        self.errors.report(message)
        return None
