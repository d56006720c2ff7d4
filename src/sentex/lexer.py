# src/sentex/lexer.py
import logging

from .sentex_token import (
    Token, STARTWORD, WORD, QUOTATION, INVALID, END, PUNCTUATION, QUOTE,
)
from .error_reporter import InputTooLargeError
from .config import config, debug_log

logger = logging.getLogger("sentex.lexer")

MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 26


class Lexer:
    """Turns sentence text into STARTWORD/WORD/punctuation/QUOTATION tokens.

    Malformed units come back as INVALID tokens; sorting them out is the
    caller's job. Every word token produced is also logged in
    ``symbol_table``.
    """

    def __init__(self, source_code, filename="<stdin>"):
        limit = config.max_input_length
        if limit and len(source_code) > limit:
            raise InputTooLargeError(len(source_code), limit)

        self.input = source_code
        self.filename = filename
        self.position = 0
        self.read_position = 0
        self.ch = ""
        self.symbol_table = []

        self.read_char()

    def read_char(self):
        if self.read_position >= len(self.input):
            self.ch = ""
        else:
            self.ch = self.input[self.read_position]

        self.position = self.read_position
        self.read_position += 1

    def next_token(self):
        self.skip_whitespace()
        start = self.position

        if self.ch == "":
            return Token(END, "", start)

        if self.ch in PUNCTUATION:
            tok = Token(PUNCTUATION[self.ch], self.ch, start)
            self.read_char()
            return tok

        if self.ch == QUOTE:
            return Token(QUOTATION, self.read_quotation(), start)

        if self.is_letter(self.ch):
            return self.read_word_token(start)

        literal = self.read_invalid()
        debug_log(logger, "%s:%d: invalid unit %r", self.filename, start, literal)
        return Token(INVALID, literal, start)

    def tokenize(self):
        """Yield tokens until the input is exhausted (END is not yielded)."""
        while True:
            tok = self.next_token()
            if tok.type == END:
                return
            yield tok

    def __iter__(self):
        return self.tokenize()

    def read_word_token(self, start):
        # Runs longer than MAX_WORD_LENGTH stop here; the rest of the run is
        # scanned by the next call under the same length rules.
        literal = self.read_letters(MAX_WORD_LENGTH)
        if self.is_letter(self.ch):
            debug_log(logger, "%s:%d: splitting letter run after %d characters",
                      self.filename, start, MAX_WORD_LENGTH)

        if len(literal) < MIN_WORD_LENGTH:
            return Token(INVALID, literal, start)

        token_type = STARTWORD if self.is_upper(literal[0]) else WORD
        self.symbol_table.append(literal)
        return Token(token_type, literal, start)

    def read_letters(self, limit):
        start_position = self.position
        while self.is_letter(self.ch) and self.position - start_position < limit:
            self.read_char()
        return self.input[start_position:self.position]

    def read_quotation(self):
        start_position = self.position
        # Skip the opening quote
        self.read_char()
        result = []
        while self.ch != "" and self.ch != QUOTE:
            result.append(self.ch)
            self.read_char()

        if self.ch == QUOTE:
            self.read_char()
        else:
            logger.warning("%s:%d: unterminated quotation runs to end of input",
                           self.filename, start_position)
        return "".join(result)

    def read_invalid(self):
        start_position = self.position
        while self.ch != "" and not self.ch.isspace() and self.ch not in PUNCTUATION:
            self.read_char()
        return self.input[start_position:self.position]

    def skip_whitespace(self):
        while self.ch != "" and self.ch.isspace():
            self.read_char()

    def is_letter(self, char):
        return 'a' <= char <= 'z' or 'A' <= char <= 'Z'

    def is_upper(self, char):
        return 'A' <= char <= 'Z'
