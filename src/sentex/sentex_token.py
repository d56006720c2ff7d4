# src/sentex/sentex_token.py
from dataclasses import dataclass

# Token kinds. The constant values double as their display names.
STARTWORD = "STARTWORD"
WORD = "WORD"
COMMA = "COMMA"
HYPHEN = "HYPHEN"
STOP = "STOP"
QUOTATION = "QUOTATION"
INVALID = "INVALID"
END = "END"

TOKEN_KINDS = (STARTWORD, WORD, COMMA, HYPHEN, STOP, QUOTATION, INVALID, END)

PUNCTUATION = {
    ",": COMMA,
    "-": HYPHEN,
    ".": STOP,
}

QUOTE = "'"


@dataclass(frozen=True)
class Token:
    type: str
    literal: str
    position: int = 0

    def __repr__(self):
        return f"Token({self.type}, {self.literal!r})"


def token_type_name(token_type):
    """Human-readable name of a token kind, ``UNKNOWN`` for anything else."""
    return token_type if token_type in TOKEN_KINDS else "UNKNOWN"
