"""
Plain-text views over scan and validation results.

These helpers only format; the CLI decides where the text goes.
"""

from .sentex_token import QUOTATION, token_type_name
from .sentex_ast import level_order


def format_symbol_table(symbol_table):
    return "\n".join(symbol_table)


def format_token(tok):
    return f"Token Type: {token_type_name(tok.type)} ,Token Value: {tok.literal}"


def format_tokens(tokens):
    return "\n".join(format_token(tok) for tok in tokens)


def format_errors(errors):
    return "\n".join(str(e) for e in errors)


def accepted_string(tokens):
    """Join accepted terminals with single spaces.

    Quotation text is left out, but a quotation still counts as a following
    terminal when deciding whether the previous one gets a trailing space.
    """
    parts = []
    last = len(tokens) - 1
    for i, tok in enumerate(tokens):
        if tok.type == QUOTATION:
            continue
        parts.append(tok.literal)
        if i != last:
            parts.append(" ")
    return "".join(parts)


def format_level_order(root):
    """One line per tree depth, node labels separated by spaces."""
    return "\n".join(" ".join(level) for level in level_order(root))
