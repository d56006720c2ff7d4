"""
Error types and error registries for sentex.

Lexical and syntax errors are data: they are collected in an
``ErrorRegistry`` and handed back to the caller. Exceptions are reserved for
misuse of the library or a broken environment (oversized input, unreadable
config file).
"""

from collections.abc import Sequence

from rich.console import Console


class SentexError(Exception):
    """Base class for every exception raised by sentex."""

    def __init__(self, message, suggestion=None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(message)

    def format_error(self):
        lines = [f"{self.__class__.__name__}: {self.message}"]
        if self.suggestion:
            lines.append(f"  Suggestion: {self.suggestion}")
        return "\n".join(lines)


class InputTooLargeError(SentexError):
    """Raised when the source text is longer than the configured bound."""

    def __init__(self, length, limit):
        self.length = length
        self.limit = limit
        super().__init__(
            f"Input of {length} characters exceeds the limit of {limit}",
            suggestion="Raise max_input_length in the sentex config or set it to 0 to disable the bound.",
        )


class ConfigError(SentexError):
    """Raised when a config file cannot be read or holds invalid values."""


class ErrorRegistry(Sequence):
    """Append-only, ordered sequence of human-readable error messages.

    One registry collects lexical errors for a single scan, another collects
    syntax errors for a single validation run. ``report`` is the only way to
    add a message; nothing can be removed or replaced.
    """

    def __init__(self, kind, messages=()):
        self.kind = kind
        self._messages = list(messages)

    def report(self, message):
        self._messages.append(message)
        return message

    def __getitem__(self, index):
        return self._messages[index]

    def __len__(self):
        return len(self._messages)

    def __eq__(self, other):
        if isinstance(other, ErrorRegistry):
            return self._messages == other._messages
        if isinstance(other, (list, tuple)):
            return self._messages == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"ErrorRegistry({self.kind!r}, {self._messages!r})"


def print_error(error, console=None):
    """Render a ``SentexError`` (or any exception) with rich."""
    console = console or Console(stderr=True)
    if isinstance(error, SentexError):
        console.print(f"[bold red]❌ {error.__class__.__name__}:[/bold red] {error.message}")
        if error.suggestion:
            console.print(f"   💡 [yellow]{error.suggestion}[/yellow]")
    else:
        console.print(f"[bold red]Error:[/bold red] {error}")
