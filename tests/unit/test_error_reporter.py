"""Error registries and exception rendering."""

import pytest
from rich.console import Console

from sentex.error_reporter import ErrorRegistry, InputTooLargeError, print_error


def test_report_appends_in_order():
    registry = ErrorRegistry("syntax")
    assert registry.report("first") == "first"
    registry.report("second")

    assert registry == ["first", "second"]
    assert list(registry) == ["first", "second"]
    assert registry[-1] == "second"
    assert len(registry) == 2
    assert registry


def test_registry_cannot_be_rewritten():
    registry = ErrorRegistry("lexical", ["Invalid token: 42"])

    for name in ("append", "extend", "clear", "pop", "remove", "insert"):
        assert not hasattr(registry, name)
    with pytest.raises(TypeError):
        registry[0] = "changed"
    with pytest.raises(TypeError):
        del registry[0]
    assert registry == ["Invalid token: 42"]


def test_empty_registry_is_falsy_and_equal_to_empty_list():
    registry = ErrorRegistry("lexical")
    assert not registry
    assert registry == []
    assert registry == ErrorRegistry("other")


def test_print_error_shows_suggestion():
    console = Console(record=True, width=200)
    print_error(InputTooLargeError(12, 5), console)

    text = console.export_text()
    assert "InputTooLargeError: Input of 12 characters exceeds the limit of 5" in text
    assert "max_input_length" in text
