"""CLI behaviour through click's test runner."""

import pytest
from click.testing import CliRunner

from sentex.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_run_defaults_to_reference_sentence(runner):
    result = runner.invoke(cli, ["run"])

    assert result.exit_code == 0, result.output
    assert "Hello, world-wide communication technologies." in result.output
    assert "Symbol Table:\nHello\nworld\nwide\ncommunication\ntechnologies\n" in result.output
    assert "Token Type: STARTWORD ,Token Value: Hello" in result.output
    assert "The string is valid." in result.output
    assert "Accepted String: Hello , world - wide communication technologies ." in result.output
    assert "technologies" in result.output.split("AST Structure")[-1]


def test_run_reports_lexical_and_parsing_errors(runner):
    result = runner.invoke(cli, ["run", "Hello 42 world."])

    assert result.exit_code == 1
    assert "Invalid token: 42" in result.output
    assert "The string is invalid." in result.output
    assert "Lexical errors found. Invalid tokens in the sentence." in result.output


def test_check(runner):
    ok = runner.invoke(cli, ["check", "Hello--world, there."])
    bad = runner.invoke(cli, ["check", "Hello,, world."])

    assert ok.exit_code == 0
    assert "The string is valid." in ok.output
    assert bad.exit_code == 1
    assert "Consecutive commas found." in bad.output


def test_check_reads_a_file(runner, tmp_path):
    path = tmp_path / "sentence.txt"
    path.write_text("Hello world. extra\n")

    result = runner.invoke(cli, ["check", "-f", str(path)])
    assert result.exit_code == 1
    assert "Extra tokens found after full stop." in result.output


def test_text_and_file_together_is_a_usage_error(runner, tmp_path):
    path = tmp_path / "sentence.txt"
    path.write_text("Hello world.")

    result = runner.invoke(cli, ["check", "Hello world.", "-f", str(path)])
    assert result.exit_code == 2


def test_tokens_lists_invalid_tokens(runner):
    result = runner.invoke(cli, ["tokens", "Hello ok."])

    assert result.exit_code == 0
    assert "STARTWORD" in result.output
    assert "INVALID" in result.output
    assert "STOP" in result.output


def test_symbols(runner):
    result = runner.invoke(cli, ["symbols", "Hello big world."])

    assert result.exit_code == 0
    assert result.output.split()[-3:] == ["Hello", "big", "world"]


def test_ast(runner):
    good = runner.invoke(cli, ["ast", "Hello world."])
    bad = runner.invoke(cli, ["ast", "Hello world"])

    assert good.exit_code == 0
    assert "Sentence" in good.output
    assert "Startword: Hello Word: world Stop" in good.output
    assert bad.exit_code == 1
    assert "Expected STOP at the end." in bad.output


def test_oversized_input_is_reported(runner, monkeypatch):
    monkeypatch.setenv("SENTEX_MAX_INPUT_LENGTH", "4")
    result = runner.invoke(cli, ["check", "Hello world."])

    assert result.exit_code == 1
    assert "InputTooLargeError" in result.output


def test_broken_config_file_is_reported(runner, tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{broken")

    result = runner.invoke(cli, ["--config", str(path), "config"])
    assert result.exit_code == 1
    assert "ConfigError" in result.output


def test_config_command(runner):
    result = runner.invoke(cli, ["config"])
    assert result.exit_code == 0
    assert "max_input_length" in result.output


def test_repl(runner):
    result = runner.invoke(cli, ["repl"], input="Hello world.\nHello,, world.\nexit\n")

    assert result.exit_code == 0
    assert "valid: Hello world ." in result.output
    assert "invalid: Consecutive commas found." in result.output
