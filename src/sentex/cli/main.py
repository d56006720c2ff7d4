# src/sentex/cli/main.py
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..config import config, configure_logging
from ..error_reporter import SentexError, print_error
from ..lexer import Lexer
from ..pipeline import check_sentence
from ..presentation import (
    format_errors,
    format_level_order,
    format_symbol_table,
    format_tokens,
)
from ..sentex_token import INVALID

console = Console()

input_options = [
    click.argument('text', required=False),
    click.option('-f', '--file', 'file', type=click.Path(exists=True, dir_okay=False),
                 help='Read the sentence from a file instead.'),
]


def with_input(func):
    for option in reversed(input_options):
        func = option(func)
    return func


def read_source(text, file):
    if text is not None and file is not None:
        raise click.UsageError("Give either TEXT or --file, not both.")
    if file is not None:
        with open(file, 'r') as f:
            return f.read().strip("\n"), file
    if text is None:
        return config.default_sentence, "<default>"
    return text, "<argument>"


def fail(error):
    print_error(error, console)
    sys.exit(1)


def print_errors(title, errors):
    console.print(f"\n[bold red]{title}:[/bold red]")
    console.print(escape(format_errors(errors)))


def print_ast(root):
    console.print(Panel.fit(
        escape(format_level_order(root)),
        title="[bold blue]AST Structure[/bold blue]",
        border_style="blue"
    ))


@click.group()
@click.version_option(version="0.1.0", prog_name="sentex")
@click.option('--debug', is_flag=True, help='Enable debug logging.')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False),
              help='Path to a JSON config file.')
def cli(debug, config_path):
    """sentex - sentence scanner and grammar validator"""
    try:
        config.load(config_path)
    except SentexError as e:
        fail(e)
    if debug:
        config.enable_debug_logs = True
    configure_logging(console)


@cli.command()
@with_input
def run(text, file):
    """Scan and validate a sentence, printing the full report"""
    source, filename = read_source(text, file)
    try:
        scan_result, result = check_sentence(source, filename)
    except SentexError as e:
        fail(e)

    console.print(f"🔎 [bold green]Input:[/bold green] {escape(source)}")

    console.print("\n[bold]Symbol Table:[/bold]")
    console.print(escape(format_symbol_table(scan_result.symbol_table)))

    console.print("\n[bold]Tokens:[/bold]")
    console.print(escape(format_tokens(scan_result.tokens)))

    if scan_result.lexical_errors:
        print_errors("Lexical Errors", scan_result.lexical_errors)

    if not result.ok:
        console.print("\n[bold red]The string is invalid.[/bold red]")
        print_errors("Parsing Errors", result.errors)
        sys.exit(1)

    console.print("\n[bold green]The string is valid.[/bold green]")
    console.print(f"\nAccepted String: {escape(result.accepted_string)}\n")
    print_ast(result.ast)


@cli.command()
@with_input
def check(text, file):
    """Check whether a sentence is valid"""
    source, filename = read_source(text, file)
    try:
        scan_result, result = check_sentence(source, filename)
    except SentexError as e:
        fail(e)

    if result.ok:
        console.print("[bold green]✅ The string is valid.[/bold green]")
        return

    console.print("[bold red]❌ The string is invalid.[/bold red]")
    if scan_result.lexical_errors:
        print_errors("Lexical Errors", scan_result.lexical_errors)
    print_errors("Parsing Errors", result.errors)
    sys.exit(1)


@cli.command()
@with_input
def tokens(text, file):
    """Show the tokens of a sentence, INVALID ones included"""
    source, filename = read_source(text, file)
    try:
        lexer = Lexer(source, filename)
        scanned = list(lexer.tokenize())
    except SentexError as e:
        fail(e)

    table = Table(title="Tokens")
    table.add_column("Type", style="cyan")
    table.add_column("Literal", style="green")
    table.add_column("Position", style="yellow")

    for tok in scanned:
        style = "red" if tok.type == INVALID else None
        table.add_row(tok.type, escape(tok.literal), str(tok.position), style=style)

    console.print(table)


@cli.command()
@with_input
def symbols(text, file):
    """Show the symbol table built while scanning"""
    source, filename = read_source(text, file)
    try:
        lexer = Lexer(source, filename)
        for _ in lexer.tokenize():
            pass
    except SentexError as e:
        fail(e)

    console.print("[bold]Symbol Table:[/bold]")
    console.print(escape(format_symbol_table(lexer.symbol_table)))


@cli.command()
@with_input
def ast(text, file):
    """Show the AST of a valid sentence"""
    source, filename = read_source(text, file)
    try:
        scan_result, result = check_sentence(source, filename)
    except SentexError as e:
        fail(e)

    if not result.ok:
        print_errors("Parsing Errors", result.errors)
        sys.exit(1)
    print_ast(result.ast)


@cli.command()
def repl():
    """Start an interactive sentence checker"""
    console.print("[bold green]sentex REPL v0.1.0[/bold green]")
    console.print("Type 'exit' to quit\n")

    while True:
        try:
            line = console.input("[bold blue]>>> [/bold blue]")
        except (KeyboardInterrupt, EOFError):
            console.print("\n👋 Goodbye!")
            break

        if line.strip() in ['exit', 'quit']:
            break
        if not line.strip():
            continue

        try:
            _, result = check_sentence(line, "<repl>")
        except SentexError as e:
            print_error(e, console)
            continue

        if result.ok:
            console.print(f"[green]valid:[/green] {escape(result.accepted_string)}")
        else:
            for error in result.errors:
                console.print(f"[red]invalid: {escape(error)}[/red]")


@cli.command('config')
def show_config():
    """Show the effective configuration"""
    table = Table(title="sentex config")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")
    for key, value in config.to_dict().items():
        table.add_row(key, escape(str(value)))
    console.print(table)


if __name__ == "__main__":
    cli()
