"""Algot command line interface."""

from __future__ import annotations

from pathlib import Path

import click
from click.core import ParameterSource

from algot import __version__
from algot.config import AlgotConfig, resolve_config
from algot.errors import DiagnosticRenderer, ExpressionError
from algot.lexer import Lexer
from algot.source import SourceFile


def _config(start: Path | None) -> AlgotConfig:
    try:
        return resolve_config(start)
    except ValueError as e:
        click.echo(f"error: invalid algot.toml: {e}", err=True)
        raise SystemExit(1)


def _settings(config: AlgotConfig, legacy_integers: bool,
              no_color: bool) -> tuple[bool, bool]:
    """Merge command line flags over config values -> (legacy, color)."""
    source = click.get_current_context().get_parameter_source("legacy_integers")
    legacy = config.lexer.legacy_integers if source == ParameterSource.DEFAULT else legacy_integers
    color = config.output.color and not no_color
    return legacy, color


@click.group()
@click.version_option(__version__, prog_name="algot")
def main() -> None:
    """Algot expression tokenizer."""


@main.command()
@click.argument("expression", required=False)
@click.option("--file", "file_path", type=click.Path(exists=True, dir_okay=False),
              help="Read the expression from a file.")
@click.option("--legacy-integers/--integer-constants", default=False,
              help="Treat bare digit strings as variables (legacy behavior).")
@click.option("--no-color", is_flag=True, help="Disable colored diagnostics.")
def lex(expression: str | None, file_path: str | None,
        legacy_integers: bool, no_color: bool) -> None:
    """Print the tokens of an expression, one per line."""
    if file_path is not None:
        source = SourceFile.read(Path(file_path))
        config = _config(Path(file_path))
    elif expression is not None:
        source = SourceFile("<expr>", expression)
        config = _config(None)
    else:
        raise click.UsageError("give an EXPRESSION or --file")

    legacy, color = _settings(config, legacy_integers, no_color)
    renderer = DiagnosticRenderer(color=color)
    renderer.add_source(source)

    lexer = Lexer(source.content, source.name, legacy_integers=legacy)
    try:
        cursor = lexer.lex()
    except ExpressionError:
        cursor = None
    for diag in lexer.diagnostics:
        click.echo(renderer.render(diag), err=True)
    if cursor is None:
        raise SystemExit(1)

    for tok in cursor:
        span = tok.span
        click.echo(f"{span.start_line}:{span.start_col} {tok.kind.name} {tok}")


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--legacy-integers/--integer-constants", default=False,
              help="Treat bare digit strings as variables (legacy behavior).")
@click.option("--no-color", is_flag=True, help="Disable colored diagnostics.")
def check(path: str, legacy_integers: bool, no_color: bool) -> None:
    """Lex every non-blank line of a file as its own expression."""
    source = SourceFile.read(Path(path))
    config = _config(Path(path))
    legacy, color = _settings(config, legacy_integers, no_color)
    renderer = DiagnosticRenderer(color=color)
    renderer.add_source(source)

    count = 0
    had_errors = False
    for line_num, text in enumerate(source.lines, start=1):
        if not text.strip():
            continue
        count += 1
        lexer = Lexer(text, source.name, legacy_integers=legacy, start_line=line_num)
        try:
            lexer.lex()
        except ExpressionError:
            had_errors = True
        for diag in lexer.diagnostics:
            click.echo(renderer.render(diag), err=True)

    if had_errors:
        raise SystemExit(1)
    click.echo(f"checked {count} expression(s), no errors")
