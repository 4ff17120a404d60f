"""CLI for the decparse parser.

Usage:
    python -m decparse samples                     # Parse the built-in inputs
    python -m decparse decimal 123 4.5             # Decimal literals
    python -m decparse decimal -- -456 +7.25       # Leading '-' needs '--'
    python -m decparse expr "10.5 + 20.3" --trace  # Expressions, show splits
    python -m decparse check inputs.txt            # One expression per line
    python -m decparse report --output out.md      # Markdown report
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, List, Optional

import typer
from rich.console import Console

from decparse import __version__
from decparse.expression import parse_expression, trace_expression
from decparse.literals import parse_decimal
from decparse.models import ParseOutcome
from decparse.render import generate_report, outcomes_to_json, render_table, render_trace, render_tree
from decparse.samples import DECIMAL_SAMPLES, EXPRESSION_SAMPLES
from decparse.settings import OutputFormat, default_format, default_report_path

app = typer.Typer(
    name="decparse",
    help="Signed decimal and two-operand expression parser",
    no_args_is_help=True,
)
console = Console(stderr=True)
stdout = Console()

_FORMAT_HELP = "Output format: table, tree, json (default from DECPARSE_FORMAT)"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"decparse {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Signed decimal and two-operand expression parser."""


def _resolve_format(fmt: Optional[str]) -> OutputFormat:
    """CLI option first, then DECPARSE_FORMAT."""
    if fmt is None:
        return default_format()
    try:
        return OutputFormat(fmt.lower())
    except ValueError:
        console.print(f"[red]Invalid format: {fmt}[/red]. Choose: table, tree, json")
        raise typer.Exit(1)


def _parse_all(texts: List[str], parser: Callable) -> list[ParseOutcome]:
    return [ParseOutcome(text=t, value=parser(t)) for t in texts]


def _emit(outcomes: list[ParseOutcome], fmt: OutputFormat, title: str) -> None:
    """Print outcomes to stdout; JSON stays free of Rich markup."""
    if fmt == OutputFormat.JSON:
        typer.echo(outcomes_to_json(outcomes))
        return
    if fmt == OutputFormat.TREE:
        render_tree(outcomes, stdout)
    else:
        render_table(outcomes, stdout, title=title)
    accepted = sum(1 for o in outcomes if o.accepted)
    console.print(f"[dim]{accepted}/{len(outcomes)} accepted[/dim]")


def _exit_on_rejection(outcomes: list[ParseOutcome]) -> None:
    if any(not o.accepted for o in outcomes):
        raise typer.Exit(1)


def _read_lines(file: str) -> list[str]:
    """Non-blank stripped lines from a file, or stdin for '-'."""
    if file == "-":
        text = sys.stdin.read()
    else:
        try:
            text = Path(file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[red]Cannot read {file}: {e}[/red]")
            raise typer.Exit(1)
    return [line.strip() for line in text.splitlines() if line.strip()]


@app.command("samples")
def cmd_samples(
    kind: str = typer.Option("all", "--kind", "-k", help="Which samples: decimal, expression, all"),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help=_FORMAT_HELP),
) -> None:
    """Parse the built-in sample inputs and show each result."""
    output = _resolve_format(fmt)
    if kind not in ("decimal", "expression", "all"):
        console.print(f"[red]Invalid kind: {kind}[/red]. Choose: decimal, expression, all")
        raise typer.Exit(1)

    if kind in ("decimal", "all"):
        _emit(_parse_all(DECIMAL_SAMPLES, parse_decimal), output, "Decimal samples")
    if kind in ("expression", "all"):
        _emit(_parse_all(EXPRESSION_SAMPLES, parse_expression), output, "Expression samples")


@app.command("decimal")
def cmd_decimal(
    texts: List[str] = typer.Argument(help="Literals to parse (put '--' before ones starting with '-')"),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help=_FORMAT_HELP),
) -> None:
    """Parse each argument as a signed decimal literal."""
    output = _resolve_format(fmt)
    outcomes = _parse_all(texts, parse_decimal)
    _emit(outcomes, output, "Decimal literals")
    _exit_on_rejection(outcomes)


@app.command("expr")
def cmd_expr(
    texts: List[str] = typer.Argument(help="Expressions to parse (put '--' before ones starting with '-')"),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help=_FORMAT_HELP),
    trace: bool = typer.Option(False, "--trace", "-t", help="Show the split candidates examined"),
) -> None:
    """Parse each argument as a two-operand expression or single literal."""
    output = _resolve_format(fmt)
    if trace:
        for t in texts:
            render_trace(t, trace_expression(t), console)
    outcomes = _parse_all(texts, parse_expression)
    _emit(outcomes, output, "Expressions")
    _exit_on_rejection(outcomes)


@app.command("check")
def cmd_check(
    file: str = typer.Argument(help="File with one expression per line, or '-' for stdin"),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help=_FORMAT_HELP),
) -> None:
    """Parse every non-blank line of a file as an expression."""
    output = _resolve_format(fmt)
    lines = _read_lines(file)
    if not lines:
        console.print(f"[yellow]No expressions found in {file}[/yellow]")
        return
    outcomes = _parse_all(lines, parse_expression)
    _emit(outcomes, output, f"Check: {file}")
    _exit_on_rejection(outcomes)


@app.command("report")
def cmd_report(
    file: Optional[str] = typer.Argument(None, help="Expressions file; built-in samples when omitted"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Report path (default from DECPARSE_REPORT_PATH)"
    ),
) -> None:
    """Write a markdown report of parse results."""
    if file is None:
        outcomes = _parse_all(DECIMAL_SAMPLES, parse_decimal) + _parse_all(EXPRESSION_SAMPLES, parse_expression)
        title = "Parse Report: built-in samples"
    else:
        outcomes = _parse_all(_read_lines(file), parse_expression)
        title = f"Parse Report: {file}"

    path = generate_report(outcomes, output or default_report_path(), title=title)
    console.print(f"Report written to {path}")


if __name__ == "__main__":
    app()
