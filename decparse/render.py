"""Result rendering — Rich tables and trees, JSON payloads, markdown reports.

Everything that turns ParseOutcomes into text lives here so the parser
modules stay free of output concerns.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional, Union

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from decparse.models import (
    Decimal,
    DecimalNumber,
    Expression,
    Operation,
    ParseOutcome,
    Single,
    SplitAttempt,
    Whole,
)

_KIND_STYLES = {
    "whole": "green",
    "decimal": "cyan",
    "single": "green",
    "operation": "magenta",
    "rejected": "red",
}


def describe(value: Optional[Union[DecimalNumber, Expression]]) -> str:
    """Compact structural form, e.g. 'Decimal(-, 15, 2)'."""
    if value is None:
        return "--"
    if isinstance(value, Whole):
        return f"Whole({value.sign.prefix or '+'}, {value.value})"
    if isinstance(value, Decimal):
        return f"Decimal({value.sign.prefix or '+'}, {value.whole}, {value.fraction})"
    if isinstance(value, Single):
        return f"Single({describe(value.number)})"
    return f"Operation({describe(value.left)} {value.operator.name} {describe(value.right)})"


def _verdict(outcome: ParseOutcome) -> str:
    if outcome.accepted:
        return "[green]valid[/green]"
    return "[red]rejected[/red]"


def render_table(
    outcomes: list[ParseOutcome],
    console: Console,
    title: str = "Parse results",
) -> None:
    """Render one row per input: verdict, kind, canonical text, structure."""
    if not outcomes:
        console.print("[yellow]No inputs to parse.[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Input", style="bold", min_width=12)
    table.add_column("Verdict", min_width=8)
    table.add_column("Kind", min_width=9)
    table.add_column("Canonical", min_width=10)
    table.add_column("Structure")

    for o in outcomes:
        style = _KIND_STYLES.get(o.kind, "white")
        canonical = escape(o.value.to_text()) if o.value is not None else "--"
        table.add_row(
            escape(repr(o.text)),
            _verdict(o),
            f"[{style}]{o.kind}[/{style}]",
            canonical,
            escape(describe(o.value)),
        )

    console.print()
    console.print(table)
    console.print()


def _number_branch(parent: Tree, label: str, number: DecimalNumber) -> None:
    node = parent.add(f"{label}: [{_KIND_STYLES[number.to_dict()['kind']]}]{type(number).__name__}[/]")
    node.add(f"sign: {number.sign.name.lower()}")
    if isinstance(number, Whole):
        node.add(f"value: {number.value!r}")
    else:
        node.add(f"whole: {number.whole!r}")
        node.add(f"fraction: {number.fraction!r}")


def build_tree(outcome: ParseOutcome) -> Tree:
    """Nested Rich tree mirroring the parsed value."""
    tree = Tree(f"[bold]{escape(repr(outcome.text))}[/bold] → {_verdict(outcome)}")
    value = outcome.value
    if value is None:
        return tree
    if isinstance(value, Operation):
        op = tree.add("[magenta]Operation[/magenta]")
        _number_branch(op, "left", value.left)
        op.add(f"operator: {value.operator.name.lower()} ({escape(value.operator.value)})")
        _number_branch(op, "right", value.right)
    elif isinstance(value, Single):
        single = tree.add("[green]Single[/green]")
        _number_branch(single, "number", value.number)
    else:
        _number_branch(tree, "number", value)
    return tree


def render_tree(outcomes: list[ParseOutcome], console: Console) -> None:
    """Render each outcome as a Rich tree."""
    if not outcomes:
        console.print("[yellow]No inputs to parse.[/yellow]")
        return
    for o in outcomes:
        console.print(build_tree(o))


def outcomes_to_json(outcomes: Iterable[ParseOutcome]) -> str:
    """JSON array of outcome dicts."""
    return json.dumps([o.to_dict() for o in outcomes], indent=2)


def render_trace(text: str, attempts: list[SplitAttempt], console: Console) -> None:
    """Show each split candidate the expression parser examined."""
    console.print(f"[dim]trace {escape(repr(text))}[/dim]")
    if not attempts:
        console.print("  [dim]no operator candidates; whole input tried as one literal[/dim]")
        return
    for a in attempts:
        mark = "[green]split[/green]" if a.succeeded else "[yellow]skip[/yellow]"
        console.print(
            f"  {mark} @{a.position} {escape(a.operator.value)}  "
            f"left={escape(repr(a.left_text))} → {escape(describe(a.left))}  "
            f"right={escape(repr(a.right_text))} → {escape(describe(a.right))}"
        )
    if not attempts[-1].succeeded:
        console.print("  [dim]no candidate split; whole input tried as one literal[/dim]")


# ---------------------------------------------------------------------------
# Markdown report generation
# ---------------------------------------------------------------------------

def _md_cell(text: str) -> str:
    """Escape a value for a markdown table cell."""
    return text.replace("|", "\\|")


def generate_report(
    outcomes: list[ParseOutcome],
    path: Path,
    title: str = "Parse Report",
) -> Path:
    """Write a markdown table of outcomes to ``path`` and return the path."""
    lines: list[str] = []
    lines.append(f"# {title}")
    lines.append("")
    lines.append(f"*Generated {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M UTC')}*")
    lines.append("")

    if not outcomes:
        lines.append("No inputs.")
    else:
        accepted = sum(1 for o in outcomes if o.accepted)
        lines.append(f"**{accepted}/{len(outcomes)}** inputs accepted.")
        lines.append("")
        lines.append("| # | Input | Verdict | Kind | Canonical | Structure |")
        lines.append("|---|-------|---------|------|-----------|-----------|")
        for i, o in enumerate(outcomes, 1):
            verdict = "valid" if o.accepted else "rejected"
            canonical = f"`{o.value.to_text()}`" if o.value is not None else "--"
            lines.append(
                f"| {i} | `{_md_cell(o.text)}` | **{verdict}** | {o.kind} "
                f"| {_md_cell(canonical)} | {_md_cell(describe(o.value))} |"
            )

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
