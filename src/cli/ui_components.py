"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.services.app_validator import ValidationOutcome
from core.services.rules import RuleCheck


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("appcr-gate", style="bold cyan")
    subtitle = Text("Application definition admission checks", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_violations_table(outcome: ValidationOutcome) -> Table:
    """Una fila por violación, agrupadas por regla en orden de evaluación."""

    table = Table(title="Violations")
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Kind", style="magenta", no_wrap=True)
    table.add_column("Message", style="white")
    for report in outcome.reports:
        for violation in report.violations:
            table.add_row(report.rule, violation.kind.value, violation.render())
    return table


def build_outcome_panel(outcome: ValidationOutcome, *, source: str = "") -> Panel:
    if outcome.allowed:
        body = Text("Allowed", style="bold green")
        border = "green"
    elif outcome.decode_error is not None:
        body = Text.assemble(
            Text("Rejected: payload could not be decoded\n\n", style="bold red"),
            Text(outcome.decode_error),
        )
        border = "red"
    else:
        count = len(outcome.violations)
        body = Text(f"Rejected: {count} violation(s)", style="bold red")
        border = "red"

    return Panel(body, title=source or None, border_style=border)


def build_rules_table(rules: tuple[RuleCheck, ...]) -> Table:
    table = Table(title="Rule checks")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Stops on first", style="yellow")
    table.add_column("Description", style="white")
    for index, rule in enumerate(rules, start=1):
        table.add_row(str(index), rule.name, "yes" if rule.stop_on_first else "no", rule.description)
    return table
