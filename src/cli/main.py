"""CLI de appcr-gate (Typer).

Comandos:
- `validate`: valida un documento de aplicación suelto.
- `review`: responde un AdmissionReview completo (entrada/salida JSON).
- `rules`: lista las reglas registradas.
- `doctor`: diagnóstico de configuración.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.json_exporter import export_review_json, render_review_json
from cli import doctor
from cli.ui_components import build_outcome_panel, build_rules_table, build_violations_table, print_banner
from core.config import GateSettings
from core.logging_setup import configure_logging
from core.services.admission import build_admit_funcs, review_payload
from core.services.app_validator import AppValidator, build_response
from core.services.rules import APP_RULES

app = typer.Typer(no_args_is_help=True, help="Admission checks for application-definition documents.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _read(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise typer.BadParameter(f"cannot read {path}: {exc.strerror or exc}") from exc


@app.callback()
def _setup() -> None:
    settings = GateSettings()
    configure_logging(settings.log_level)


@app.command()
def validate(
    path: Path = typer.Argument(..., help="JSON file with the application definition."),
    as_json: bool = typer.Option(False, "--json", help="Print the admission response as JSON."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="No banner."),
) -> None:
    """Validate one application-definition document."""

    settings = GateSettings()
    validator = AppValidator(settings=settings)
    outcome = validator.validate_payload(_read(path))

    if as_json:
        response = build_response(uid="", outcome=outcome)
        typer.echo(json.dumps(response.model_dump(mode="json", exclude_none=True), indent=2))
    else:
        if not quiet:
            print_banner(_console)
        _console.print(build_outcome_panel(outcome, source=str(path)))
        if outcome.reports:
            _console.print(build_violations_table(outcome))

    if not outcome.allowed:
        raise typer.Exit(code=1)


@app.command()
def review(
    path: Path = typer.Argument(..., help="JSON file with an AdmissionReview request."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the response review here."),
) -> None:
    """Answer an AdmissionReview and print (or write) the response review."""

    settings = GateSettings()
    answer = review_payload(_read(path), admit_funcs=build_admit_funcs(settings))

    if output is not None:
        written = export_review_json(review=answer, output_path=output)
        _console.print(f"[green]Response written to:[/green] {written}")
    else:
        typer.echo(render_review_json(answer), nl=False)


@app.command()
def rules() -> None:
    """List the registered rule checks in evaluation order."""

    _console.print(build_rules_table(APP_RULES))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
