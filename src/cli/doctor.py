"""Doctor command for environment diagnostics."""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.table import Table

from core.config import GateSettings, get_user_env_file
from core.services.app_validator import AppValidator

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

_SMOKE_DOCUMENT = {
    "apiVersion": "kubedirector.bluedata.io/v1alpha1",
    "kind": "KubeDirectorApp",
    "metadata": {"name": "doctor"},
    "spec": {
        "default_image_repo_tag": "docker.io/example/doctor:1.0",
        "roles": [{"id": "controller", "cardinality": "1"}],
        "services": [
            {"id": "ui", "endpoint": {"port": 8080, "url_scheme": "http", "is_dashboard": True}},
        ],
        "config": {
            "selected_roles": ["controller"],
            "role_services": [{"role_id": "controller", "service_ids": ["ui"]}],
        },
    },
}


def _check_smoke(settings: GateSettings) -> tuple[bool, str]:
    """Validate a known-good document."""

    try:
        outcome = AppValidator(settings=settings).validate_payload(json.dumps(_SMOKE_DOCUMENT))
    except Exception as exc:
        return False, str(exc)
    if outcome.allowed:
        return True, "OK"
    return False, outcome.message.strip()


@app.command()
def run() -> None:
    """Run baseline diagnostics and show the effective configuration."""

    settings = GateSettings()

    table = Table(title="appcr-gate Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("App kind", "OK", settings.app_kind)
    table.add_row("Log level", "OK", settings.log_level)
    mode = f"parallel ({settings.max_workers} workers)" if settings.parallel_checks else "sequential"
    table.add_row("Rule evaluation", "OK", mode)

    ok_smoke, detail_smoke = _check_smoke(settings)
    table.add_row("Smoke validation", "OK" if ok_smoke else "FAIL", detail_smoke)

    _console.print(table)

    if not ok_smoke:
        raise typer.Exit(code=1)
