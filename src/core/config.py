"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El validador y la CLI leen la misma configuración tipada.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_KIND = "KubeDirectorApp"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "appcr-gate"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "appcr-gate"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "appcr-gate"
    return Path.home() / ".config" / "appcr-gate"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class GateSettings(BaseSettings):
    """Configuración central del gate.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar las reglas.
    - Un único contrato de configuración para servicios y CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="APPCR_GATE_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    parallel_checks: bool = Field(
        default=False,
        description="Evaluate rule checks on a thread pool (message order is preserved).",
    )
    max_workers: int = Field(
        default=6,
        ge=1,
        le=64,
        description="Thread pool size when parallel_checks is enabled.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level for the CLI (DEBUG, INFO, WARNING, ERROR).",
    )
    app_kind: str = Field(
        default=APP_KIND,
        min_length=1,
        description="Resource kind routed to the application-definition rule set.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level
