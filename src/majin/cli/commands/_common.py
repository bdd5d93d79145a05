"""Helpers shared by the command groups."""

import logging

import typer

from majin.core.app_context import AppContext
from majin.core.bootstrap import bootstrap

LogLevelOption = typer.Option(
    "INFO", "--log-level", help="Logging level (e.g., DEBUG, INFO, WARNING)"
)
ConfigOption = typer.Option(None, "--config", "-c", help="YAML configuration file")


def load_context(config_file: str | None, log_level: str) -> AppContext:
    level = getattr(logging, log_level.upper(), logging.INFO)
    return bootstrap(config_file, log_level=level)


def mask_secret(secret: str | None) -> str:
    if not secret:
        return "-"
    if len(secret) <= 8:
        return "****"
    return f"{secret[:4]}…{secret[-4:]}"
