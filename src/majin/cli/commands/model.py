"""
Model management commands for the CLI.

Each command opens the registry connection for its own duration only.
"""

from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from majin.cli.commands import _common
from majin.core.error_handler import safe_entrypoint
from majin.registry.models import ContentType

app = typer.Typer(name="model", help="Manage stored models")
console = Console()


@app.command()
@safe_entrypoint("cli.model.add")
def add(
    name: str = typer.Argument(..., help="Model name, also the vendor model id"),
    provider: str = typer.Option(..., "--provider", "-p", help="openai, gemini, deepseek, anthropic or grok"),
    api_key: str = typer.Option(..., "--api-key", help="API key for the provider"),
    content_type: ContentType = typer.Option(ContentType.TEXT, "--type", help="Content type"),
    description: str | None = typer.Option(None, "--description", help="Free-text description"),
    inactive: bool = typer.Option(False, "--inactive", help="Store the model as inactive"),
    config_file: str | None = _common.ConfigOption,
    log_level: str = _common.LogLevelOption,
) -> None:
    """Add a model to the registry."""
    ctx = _common.load_context(config_file, log_level)
    fields: dict[str, Any] = {
        "name": name,
        "provider": provider,
        "apiKey": api_key,
        "type": content_type.value,
        "description": description,
        "active": not inactive,
    }
    with ctx.deps.connection:
        model_id = ctx.deps.registry.insert(fields)
    typer.echo(f"Added model '{name}' with id {model_id}")


@app.command(name="list")
@safe_entrypoint("cli.model.list")
def list_models(
    show_inactive: bool = typer.Option(True, "--all/--active-only", help="Include inactive models"),
    config_file: str | None = _common.ConfigOption,
    log_level: str = _common.LogLevelOption,
) -> None:
    """List stored models. API keys are masked."""
    ctx = _common.load_context(config_file, log_level)
    with ctx.deps.connection:
        models = ctx.deps.registry.list_all()

    if not show_inactive:
        models = [m for m in models if m.active]
    if not models:
        typer.echo("No models configured")
        return

    table = Table(title="Models")
    for column in ("ID", "Name", "Provider", "Type", "Active", "API key"):
        table.add_column(column)
    for model in models:
        table.add_row(
            model.id or "-",
            model.name,
            model.provider,
            model.content_type.value,
            "yes" if model.active else "no",
            _common.mask_secret(model.api_key),
        )
    console.print(table)


@app.command()
@safe_entrypoint("cli.model.update")
def update(
    model_id: str = typer.Argument(..., help="Model id"),
    name: str | None = typer.Option(None, "--name"),
    provider: str | None = typer.Option(None, "--provider", "-p"),
    api_key: str | None = typer.Option(None, "--api-key"),
    content_type: ContentType | None = typer.Option(None, "--type"),
    description: str | None = typer.Option(None, "--description"),
    config_file: str | None = _common.ConfigOption,
    log_level: str = _common.LogLevelOption,
) -> None:
    """Update fields of a stored model."""
    fields: dict[str, Any] = {
        key: value
        for key, value in {
            "name": name,
            "provider": provider,
            "apiKey": api_key,
            "type": content_type.value if content_type else None,
            "description": description,
        }.items()
        if value is not None
    }
    if not fields:
        typer.echo("Nothing to update")
        raise typer.Exit(code=1)

    ctx = _common.load_context(config_file, log_level)
    with ctx.deps.connection:
        model = ctx.deps.registry.update(model_id, fields)
    typer.echo(f"Updated model '{model.name}'")


def _set_active(model_id: str, active: bool, config_file: str | None, log_level: str) -> None:
    ctx = _common.load_context(config_file, log_level)
    with ctx.deps.connection:
        model = ctx.deps.registry.set_active(model_id, active)
    typer.echo(f"Model '{model.name}' is now {'active' if active else 'inactive'}")


@app.command()
@safe_entrypoint("cli.model.activate")
def activate(
    model_id: str = typer.Argument(..., help="Model id"),
    config_file: str | None = _common.ConfigOption,
    log_level: str = _common.LogLevelOption,
) -> None:
    """Mark a model as active."""
    _set_active(model_id, True, config_file, log_level)


@app.command()
@safe_entrypoint("cli.model.deactivate")
def deactivate(
    model_id: str = typer.Argument(..., help="Model id"),
    config_file: str | None = _common.ConfigOption,
    log_level: str = _common.LogLevelOption,
) -> None:
    """Mark a model as inactive so it is never dispatched to."""
    _set_active(model_id, False, config_file, log_level)


@app.command()
@safe_entrypoint("cli.model.remove")
def remove(
    model_id: str = typer.Argument(..., help="Model id"),
    config_file: str | None = _common.ConfigOption,
    log_level: str = _common.LogLevelOption,
) -> None:
    """Delete a model from the registry."""
    ctx = _common.load_context(config_file, log_level)
    with ctx.deps.connection:
        ctx.deps.registry.delete(model_id)
    typer.echo(f"Removed model {model_id}")
