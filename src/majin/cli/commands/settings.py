"""View and change the local profile, theme and model selection."""

import typer
from rich.console import Console
from rich.table import Table

from majin.cli.commands import _common
from majin.core.error_handler import safe_entrypoint
from majin.state.models import AppState, Theme

app = typer.Typer(name="settings", help="Profile, theme and model selection")
console = Console()


def _show(state: AppState) -> None:
    table = Table(title="Settings", show_header=False)
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_row("Name", state.user.name if state.user else "-")
    table.add_row("Email", state.user.email if state.user else "-")
    table.add_row("Theme", state.theme.value)
    table.add_row("Selected models", ", ".join(state.selected_models) or "-")
    console.print(table)


@app.command()
@safe_entrypoint("cli.settings.show")
def show(
    config_file: str | None = _common.ConfigOption,
    log_level: str = _common.LogLevelOption,
) -> None:
    """Print the current settings."""
    ctx = _common.load_context(config_file, log_level)
    _show(ctx.deps.state.get())


@app.command()
@safe_entrypoint("cli.settings.profile")
def profile(
    name: str = typer.Option(..., "--name", help="Display name"),
    email: str = typer.Option(..., "--email", help="Email address"),
    config_file: str | None = _common.ConfigOption,
    log_level: str = _common.LogLevelOption,
) -> None:
    """Set the user profile."""
    ctx = _common.load_context(config_file, log_level)
    ctx.deps.state.update_user(name, email)
    typer.echo("Profile updated")


@app.command()
@safe_entrypoint("cli.settings.theme")
def theme(
    value: Theme = typer.Argument(..., help="light, dark or system"),
    config_file: str | None = _common.ConfigOption,
    log_level: str = _common.LogLevelOption,
) -> None:
    """Change the theme."""
    ctx = _common.load_context(config_file, log_level)
    ctx.deps.state.set_theme(value)
    typer.echo(f"Theme has been changed to {value.value}")


@app.command()
@safe_entrypoint("cli.settings.select")
def select(
    name: str = typer.Argument(..., help="Model name"),
    config_file: str | None = _common.ConfigOption,
    log_level: str = _common.LogLevelOption,
) -> None:
    """Add a model to the selection used by 'generate run'."""
    ctx = _common.load_context(config_file, log_level)
    state = ctx.deps.state.select_model(name)
    typer.echo(f"Selected: {', '.join(state.selected_models)}")


@app.command()
@safe_entrypoint("cli.settings.deselect")
def deselect(
    name: str = typer.Argument(..., help="Model name"),
    config_file: str | None = _common.ConfigOption,
    log_level: str = _common.LogLevelOption,
) -> None:
    """Remove a model from the selection."""
    ctx = _common.load_context(config_file, log_level)
    state = ctx.deps.state.deselect_model(name)
    typer.echo(f"Selected: {', '.join(state.selected_models) or '-'}")
