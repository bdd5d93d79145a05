"""Send one prompt to several models and print the completions side by side."""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from majin.api.schemas import MAX_PROMPT_LENGTH
from majin.cli.commands import _common
from majin.core.error_handler import safe_entrypoint
from majin.core.exceptions import CLIError
from majin.core.types import GenerationResult
from majin.state.models import MAX_SELECTED_MODELS
from majin.utils.logging import get_logger

app = typer.Typer(name="generate", help="Generate completions from stored models")
log = get_logger("cli.generate")
console = Console()


def _render(results: list[GenerationResult]) -> None:
    table = Table(title="Results", show_lines=True)
    table.add_column("Model", style="bold")
    table.add_column("Status")
    table.add_column("Output")
    for result in results:
        if result.ok:
            table.add_row(result.model_name, "[green]ok[/green]", result.text or "")
        else:
            kind = result.error_kind.value if result.error_kind else "Error"
            table.add_row(result.model_name, f"[red]{kind}[/red]", result.message or "")
    console.print(table)


@app.command()
@safe_entrypoint("cli.generate.run")
def run(
    prompt: str = typer.Argument(..., help="Prompt text"),
    models: list[str] | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model name (repeatable). Defaults to the models selected in settings.",
    ),
    save: bool = typer.Option(False, "--save", help="Store the results batch in MongoDB"),
    config_file: str | None = _common.ConfigOption,
    log_level: str = _common.LogLevelOption,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose error output"),
) -> None:
    """Run PROMPT against each model concurrently."""
    if not prompt.strip():
        raise CLIError("Prompt must not be empty")
    if len(prompt) > MAX_PROMPT_LENGTH:
        raise CLIError(f"Prompt exceeds {MAX_PROMPT_LENGTH} characters")

    ctx = _common.load_context(config_file, log_level)
    names = list(models or ctx.deps.state.get().selected_models)
    if not names:
        raise CLIError("No models selected; pass --model or run 'majin settings select'")
    if len(names) > MAX_SELECTED_MODELS:
        raise CLIError(f"At most {MAX_SELECTED_MODELS} models can be used at once")

    log.info("Generating with %s", ", ".join(names))
    with ctx.deps.connection:
        results = asyncio.run(ctx.deps.fanout.run(names, prompt))
        _render(results)
        if save:
            result_id = ctx.deps.results.save(prompt, results)
            typer.echo(f"Saved results as {result_id}")

    if not any(r.ok for r in results):
        raise typer.Exit(code=1)
