"""Start the Majin API server."""

import typer
import uvicorn

from majin.api.app import create_app
from majin.cli.commands import _common
from majin.core.error_handler import safe_entrypoint

app = typer.Typer(name="serve", help="Start the Majin API server")


@app.command()
@safe_entrypoint("cli.serve.start")
def start(
    host: str | None = typer.Option(None, help="Host to bind to (default from config)"),
    port: int | None = typer.Option(None, help="Port to listen on (default from config)"),
    config_file: str | None = _common.ConfigOption,
    log_level: str = _common.LogLevelOption,
    verbose: bool = typer.Option(False, "--verbose", help="Verbose error output"),
) -> None:
    """Start the HTTP API."""
    ctx = _common.load_context(config_file, log_level)
    server = ctx.deps.config.server
    bind_host = host or server.host
    bind_port = port or server.port

    typer.echo(f"Starting server on {bind_host}:{bind_port}")
    uvicorn.run(
        create_app(ctx),
        host=bind_host,
        port=bind_port,
        log_level=log_level.lower(),
        log_config=None,
    )
