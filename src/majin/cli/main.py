import typer

from .commands import generate, model, serve, settings

app = typer.Typer(help="Majin: one prompt, many language models")

app.add_typer(serve.app, name="serve", help="Start the API server")
app.add_typer(model.app, name="model", help="Manage stored models")
app.add_typer(generate.app, name="generate", help="Generate completions")
app.add_typer(settings.app, name="settings", help="Profile, theme and model selection")


def main():
    app()


if __name__ == "__main__":
    main()
