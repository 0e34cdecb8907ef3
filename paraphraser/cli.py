"""Command line entry point: run the relay or paraphrase text against a running relay."""

import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from paraphraser.client.form import ParaphraseForm
from paraphraser.client.relay_client import RelayClient
from paraphraser.models.completion import ParaphraseMode
from paraphraser.models.form import ParaphraseSuccess
from paraphraser.settings import ClientSettings

app = typer.Typer(
    name="paraphraser",
    help="AI paraphrasing tool",
    no_args_is_help=True,
)
console = Console()


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", "--host", help="Interface to bind"),
    port: int = typer.Option(8123, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the paraphrase relay."""
    import uvicorn

    uvicorn.run("paraphraser.main:get_app", factory=True, host=host, port=port, reload=reload)


@app.command()
def paraphrase(
    text: str = typer.Argument(help="Text to paraphrase"),
    mode: ParaphraseMode = typer.Option(ParaphraseMode.STANDARD, "--mode", "-m", help="Paraphrase mode"),
    relay_url: Optional[str] = typer.Option(None, "--relay-url", help="Relay endpoint, defaults to the configured one"),
) -> None:
    """Paraphrase TEXT through the relay."""
    settings = ClientSettings()
    form = ParaphraseForm(
        RelayClient(relay_url or settings.relay_url, timeout=settings.request_timeout),
        template=settings.prompts.paraphrase_template,
    )
    form.original_text = text
    form.set_mode(mode)

    if form.word_count_label:
        console.print(f"[dim]{form.word_count_label}[/dim]")
    with console.status("Paraphrasing..."):
        result = asyncio.run(form.submit())

    if isinstance(result, ParaphraseSuccess):
        console.print(Panel(result.text, title=f"Paraphrased Text ({mode.value})"))
        return
    console.print(f"[red]{result.reason}[/red]")
    raise typer.Exit(1)


if __name__ == "__main__":
    app()
