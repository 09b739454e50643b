"""CLI interface for CopyMind."""

import asyncio
import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .config import get_config
from .embeddings import EmbeddingClient
from .similarity import SimilarityReport, create_gate
from .utils.logging import setup_logging

app = typer.Typer(
    name="copymind",
    help="Originality gate for rewritten articles",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"copymind version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = False,
) -> None:
    """CopyMind - check that a rewrite is original enough to publish."""
    pass


def _load_text(value: str) -> str:
    """Treat the argument as a file path when such a file exists."""
    path = Path(value)
    try:
        is_file = path.is_file()
    except OSError:
        # Inline text longer than the OS file name limit
        return value
    if is_file:
        return path.read_text(encoding="utf-8")
    return value


async def _evaluate(original: str, rewritten: str, ngram_size: int | None) -> SimilarityReport:
    config = get_config()
    if ngram_size is not None:
        config = config.model_copy(
            update={"gate": config.gate.model_copy(update={"ngram_size": ngram_size})}
        )

    client = EmbeddingClient(config.embedding)
    try:
        gate = create_gate(config, provider=client)
        return await gate.evaluate(original, rewritten)
    finally:
        await client.close()


@app.command()
def check(
    original: Annotated[str, typer.Argument(help="Original text or path to file")],
    rewritten: Annotated[str, typer.Argument(help="Rewritten text or path to file")],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the report as JSON"),
    ] = False,
    ngram_size: Annotated[
        Optional[int],
        typer.Option("--ngram-size", "-n", min=1, help="Character n-gram window"),
    ] = None,
):
    """Check similarity between two texts."""
    orig_text = _load_text(original)
    rewr_text = _load_text(rewritten)

    if not orig_text or not rewr_text:
        console.print("[red]Error: Both original and rewritten texts are required[/red]")
        raise typer.Exit(2)

    config = get_config()
    setup_logging(config.log_level, config.log_file)

    report = asyncio.run(_evaluate(orig_text, rewr_text, ngram_size))

    if as_json:
        console.print_json(json.dumps(report.model_dump(by_alias=True)))
    else:
        status_color = "green" if report.passed else "red"
        status_text = "ORIGINAL" if report.passed else "TOO SIMILAR"

        console.print()
        console.print(Panel(
            report.summary(),
            title=f"Originality Report [{status_text}]",
            border_style=status_color,
        ))

    if not report.passed:
        raise typer.Exit(1)


@app.command()
def config():
    """Show current configuration."""
    cfg = get_config()

    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Embedding API", cfg.embedding.api_base)
    table.add_row("Embedding model", cfg.embedding.model_name)
    table.add_row("API key", "set" if cfg.embedding.api_key else "[yellow]not set[/yellow]")
    table.add_row("Timeout", f"{cfg.embedding.timeout}s")
    table.add_row("N-gram size", str(cfg.gate.ngram_size))
    table.add_row("Char overlap threshold", f"{cfg.gate.char_overlap_threshold:.2f}")
    table.add_row("Jaccard threshold", f"{cfg.gate.jaccard_threshold:.2f}")
    table.add_row("Semantic threshold", f"{cfg.gate.semantic_threshold:.2f}")

    console.print()
    console.print(table)
    console.print("\n[dim]Override with environment variables (prefixes: EMBED_, GATE_, SERVER_)[/dim]")


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option("--host", "-h", help="Host to bind")] = None,
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Port to bind")] = None,
):
    """Start REST API server."""
    server = get_config().server
    console.print(f"[green]Starting API server at http://{host or server.host}:{port or server.port}[/green]")
    console.print("[dim]API docs at /docs, health at /health[/dim]\n")

    from .api import run_server
    run_server(host=host, port=port)


if __name__ == "__main__":
    app()
