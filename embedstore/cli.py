"""embedstore CLI."""

import asyncio
import logging

# Load .env file
from dotenv import load_dotenv
load_dotenv()

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from embedstore.config import get_settings
from embedstore.exceptions import EmbedStoreError
from embedstore.service import EmbeddingService


console = Console()


def setup_logging(level: str) -> None:
    """Route log records through rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


@click.group()
@click.option("--log-level", default=None, help="Log level (defaults to EMBEDSTORE_LOG_LEVEL)")
@click.pass_context
def cli(ctx, log_level: str | None):
    """embedstore - store text embeddings and rank them by similarity."""
    ctx.ensure_object(dict)
    settings = get_settings()
    ctx.obj["settings"] = settings
    setup_logging(log_level or settings.log_level)


@cli.command()
@click.option("--host", default=None, help="Bind address")
@click.option("--port", default=None, type=int, help="Port")
@click.pass_context
def serve(ctx, host: str | None, port: int | None):
    """Run the HTTP API."""
    import uvicorn
    
    from embedstore.api import create_app
    
    settings = ctx.obj["settings"]
    host = host or settings.host
    port = port or settings.port
    
    console.print(f"[green]Server running on http://{host}:{port}[/green]")
    console.print(f"[dim]API documentation available at http://{host}:{port}/docs[/dim]")
    
    uvicorn.run(create_app(settings), host=host, port=port, log_config=None)


@cli.command("rank")
@click.argument("query")
@click.option("--text", "texts", multiple=True, required=True, help="Candidate text (repeatable)")
@click.option("--type", "embedding_type", default="", help="Embedding type for the candidates")
@click.option("--model", default=None, help="Embedding model")
@click.option("--top-k", default=None, type=int, help="Number of results")
@click.pass_context
def rank_texts(
    ctx,
    query: str,
    texts: tuple[str, ...],
    embedding_type: str,
    model: str | None,
    top_k: int | None,
):
    """Rank candidate texts against QUERY using a throwaway store."""
    service = EmbeddingService.from_settings(ctx.obj["settings"])
    
    async def _run():
        try:
            for text in texts:
                await service.store(text, embedding_type=embedding_type, model=model)
            return await service.compare(
                query,
                embedding_type=embedding_type,
                model=model,
                top_k=top_k,
            )
        finally:
            await service.aclose()
    
    try:
        results = asyncio.run(_run())
    except EmbedStoreError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)
    
    if not results:
        console.print("[yellow]No comparable embeddings[/yellow]")
        return
    
    table = Table(title=f"Matches for: {query}")
    table.add_column("#", style="dim", width=3)
    table.add_column("Score", justify="right", style="green")
    table.add_column("Text")
    table.add_column("Type", style="cyan")
    
    for i, match in enumerate(results, 1):
        table.add_row(str(i), f"{match.score:.4f}", match.text, match.embedding_type)
    
    console.print(table)


if __name__ == "__main__":
    cli()
