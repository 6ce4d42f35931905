from __future__ import annotations
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich import box
from .config import load_or_default, write_default_config
from .client import summarize_local, summarize_with_fallback
from .summarizer import LENGTH_COUNTS, STYLES
from .transcript import append_capture, clean_transcript

app = typer.Typer(help="Extractive transcript summarizer with a local fallback")
console = Console()

STYLE_HELP = {
    "concise": "One paragraph led by the top sentence",
    "executive": "Bullets (•), each cut at 120 characters",
    "action": "Action bullets (-) plus suggested next steps",
    "detailed": "One paragraph of 3-5 sentences",
}

@app.callback()
def main_callback(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )

def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")

@app.command()
def init(
    config_path: Path = typer.Option("summarizer.json", help="Where to create config"),
):
    """Create default config."""
    write_default_config(config_path)
    console.print(f"[green]Created[/green] {config_path}")

@app.command()
def serve(
    config_path: Path = typer.Option("summarizer.json", help="Config file (defaults used if missing)"),
    host: Optional[str] = typer.Option(None, help="Override host in config"),
    port: Optional[int] = typer.Option(None, envvar="PORT", help="Override port in config"),
):
    """Run the summarization API."""
    import uvicorn
    from .server.main import create_app

    cfg = load_or_default(config_path)
    host = host or cfg.host
    port = port or cfg.port
    console.print(f"Summarizer server listening on [bold]http://{host}:{port}[/bold]")
    uvicorn.run(create_app(cfg), host=host, port=port)

@app.command()
def summarize(
    source: str = typer.Argument(..., help="Transcript file, or - for stdin"),
    config_path: Path = typer.Option("summarizer.json"),
    style: Optional[str] = typer.Option(None, help="concise|executive|action|detailed"),
    length: Optional[str] = typer.Option(None, help="short|medium|long"),
    local: bool = typer.Option(False, "--local", help="Skip the remote summarizer"),
):
    """Summarize a transcript, remotely if possible."""
    cfg = load_or_default(config_path)
    text = clean_transcript(_read_source(source))
    if not text:
        typer.echo("Nothing to summarize.")
        raise typer.Exit(code=1)

    if local:
        outcome = summarize_local(text, style, length, cfg)
    else:
        outcome = asyncio.run(summarize_with_fallback(text, style, length, cfg))
    if not outcome.summary:
        typer.echo("Nothing to summarize.")
        raise typer.Exit(code=1)
    console.print(outcome.summary, markup=False, highlight=False)
    console.print(f"[dim]({outcome.source})[/dim]")

@app.command()
def capture(
    source: str = typer.Argument(..., help="Text file to capture, or - for stdin"),
    outfile: Path = typer.Option("transcript.txt", help="Transcript file to append to"),
):
    """Append a captured block to a transcript file."""
    current = _read_source(source)
    existing = outfile.read_text(encoding="utf-8") if outfile.exists() else ""
    outfile.write_text(append_capture(existing, current), encoding="utf-8")
    console.print(f"[green]Wrote[/green] {outfile}")

@app.command("styles")
def styles_cmd():
    """Show styles and length classes."""
    table = Table(title="Summary Styles", box=box.SIMPLE)
    table.add_column("Style", style="bold")
    table.add_column("Output")
    for name in STYLES:
        table.add_row(name, STYLE_HELP[name])
    console.print(table)

    lengths = Table(title="Length Classes", box=box.SIMPLE)
    lengths.add_column("Length", style="bold")
    lengths.add_column("Sentences", justify="right")
    for k, v in LENGTH_COUNTS.items():
        lengths.add_row(k, str(v))
    console.print(lengths)

def main():
    app()

if __name__ == "__main__":
    main()
