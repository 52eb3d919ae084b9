"""Main Typer application."""

from __future__ import annotations

import typer

app = typer.Typer(
    name="ukwac-stream",
    help="Stream dependency-parsed sentence blocks out of tagged CoNLL corpora.",
    no_args_is_help=True,
)


@app.command()
def stream_documents(
    config: str = typer.Option(..., "--config", "-c", help="Path to config YAML"),
    input_path: str = typer.Option(
        None, "--input", "-i", help="Override the corpus file from the config"
    ),
    output: str = typer.Option(
        None, "--output", "-o", help="Write JSONL here instead of stdout"
    ),
    limit: int = typer.Option(
        None, "--limit", "-n", min=0, help="Stop after this many documents"
    ),
) -> None:
    """Write one JSON line per parsed document."""
    from .stream_cmd import run_stream

    run_stream(config, input_path, output, limit)


@app.command()
def count_documents(
    config: str = typer.Option(..., "--config", "-c", help="Path to config YAML"),
    input_path: str = typer.Option(
        None, "--input", "-i", help="Override the corpus file from the config"
    ),
) -> None:
    """Print the number of documents in the corpus."""
    from .stream_cmd import run_count

    run_count(config, input_path)


if __name__ == "__main__":
    app()
