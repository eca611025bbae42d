#!/usr/bin/env python3
"""
Command line entry point for the Minecraft patch notes feed.
Runs the same pipeline as the Lambda function, locally.
"""

import logging
from pathlib import Path
from typing import Optional

import requests
import typer

from patchnotes.config import MAX_ENTRIES, load_settings
from patchnotes.context import FeedContext
from patchnotes.handler import JSON_PATH, FeedRequest, handle
from patchnotes.resolver import resolve_all

app = typer.Typer(
    name="mc-patchnotes",
    help="Republish Minecraft: Java Edition patch notes as RSS or JSON Feed",
    no_args_is_help=True
)


def _configure_logging(verbose: bool):
    settings = load_settings()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


@app.command()
def render(
    feed_format: str = typer.Option("rss", "--format", "-f", help="Feed format: rss or json"),
    host: Optional[str] = typer.Option(None, "--host", help="Host the feed id is derived from"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the feed to this file instead of stdout"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every upstream request")
) -> None:
    """
    Fetch the patch notes and print the rendered feed.
    """
    _configure_logging(verbose)
    if feed_format not in ("rss", "json"):
        typer.echo(f"❌ Unknown format {feed_format!r}, expected rss or json", err=True)
        raise typer.Exit(1)

    context = FeedContext()
    request = FeedRequest(
        path=JSON_PATH if feed_format == "json" else "/",
        host=host or context.settings.fallback_host
    )
    try:
        response = handle(request, context)
    except (requests.RequestException, ValueError, KeyError) as e:
        typer.echo(f"❌ Error: {e}", err=True)
        raise typer.Exit(1)
    finally:
        context.close()

    if output:
        output.write_text(response.body, encoding="utf-8")
        typer.echo(f"📁 Feed saved to: {output} ({response.content_type})")
    else:
        typer.echo(response.body)


@app.command()
def entries(
    limit: int = typer.Option(MAX_ENTRIES, "--limit", "-n", min=1, max=MAX_ENTRIES, help="Number of patch notes to resolve"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every upstream request")
) -> None:
    """
    List the newest patch notes with their resolved version and date.
    """
    _configure_logging(verbose)
    context = FeedContext()
    try:
        resolved = resolve_all(context, limit)
    except (requests.RequestException, ValueError, KeyError) as e:
        typer.echo(f"❌ Error: {e}", err=True)
        raise typer.Exit(1)
    finally:
        context.close()

    for entry in resolved:
        typer.echo(f"{entry.version or '?':<20} {entry.time or '-':<26} {entry.title}")


if __name__ == "__main__":
    app()
