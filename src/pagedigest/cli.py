"""Command-line interface for pagedigest."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import IO, Optional

import click
import structlog
import yaml

from pagedigest import __version__
from pagedigest.config.config import Config, load_config
from pagedigest.exceptions import NoContentError, PageDigestError
from pagedigest.extractor.content_extractor import ContentExtractor
from pagedigest.observability.logging import configure_logging
from pagedigest.pipeline import DigestPipeline
from pagedigest.summarizer.extractive import ExtractiveSummarizer

logger = structlog.get_logger(__name__)

SOURCE = click.File("r", encoding="utf-8")


def _config(ctx: click.Context) -> Config:
    return ctx.obj["config"]


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", type=click.Path(exists=True, dir_okay=False), help="Configuration file path")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (overrides the configuration file)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], log_level: Optional[str]) -> None:
    """pagedigest - extract the main text of a web page and summarize it."""
    ctx.ensure_object(dict)
    try:
        loaded = load_config(Path(config) if config else None)
    except (ValueError, OSError, yaml.YAMLError) as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e
    if log_level:
        loaded.monitoring.log_level = log_level.upper()
    ctx.obj["config"] = loaded

    configure_logging(loaded.monitoring)


@cli.command()
@click.argument("source", type=SOURCE)
@click.pass_context
def extract(ctx: click.Context, source: IO[str]) -> None:
    """Print the main content text of an HTML file (use - for stdin)."""
    extractor = ContentExtractor(_config(ctx).extraction)
    result = extractor.extract(source.read())
    if result.is_empty:
        click.echo("Error: no meaningful text found", err=True)
        ctx.exit(1)
    logger.info("Extracted content", rule=result.rule, fallback=result.fallback, pruned=result.pruned)
    click.echo(result.text)


@cli.command()
@click.argument("source", type=SOURCE)
@click.option("--sentences", "-n", type=click.IntRange(min=1), default=None, help="Number of sentences")
@click.pass_context
def summarize(ctx: click.Context, source: IO[str], sentences: Optional[int]) -> None:
    """Summarize a plain-text file (use - for stdin) with the classic algorithm."""
    settings = _config(ctx).summarization
    count = sentences or settings.default_sentence_count
    click.echo(ExtractiveSummarizer(settings).summarize(source.read(), count))


@cli.command()
@click.argument("source", type=SOURCE)
@click.option("--sentences", "-n", type=click.IntRange(min=1), default=None, help="Number of sentences")
@click.option("--provider", "-p", default=None, help="Summarization provider (default from configuration)")
@click.option("--url", default=None, help="Source URL of the page, recorded in logs and JSON output")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_context
def digest(
    ctx: click.Context,
    source: IO[str],
    sentences: Optional[int],
    provider: Optional[str],
    url: Optional[str],
    as_json: bool,
) -> None:
    """Extract the main content of an HTML file and summarize it."""
    html = source.read()
    try:
        pipeline = DigestPipeline(_config(ctx))
        result = asyncio.run(pipeline.digest(html, url=url, sentence_count=sentences, provider=provider))
    except NoContentError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    except PageDigestError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        click.echo(result.summary)


def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
