#!/usr/bin/env python3
"""
Main CLI entry point for the Bookshelf catalog API.
"""

import json
import os
import sys

import click
import uvicorn

from bookshelf import __version__
from bookshelf.catalog.errors import DataSourceUnavailable
from bookshelf.config import get_data_dir, settings
from bookshelf.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookshelf")
def cli() -> None:
    """Bookshelf CLI - serve the catalog API and check its data."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Bookshelf API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Bookshelf API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app reads settings at import time, so pass the level through the environment
    if log_level == "debug":
        os.environ["BOOKSHELF_DEBUG"] = "true"
        os.environ["BOOKSHELF_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("BOOKSHELF_DEBUG", "false")
        os.environ.setdefault("BOOKSHELF_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "bookshelf.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except DataSourceUnavailable as e:
        logger.error("Catalog data could not be loaded", error=str(e))
        sys.exit(1)


@cli.command("check-data")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding authors.json, books.json and comments.json",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit with status 1 when the audit finds any issue",
)
@click.option(
    "--output-format",
    default="table",
    type=click.Choice(["table", "json"]),
    help="Output format (default: table)",
)
def check_data(data_dir: str | None, strict: bool, output_format: str) -> None:
    """Load the catalog data and audit it for duplicate ids and dangling references."""
    from bookshelf.datasource.loader import load_data_source
    from bookshelf.validation import audit_data_source

    configure_logging()

    try:
        data_source = load_data_source(data_dir or get_data_dir())
    except DataSourceUnavailable as e:
        logger.error("Failed to load catalog data", error=str(e))
        click.echo(f"✗ Error loading catalog data: {e}", err=True)
        sys.exit(1)

    results = audit_data_source(data_source)

    if output_format == "json":
        click.echo(json.dumps(results, indent=2))
    else:
        stats = results["statistics"]
        click.echo(f"Authors: {stats['authors']}")
        click.echo(f"Books: {stats['books']}")
        click.echo(f"Comments: {stats['comments']}")
        if results["findings"]:
            click.echo(f"\n⚠️  Findings ({len(results['findings'])}):")
            for i, finding in enumerate(results["findings"], 1):
                click.echo(f"   {i}. {finding['type']}: {finding['description']}")
        else:
            click.echo("\n✅ No issues found")

    if strict and not results["valid"]:
        sys.exit(1)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
