"""CLI interface for pagewiki.

Command-line tool for serving and inspecting a file-backed wiki.
"""

import logging
import sys
from pathlib import Path

import click

from pagewiki.config import Config
from pagewiki.core.store import PageStore
from pagewiki.errors import TemplateLoadError


@click.group()
def cli() -> None:
    """Pagewiki - plain-text pages, one file each."""


def _load_config(config_path: Path | None) -> Config:
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover pagewiki.toml)",
)
@click.option(
    "--pages-dir",
    "-d",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory holding page files (overrides config)",
)
@click.option(
    "--templates-dir",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Directory containing view.html and edit.html (overrides config)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def serve(
    config_path: Path | None,
    pages_dir: Path | None,
    templates_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the wiki server."""
    from pagewiki.server import load_renderer, run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        pages_dir=pages_dir,
        templates_dir=templates_dir,
    )

    try:
        renderer = load_renderer(config)
    except (TemplateLoadError, FileNotFoundError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Pages directory: {config.wiki.pages_dir}")
    click.echo(f"Templates directory: {renderer.templates_dir}")

    run_server(config, renderer=renderer)


@cli.command(name="list")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover pagewiki.toml)",
)
@click.option(
    "--pages-dir",
    "-d",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory holding page files (overrides config)",
)
def list_pages(config_path: Path | None, pages_dir: Path | None) -> None:
    """List stored page titles."""
    config = _load_config(config_path).with_overrides(pages_dir=pages_dir)
    store = PageStore(config.wiki.pages_dir)

    titles = store.titles()
    if not titles:
        click.echo("No pages found.")
        return
    for title in titles:
        click.echo(title)
