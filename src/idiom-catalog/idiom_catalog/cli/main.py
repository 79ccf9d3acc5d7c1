"""CLI entrypoint for idiom-catalog — typer app over the bundled catalogs."""

import sys
from pathlib import Path
from typing import NoReturn

import structlog
import typer
from rich.console import Console
from rich.table import Table

from idiom_catalog.catalog.application.service import IdiomCatalogService
from idiom_catalog.catalog.domain.loader import CatalogLoader
from idiom_catalog.catalog.infrastructure.bundled import (
    BUNDLED_CATALOGS,
    DEFAULT_CATALOG,
    bundled_catalog_path,
)
from idiom_catalog.catalog.infrastructure.observer import StructlogCatalogObserver
from idiom_catalog.catalog.infrastructure.yaml_loader import YamlCatalogLoader
from idiom_catalog.core.errors import IdiomCatalogError
from idiom_catalog.rendering.domain.format import RenderFormat

app = typer.Typer(add_completion=False, no_args_is_help=True)

_CATALOG_HELP = f"Bundled catalog name ({', '.join(BUNDLED_CATALOGS)})"
_CATALOG_PATH_HELP = "Path to a catalog YAML file; overrides --catalog"
_LOG_FORMAT_HELP = "Log format: 'console' or 'json'"
_FORMAT_HELP = "Output format: 'plain_text' or 'markup'"


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format.

    Logs go to stderr so rendered documents on stdout stay clean.
    """
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.",
            err=True,
        )
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _open_service(
    catalog: str, catalog_path: Path | None, log_format: str
) -> IdiomCatalogService:
    _configure_structlog(log_format=log_format)
    observer = StructlogCatalogObserver()
    path = catalog_path if catalog_path is not None else bundled_catalog_path(catalog)
    loader: CatalogLoader = YamlCatalogLoader(observer=observer)
    loaded = loader.load(path=path)
    return IdiomCatalogService(catalog=loaded, observer=observer)


def _fail(exc: IdiomCatalogError) -> NoReturn:
    typer.echo(str(exc), err=True)
    raise typer.Exit(code=1) from exc


@app.command("catalogs")
def list_catalogs() -> None:
    """List the catalogs bundled with the package."""
    for name in BUNDLED_CATALOGS:
        marker = " (default)" if name == DEFAULT_CATALOG else ""
        typer.echo(f"{name}{marker}")


@app.command("list")
def list_topics(
    catalog: str = typer.Option(DEFAULT_CATALOG, "--catalog", "-c", help=_CATALOG_HELP),
    catalog_path: Path | None = typer.Option(
        None, "--catalog-path", help=_CATALOG_PATH_HELP
    ),
    log_format: str = typer.Option("console", "--log-format", help=_LOG_FORMAT_HELP),
) -> None:
    """List the topics of a catalog in order."""
    try:
        service = _open_service(
            catalog=catalog, catalog_path=catalog_path, log_format=log_format
        )
    except IdiomCatalogError as exc:
        _fail(exc)

    table = Table(title=service.catalog.title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Topic", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Notes", justify="right")
    for position, name in enumerate(service.list_topics(), start=1):
        entry = service.get_topic(name)
        table.add_row(str(position), name, entry.title, str(len(entry.notes)))

    Console(width=120).print(table)


@app.command("show")
def show_topic(
    name: str = typer.Argument(..., help="Topic name, e.g. filter_between"),
    render_format: str = typer.Option(
        RenderFormat.PLAIN_TEXT.value, "--format", "-f", help=_FORMAT_HELP
    ),
    catalog: str = typer.Option(DEFAULT_CATALOG, "--catalog", "-c", help=_CATALOG_HELP),
    catalog_path: Path | None = typer.Option(
        None, "--catalog-path", help=_CATALOG_PATH_HELP
    ),
    log_format: str = typer.Option("console", "--log-format", help=_LOG_FORMAT_HELP),
) -> None:
    """Render a single topic."""
    try:
        service = _open_service(
            catalog=catalog, catalog_path=catalog_path, log_format=log_format
        )
        typer.echo(service.render_topic(name=name, render_format=render_format))
    except IdiomCatalogError as exc:
        _fail(exc)


@app.command("render")
def render(
    render_format: str = typer.Option(
        RenderFormat.PLAIN_TEXT.value, "--format", "-f", help=_FORMAT_HELP
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the document here instead of stdout"
    ),
    catalog: str = typer.Option(DEFAULT_CATALOG, "--catalog", "-c", help=_CATALOG_HELP),
    catalog_path: Path | None = typer.Option(
        None, "--catalog-path", help=_CATALOG_PATH_HELP
    ),
    log_format: str = typer.Option("console", "--log-format", help=_LOG_FORMAT_HELP),
) -> None:
    """Render every topic of a catalog in order."""
    try:
        service = _open_service(
            catalog=catalog, catalog_path=catalog_path, log_format=log_format
        )
        document = service.render_all(render_format=render_format)
    except IdiomCatalogError as exc:
        _fail(exc)

    if output is None:
        typer.echo(document, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document, encoding="utf-8")
    typer.echo(f"Wrote {output}", err=True)


if __name__ == "__main__":
    app()
