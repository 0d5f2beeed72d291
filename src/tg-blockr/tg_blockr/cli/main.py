"""CLI entrypoint for tg-blockr — typer app with `datasets`, `expression`, `load` and `demo` commands."""

import logging
import sys
from collections.abc import Callable
from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.table import Table

from tg_blockr.block.application.block import TgDataBlock
from tg_blockr.block.infrastructure.observer import StructlogBlockObserver
from tg_blockr.catalog.domain.catalog import DatasetCatalog
from tg_blockr.catalog.infrastructure.observer import StructlogCatalogObserver
from tg_blockr.catalog.infrastructure.static_catalog import StaticDatasetCatalog
from tg_blockr.cli.demo import rank_groups
from tg_blockr.config.domain.config import TgBlockrConfig
from tg_blockr.config.infrastructure.catalog_builder import build_catalog
from tg_blockr.config.infrastructure.observer import StructlogConfigObserver
from tg_blockr.config.infrastructure.yaml_loader import YamlConfigLoader
from tg_blockr.core.errors import TgBlockrError
from tg_blockr.expression.infrastructure.importlib_evaluator import (
    ImportlibExpressionEvaluator,
)
from tg_blockr.expression.infrastructure.observer import StructlogExpressionObserver

app = typer.Typer(add_completion=False, help="Explore Canton Thurgau datasets.")

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _configure_structlog(log_format: str, log_level: str) -> None:
    """Configure structlog based on the requested format and level."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    level = _LOG_LEVELS.get(log_level.lower())
    if level is None:
        typer.echo(f"Invalid log level: {log_level!r}. Must be one of {list(_LOG_LEVELS)}.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path | None) -> TgBlockrConfig:
    if config_path is None:
        return TgBlockrConfig()
    return YamlConfigLoader(observer=StructlogConfigObserver()).load(path=config_path)


def _build_block(
    config: TgBlockrConfig,
    dataset: str,
    direct: bool | None,
    labels: bool | None,
    validate: bool | None,
) -> TgDataBlock:
    """Build a block from the config defaults, overridden by any flag given on the command line."""
    catalog, resolver = build_catalog(config=config, observer=StructlogCatalogObserver())
    overrides: dict[str, object] = {"dataset": dataset}
    if direct is not None:
        overrides["use_data_lake"] = not direct
    if labels is not None:
        overrides["add_labels"] = labels
    if validate is not None:
        overrides["validate_data"] = validate
    state = config.defaults.model_copy(update=overrides)
    return TgDataBlock(
        state=state,
        catalog=catalog,
        resolver=resolver,
        observer=StructlogBlockObserver(),
    )


def _evaluator(config: TgBlockrConfig) -> ImportlibExpressionEvaluator:
    """Build an evaluator that requires the access token for every data lake function."""
    gated = {config.loaders.cache_function}
    gated.update(e.cache_function for e in config.datasets if e.cache_function)
    return ImportlibExpressionEvaluator(
        observer=StructlogExpressionObserver(),
        token_env_var=config.loaders.token_env_var,
        token_gated_functions=tuple(sorted(gated)),
    )


def _datasets_table(catalog: DatasetCatalog) -> Table:
    table = Table(title="TG datasets", show_lines=False)
    table.add_column("Dataset", style="cyan", no_wrap=True)
    table.add_column("Title")
    for dataset_id in catalog.list_datasets():
        title = ""
        if isinstance(catalog, StaticDatasetCatalog):
            title = catalog.get(dataset_id).title
        table.add_row(dataset_id, title)
    return table


def _run(command: Callable[[], None]) -> None:
    """Translate errors raised by a command into an exit code of 1."""
    try:
        command()
    except KeyboardInterrupt:
        typer.echo("Interrupted.")
        sys.exit(1)
    except TgBlockrError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except typer.Exit:
        raise
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


@app.callback()
def main(
    log_format: str = typer.Option(
        "console", "--log-format", help="Log format: 'console' or 'json'"
    ),
    log_level: str = typer.Option(
        "warning", "--log-level", help="Minimum log level: debug, info, warning, error"
    ),
) -> None:
    """Configure logging before any command runs."""
    _configure_structlog(log_format=log_format, log_level=log_level)


@app.command()
def datasets(
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to a tg-blockr YAML config"
    ),
) -> None:
    """List the datasets a TG Data block can load."""

    def _command() -> None:
        config = _load_config(config_path=config_path)
        catalog, _ = build_catalog(config=config, observer=StructlogCatalogObserver())
        if not catalog.list_datasets():
            typer.echo("No datasets available.")
            return
        Console().print(_datasets_table(catalog=catalog))

    _run(_command)


@app.command()
def expression(
    dataset: str = typer.Argument(..., help="Dataset id, e.g. energie_emiss_co2"),
    direct: bool | None = typer.Option(
        None,
        "--direct/--data-lake",
        help="Fetch from the original source instead of the data lake",
        show_default=False,
    ),
    labels: bool | None = typer.Option(
        None, "--labels/--no-labels", help="Add labels", show_default=False
    ),
    validate: bool | None = typer.Option(
        None, "--validate/--no-validate", help="Validate data", show_default=False
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to a tg-blockr YAML config"
    ),
) -> None:
    """Print the load expression a block with these settings would generate."""

    def _command() -> None:
        config = _load_config(config_path=config_path)
        block = _build_block(
            config=config, dataset=dataset, direct=direct, labels=labels, validate=validate
        )
        typer.echo(block.expression.render())

    _run(_command)


@app.command()
def load(
    dataset: str = typer.Argument(..., help="Dataset id, e.g. energie_emiss_co2"),
    direct: bool | None = typer.Option(
        None,
        "--direct/--data-lake",
        help="Fetch from the original source instead of the data lake",
        show_default=False,
    ),
    labels: bool | None = typer.Option(
        None, "--labels/--no-labels", help="Add labels", show_default=False
    ),
    validate: bool | None = typer.Option(
        None, "--validate/--no-validate", help="Validate data", show_default=False
    ),
    head: int = typer.Option(10, "--head", "-n", min=0, help="Rows to print"),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to a tg-blockr YAML config"
    ),
) -> None:
    """Evaluate the load expression and print the first rows of the dataset."""

    def _command() -> None:
        config = _load_config(config_path=config_path)
        block = _build_block(
            config=config, dataset=dataset, direct=direct, labels=labels, validate=validate
        )
        frame = _evaluator(config=config).evaluate(expression=block.expression)
        typer.echo(frame.head(head).to_string())
        typer.echo(f"\n{len(frame.index)} rows x {len(frame.columns)} columns")

    _run(_command)


@app.command()
def demo(
    dataset: str = typer.Argument("energie_emiss_co2", help="Dataset id to explore"),
    direct: bool | None = typer.Option(
        None,
        "--direct/--data-lake",
        help="Fetch from the original source instead of the data lake",
        show_default=False,
    ),
    since: int = typer.Option(2010, "--since", help="First year to keep"),
    by: str = typer.Option("bfsnr_name", "--by", help="Column to group by"),
    value: str = typer.Option("wert", "--value", help="Column to summarize"),
    top: int = typer.Option(10, "--top", min=1, help="Groups to show"),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to a tg-blockr YAML config"
    ),
) -> None:
    """Load a dataset with labels and validation, then rank its groups by total value."""

    def _command() -> None:
        config = _load_config(config_path=config_path)
        block = _build_block(
            config=config, dataset=dataset, direct=direct, labels=True, validate=True
        )
        frame = _evaluator(config=config).evaluate(expression=block.expression)
        ranked = rank_groups(frame=frame, by=by, value=value, since=since, top=top)
        typer.echo(f"Top {len(ranked.index)} by {value} since {since} ({dataset}):")
        typer.echo(ranked.to_string(index=False))

    _run(_command)


if __name__ == "__main__":
    app()
