"""Preview command - Print the first rows of a file as converted values."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ...constants import Defaults
from ...domain.entities.table import RowPolicy
from ...infrastructure.io.exceptions import NumericConversionError
from ...infrastructure.io.frame_builder import MaterializeOptions, materialize_columns
from ..helpers import load_reader_config, read_table
from ..logging_config import create_logger
from ..presenters import TablePresenter

console = Console()


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--rows",
    "limit",
    type=click.IntRange(min=1),
    default=Defaults.PREVIEW_ROWS,
    show_default=True,
    help="Number of data rows to print",
)
@click.option(
    "--header/--no-header",
    "has_header",
    default=True,
    show_default=True,
    help="Treat the first line as the header row",
)
@click.option(
    "--empty-as-nan",
    is_flag=True,
    help="Convert empty cells of Numeric columns to NaN instead of failing",
)
@click.option(
    "--row-policy",
    type=click.Choice([policy.value for policy in RowPolicy]),
    default=None,
    help="How rows with the wrong number of fields are handled (default: error)",
)
@click.option("--encoding", default=None, help="Text encoding (default: utf-8)")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a csv_matrix.toml config file (default: ./csv_matrix.toml)",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def preview_command(
    path: Path,
    limit: int,
    has_header: bool,
    empty_as_nan: bool,
    row_policy: str | None,
    encoding: str | None,
    config_file: Path | None,
    verbose: int,
) -> None:
    """Print the first rows of PATH with Numeric columns converted to numbers."""
    logger = create_logger(console, verbose)
    config = load_reader_config(config_file, encoding=encoding, row_policy=row_policy)
    table = read_table(path, config, has_header=has_header)
    try:
        columns = materialize_columns(
            table, MaterializeOptions(empty_numeric_as_nan=empty_as_nan)
        )
    except NumericConversionError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e
    TablePresenter(console).present_rows(columns, table, limit)
    logger.log_final_stats()
