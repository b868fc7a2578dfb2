"""Inspect command - Show the columns and column types of a file."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ...domain.entities.table import RowPolicy
from ..helpers import load_reader_config, read_table
from ..logging_config import create_logger
from ..presenters import TablePresenter

console = Console()


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--header/--no-header",
    "has_header",
    default=True,
    show_default=True,
    help="Treat the first line as the header row",
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
def inspect_command(
    path: Path,
    has_header: bool,
    row_policy: str | None,
    encoding: str | None,
    config_file: Path | None,
    verbose: int,
) -> None:
    """Show the columns of PATH and the elementary type of each one.

    A column is Numeric only when every cell in it is made of digits with at
    most one decimal point; any other cell makes the whole column Text.

    Examples:

    \b
        csv-matrix inspect scores.csv
        csv-matrix inspect raw.csv --no-header --row-policy pad -v
    """
    logger = create_logger(console, verbose)
    config = load_reader_config(config_file, encoding=encoding, row_policy=row_policy)
    table = read_table(path, config, has_header=has_header)
    TablePresenter(console).present_columns(table, path)
    logger.log_final_stats()
