"""Helper functions shared by the CLI commands."""

from __future__ import annotations

from pathlib import Path

import click

from ..config import ConfigLoader, ReaderConfig
from ..domain.entities.table import Table
from ..infrastructure.io.exceptions import CSVMatrixError
from ..infrastructure.io.record_reader import ReadOptions, RecordReader
from .logging_config import get_logger


def load_reader_config(
    config_file: Path | None, *, encoding: str | None, row_policy: str | None
) -> ReaderConfig:
    """Resolve the reader configuration for one CLI invocation.

    Environment variables and the TOML file are applied first; explicit
    command-line options win over both.
    """
    config = ConfigLoader.load(config_file=config_file)
    if encoding is None and row_policy is None:
        return config
    try:
        return ReaderConfig(
            delimiter=config.delimiter,
            quote_char=config.quote_char,
            encoding=encoding or config.encoding,
            header_sentinel=config.header_sentinel,
            row_policy=row_policy or config.row_policy,
            skip_blank_lines=config.skip_blank_lines,
        )
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def read_table(path: Path, config: ReaderConfig, *, has_header: bool) -> Table:
    """Read ``path`` and turn library errors into click errors."""
    logger = get_logger()
    logger.set_context(file_name=path.name, operation="read")
    reader = RecordReader(config, logger)
    try:
        return reader.read(path, ReadOptions(has_header=has_header))
    except CSVMatrixError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e
    finally:
        logger.clear_context()
