from __future__ import annotations

import codecs
from dataclasses import dataclass
import os
from pathlib import Path
from typing import TYPE_CHECKING

from ...config import ReaderConfig
from ...constants import Defaults, Tokens
from ...domain.entities.table import Row, RowPolicy, Table
from ...domain.services.column_types import reconcile_column_types
from ...domain.services.field_splitter import split_fields
from ...domain.services.type_classifier import make_field
from ..logging.null_logger import NullLogger
from .exceptions import FileOpenError, MalformedRowError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ...application.ports.services import LoggerPort


@dataclass(slots=True)
class ReadOptions:
    has_header: bool = True
    row_policy: RowPolicy | None = None
    encoding: str | None = None


class RecordReader:
    """Builds a ``Table`` from a delimiter-separated text file.

    Rows are split and classified line by line, checked against the column
    count of the table, and the column types are reconciled once the whole
    file has been read.
    """

    def __init__(
        self, config: ReaderConfig | None = None, logger: LoggerPort | None = None
    ) -> None:
        self.config = config or ReaderConfig()
        self.logger = logger or NullLogger()

    def read(
        self, path: str | os.PathLike[str], options: ReadOptions | None = None
    ) -> Table:
        if options is None:
            options = ReadOptions()
        path = Path(path)
        encoding = options.encoding or self.config.encoding
        policy = RowPolicy(options.row_policy or self.config.row_policy)
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise FileOpenError(f"Unknown encoding {encoding!r} for {path}") from e
        if path.is_dir():
            raise FileOpenError(f"Not a file: {path}")
        self.logger.verbose(f"Reading {path}")
        try:
            with path.open("r", encoding=encoding, newline="\n") as handle:
                table = self._build_table(
                    handle, has_header=options.has_header, policy=policy
                )
        except FileNotFoundError as e:
            raise FileOpenError(f"File not found: {path}") from e
        except UnicodeDecodeError as e:
            raise FileOpenError(
                f"Encoding error reading {path}. Try a different encoding: {e}"
            ) from e
        except OSError as e:
            raise FileOpenError(f"Cannot read {path}: {e}") from e
        self.logger.log_file_loaded(path.name, table.row_count, table.column_count)
        return table

    def _build_table(
        self, lines: Iterable[str], *, has_header: bool, policy: RowPolicy
    ) -> Table:
        header: tuple[str, ...] = ()
        rows: list[Row] = []
        expected: int | None = None
        line_number = 0
        for raw_line in lines:
            line_number += 1
            line = raw_line.rstrip(Tokens.LINE_TERMINATORS)
            if has_header and line_number == 1:
                header = tuple(self._split(line))
                if header:
                    expected = len(header)
                self.logger.debug(f"Header: {', '.join(header)}")
                continue
            if not line and self.config.skip_blank_lines:
                continue
            row = tuple(make_field(value) for value in self._split(line))
            if expected is None:
                expected = len(row)
            elif len(row) != expected:
                row = self._fit_row(row, expected, line_number, policy)
            rows.append(row)
        return Table(
            header=header,
            rows=tuple(rows),
            column_types=reconcile_column_types(rows),
        )

    def _split(self, line: str) -> list[str]:
        return split_fields(
            line, delimiter=self.config.delimiter, quote_char=self.config.quote_char
        )

    def _fit_row(
        self, row: Row, expected: int, line_number: int, policy: RowPolicy
    ) -> Row:
        actual = len(row)
        if actual > expected and policy is not RowPolicy.ERROR:
            self.logger.log_row_adjusted(
                line_number, expected, actual, action="truncated"
            )
            return row[:expected]
        if actual < expected and policy is RowPolicy.PAD:
            self.logger.log_row_adjusted(line_number, expected, actual, action="padded")
            padding = (make_field(""),) * (expected - actual)
            return row + padding
        raise MalformedRowError(
            f"Line {line_number} has {actual} fields, expected {expected}",
            line_number=line_number,
            expected=expected,
            actual=actual,
        )


def read_record(
    path: str | os.PathLike[str],
    header_flag: str = Defaults.HEADER_SENTINEL,
    *,
    config: ReaderConfig | None = None,
    logger: LoggerPort | None = None,
) -> Table:
    """Read ``path`` into a ``Table``.

    ``header_flag`` enables header parsing only when it equals the configured
    header sentinel (``"1"`` by default); any other value means no header.
    """
    reader = RecordReader(config, logger)
    has_header = header_flag == reader.config.header_sentinel
    return reader.read(path, ReadOptions(has_header=has_header))
