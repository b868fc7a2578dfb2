from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class ElementaryType(str, Enum):
    """Elementary type of a single cell or of a whole column."""

    NUMERIC = "Numeric"
    TEXT = "Text"


class RowPolicy(str, Enum):
    """How rows whose width differs from the table's column count are handled."""

    ERROR = "error"  # raise MalformedRowError
    PAD = "pad"  # pad short rows with empty cells, truncate long ones
    TRUNCATE = "truncate"  # truncate long rows, short rows still raise


@dataclass(frozen=True, slots=True)
class Field:
    value: str
    type: ElementaryType

    @property
    def is_numeric(self) -> bool:
        return self.type is ElementaryType.NUMERIC


Row = tuple[Field, ...]
Header = tuple[str, ...]
ColumnTypeVector = tuple[ElementaryType, ...]


@dataclass(frozen=True, slots=True)
class Table:
    """Result of one ingestion call.

    ``header`` is empty unless header parsing was requested and the file had a
    first line. ``column_types`` holds one entry per column of ``rows``.
    """

    header: Header = ()
    rows: tuple[Row, ...] = ()
    column_types: ColumnTypeVector = ()

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        if self.rows:
            return len(self.rows[0])
        return len(self.header)

    @property
    def column_names(self) -> list[str]:
        if self.header:
            return list(self.header)
        return [str(index) for index in range(self.column_count)]

    def column_values(self, index: int) -> list[str]:
        if not 0 <= index < self.column_count:
            raise IndexError(
                f"column index {index} out of range for {self.column_count} columns"
            )
        return [row[index].value for row in self.rows]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)
