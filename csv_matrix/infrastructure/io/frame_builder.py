from __future__ import annotations

from dataclasses import dataclass
import math

import pandas as pd

from ...domain.entities.table import ElementaryType, Table
from .exceptions import NumericConversionError


@dataclass(frozen=True, slots=True)
class MaterializeOptions:
    empty_numeric_as_nan: bool = False


def materialize_columns(
    table: Table, options: MaterializeOptions | None = None
) -> list[list[float] | list[str]]:
    """Convert a table into column-major native values.

    Numeric columns become lists of ``float`` and Text columns lists of
    ``str``. A cell the classifier accepted as Numeric but ``float()`` rejects
    (a lone ``.`` or an empty value) raises ``NumericConversionError``.
    """
    if options is None:
        options = MaterializeOptions()
    columns: list[list[float] | list[str]] = []
    for index, column_type in enumerate(table.column_types):
        values = table.column_values(index)
        if column_type is ElementaryType.NUMERIC:
            columns.append(_to_floats(values, index, options))
        else:
            columns.append(values)
    return columns


def to_dataframe(
    table: Table, options: MaterializeOptions | None = None
) -> pd.DataFrame:
    if not table.rows:
        return pd.DataFrame(columns=table.column_names)
    columns = materialize_columns(table, options)
    frame = pd.DataFrame(
        {
            index: pd.Series(
                values,
                dtype="float64" if column_type is ElementaryType.NUMERIC else "object",
            )
            for index, (column_type, values) in enumerate(
                zip(table.column_types, columns, strict=True)
            )
        }
    )
    # Header names may repeat, so they are assigned after construction.
    frame.columns = table.column_names
    return frame


def _to_floats(
    values: list[str], column_index: int, options: MaterializeOptions
) -> list[float]:
    floats: list[float] = []
    for row_index, value in enumerate(values):
        if not value and options.empty_numeric_as_nan:
            floats.append(math.nan)
            continue
        try:
            floats.append(float(value))
        except ValueError as e:
            raise NumericConversionError(
                f"Cannot convert {value!r} to a number "
                f"(row {row_index}, column {column_index})",
                row_index=row_index,
                column_index=column_index,
                value=value,
            ) from e
    return floats
