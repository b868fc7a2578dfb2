from collections.abc import Sequence

from ..entities.table import ColumnTypeVector, ElementaryType, Field


def reconcile_column_types(rows: Sequence[Sequence[Field]]) -> ColumnTypeVector:
    """Derive one elementary type per column from every row of a table.

    A column is Numeric only if none of its cells is Text. The column count is
    taken from the first row; any row shorter than that raises ``ValueError``
    before a single column is decided.
    """
    if not rows:
        return ()
    column_count = len(rows[0])
    for row_number, row in enumerate(rows):
        if len(row) < column_count:
            raise ValueError(
                f"row {row_number} has {len(row)} fields, expected {column_count}"
            )
    return tuple(
        ElementaryType.TEXT
        if any(row[index].type is ElementaryType.TEXT for row in rows)
        else ElementaryType.NUMERIC
        for index in range(column_count)
    )
