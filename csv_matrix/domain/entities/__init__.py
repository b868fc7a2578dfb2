from .table import (
    ColumnTypeVector,
    ElementaryType,
    Field,
    Header,
    Row,
    RowPolicy,
    Table,
)

__all__ = [
    "ColumnTypeVector",
    "ElementaryType",
    "Field",
    "Header",
    "Row",
    "RowPolicy",
    "Table",
]
