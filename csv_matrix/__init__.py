"""csv-matrix package.

Reads delimiter-separated text into a typed table:

- quote-aware field splitting
- Numeric/Text classification of every field
- optional header row
- one reconciled elementary type per column
- conversion of the finished table into native columns or a DataFrame
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("csv-matrix")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from csv_matrix.config import ConfigLoader, ReaderConfig
from csv_matrix.domain.entities.table import ElementaryType, Field, RowPolicy, Table
from csv_matrix.domain.services.column_types import reconcile_column_types
from csv_matrix.domain.services.field_splitter import split_fields
from csv_matrix.domain.services.type_classifier import classify
from csv_matrix.infrastructure.io.exceptions import (
    CSVMatrixError,
    FileOpenError,
    MalformedRowError,
    NumericConversionError,
)
from csv_matrix.infrastructure.io.frame_builder import (
    MaterializeOptions,
    materialize_columns,
    to_dataframe,
)
from csv_matrix.infrastructure.io.record_reader import (
    ReadOptions,
    RecordReader,
    read_record,
)

__all__ = [
    "__version__",
    # Reading
    "read_record",
    "RecordReader",
    "ReadOptions",
    "ReaderConfig",
    "ConfigLoader",
    # Table model
    "Table",
    "Field",
    "ElementaryType",
    "RowPolicy",
    # Rules
    "split_fields",
    "classify",
    "reconcile_column_types",
    # Materialization
    "materialize_columns",
    "to_dataframe",
    "MaterializeOptions",
    # Errors
    "CSVMatrixError",
    "FileOpenError",
    "MalformedRowError",
    "NumericConversionError",
]
