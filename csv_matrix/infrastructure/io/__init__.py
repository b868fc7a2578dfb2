"""Infrastructure I/O layer.

This package contains the file reader that builds tables from
delimiter-separated text and the materializer that turns a finished table
into native Python values or a pandas DataFrame.
"""

from .exceptions import (
    CSVMatrixError,
    DataSourceError,
    FileOpenError,
    MalformedRowError,
    NumericConversionError,
)
from .frame_builder import MaterializeOptions, materialize_columns, to_dataframe
from .record_reader import ReadOptions, RecordReader, read_record

__all__ = [
    "CSVMatrixError",
    "DataSourceError",
    "FileOpenError",
    "MalformedRowError",
    "MaterializeOptions",
    "NumericConversionError",
    "ReadOptions",
    "RecordReader",
    "materialize_columns",
    "read_record",
    "to_dataframe",
]
