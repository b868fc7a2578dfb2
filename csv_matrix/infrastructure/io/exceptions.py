class CSVMatrixError(Exception):
    pass


class DataSourceError(CSVMatrixError):
    pass


class FileOpenError(DataSourceError):
    pass


class MalformedRowError(DataSourceError):
    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        expected: int | None = None,
        actual: int | None = None,
    ) -> None:
        super().__init__(message)
        self.line_number = line_number
        self.expected = expected
        self.actual = actual


class NumericConversionError(DataSourceError):
    def __init__(
        self, message: str, *, row_index: int, column_index: int, value: str
    ) -> None:
        super().__init__(message)
        self.row_index = row_index
        self.column_index = column_index
        self.value = value
