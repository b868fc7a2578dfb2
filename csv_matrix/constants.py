from typing import ClassVar


class Defaults:
    DELIMITER = ","
    QUOTE_CHAR = '"'
    ENCODING = "utf-8"
    HEADER_SENTINEL = "1"
    ROW_POLICY = "error"
    SKIP_BLANK_LINES = True
    PREVIEW_ROWS = 10
    CONFIG_FILE = "csv_matrix.toml"


class Tokens:
    DECIMAL_POINT = "."
    DIGITS = frozenset("0123456789")
    LINE_TERMINATORS = "\r\n"


class EnvVars:
    DELIMITER = "CSV_MATRIX_DELIMITER"
    QUOTE_CHAR = "CSV_MATRIX_QUOTE_CHAR"
    ENCODING = "CSV_MATRIX_ENCODING"
    HEADER_SENTINEL = "CSV_MATRIX_HEADER_SENTINEL"
    ROW_POLICY = "CSV_MATRIX_ROW_POLICY"
    SKIP_BLANK_LINES = "CSV_MATRIX_SKIP_BLANK_LINES"
    TRUTHY: ClassVar[tuple[str, ...]] = ("1", "true", "yes", "on")
