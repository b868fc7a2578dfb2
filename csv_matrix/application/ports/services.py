from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerPort(Protocol):
    """Progress and diagnostics sink. Messages are plain text, never markup."""

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_file_loaded(
        self, filename: str, row_count: int, column_count: int | None = None
    ) -> None: ...

    def log_row_adjusted(
        self, line_number: int, expected: int, actual: int, *, action: str
    ) -> None: ...

    def log_final_stats(self) -> None: ...
