"""Process-wide logger used by the CLI commands.

Library code receives its logger explicitly; only the CLI keeps a global one
so every command reports through the same console and statistics.
"""

from __future__ import annotations

from rich.console import Console

from ..infrastructure.logging.console_logger import ConsoleLogger, LogLevel

__all__ = ["ConsoleLogger", "LogLevel", "get_logger", "set_logger", "create_logger"]


_logger: ConsoleLogger | None = None


def get_logger() -> ConsoleLogger:
    """Return the logger of the running command.

    A quiet default logger is created when no command has installed one yet,
    so helpers can be called directly from tests.
    """
    global _logger
    if _logger is None:
        _logger = ConsoleLogger()
    return _logger


def set_logger(logger: ConsoleLogger) -> None:
    global _logger
    _logger = logger


def create_logger(console: Console | None = None, verbosity: int = 0) -> ConsoleLogger:
    """Install a logger for one command invocation.

    ``verbosity`` is the ``-v`` count: 1 shows file progress and the
    ingestion statistics, 2 adds header and context details.
    """
    logger = ConsoleLogger(console, verbosity)
    set_logger(logger)
    return logger
