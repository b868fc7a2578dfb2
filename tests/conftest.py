from collections.abc import Callable
from pathlib import Path

import pytest

from csv_matrix.constants import EnvVars

_ENV_KEYS = (
    EnvVars.DELIMITER,
    EnvVars.QUOTE_CHAR,
    EnvVars.ENCODING,
    EnvVars.HEADER_SENTINEL,
    EnvVars.ROW_POLICY,
    EnvVars.SKIP_BLANK_LINES,
)


@pytest.fixture(autouse=True)
def _isolated_reader_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CSV_MATRIX_* settings of the developer's shell out of the tests."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Write text to a file under tmp_path and return its path."""

    def _write(content: str, name: str = "data.csv", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding=encoding)
        return path

    return _write
