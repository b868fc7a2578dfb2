from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults, EnvVars
from .domain.entities.table import RowPolicy


@dataclass(frozen=True, slots=True)
class ReaderConfig:
    delimiter: str = Defaults.DELIMITER
    quote_char: str = Defaults.QUOTE_CHAR
    encoding: str = Defaults.ENCODING
    header_sentinel: str = Defaults.HEADER_SENTINEL
    row_policy: str = Defaults.ROW_POLICY
    skip_blank_lines: bool = Defaults.SKIP_BLANK_LINES

    def __post_init__(self) -> None:
        if len(self.delimiter) != 1:
            raise ValueError(
                f"delimiter must be a single character, got {self.delimiter!r}"
            )
        if len(self.quote_char) != 1:
            raise ValueError(
                f"quote_char must be a single character, got {self.quote_char!r}"
            )
        if self.delimiter == self.quote_char:
            raise ValueError("delimiter and quote_char must differ")
        if self.delimiter in "\r\n" or self.quote_char in "\r\n":
            raise ValueError("delimiter and quote_char cannot be line terminators")
        if not self.encoding:
            raise ValueError("encoding must not be empty")
        allowed = [policy.value for policy in RowPolicy]
        if self.row_policy not in allowed:
            raise ValueError(
                f"row_policy must be one of {', '.join(allowed)}, "
                f"got {self.row_policy!r}"
            )

    @classmethod
    def from_env(cls) -> ReaderConfig:
        raw_skip = os.getenv(EnvVars.SKIP_BLANK_LINES)
        skip_blank_lines = (
            Defaults.SKIP_BLANK_LINES
            if raw_skip is None
            else raw_skip.strip().lower() in EnvVars.TRUTHY
        )
        return cls(
            delimiter=os.getenv(EnvVars.DELIMITER, Defaults.DELIMITER),
            quote_char=os.getenv(EnvVars.QUOTE_CHAR, Defaults.QUOTE_CHAR),
            encoding=os.getenv(EnvVars.ENCODING, Defaults.ENCODING),
            header_sentinel=os.getenv(
                EnvVars.HEADER_SENTINEL, Defaults.HEADER_SENTINEL
            ),
            row_policy=os.getenv(EnvVars.ROW_POLICY, Defaults.ROW_POLICY)
            .strip()
            .lower(),
            skip_blank_lines=skip_blank_lines,
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> ReaderConfig:
        config = ReaderConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: ReaderConfig) -> ReaderConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        reader = _get_table(data, "reader")
        delimiter = base_config.delimiter
        if (value := reader.get("delimiter")) is not None:
            delimiter = str(value)
        quote_char = base_config.quote_char
        if (value := reader.get("quote_char")) is not None:
            quote_char = str(value)
        encoding = base_config.encoding
        if value := reader.get("encoding"):
            encoding = str(value)
        header_sentinel = base_config.header_sentinel
        if (value := reader.get("header_sentinel")) is not None:
            header_sentinel = str(value)
        row_policy = base_config.row_policy
        if value := reader.get("row_policy"):
            row_policy = str(value).strip().lower()
        skip_blank_lines = base_config.skip_blank_lines
        if (value := reader.get("skip_blank_lines")) is not None:
            skip_blank_lines = _coerce_bool(value, key="reader.skip_blank_lines")
        return ReaderConfig(
            delimiter=delimiter,
            quote_char=quote_char,
            encoding=encoding,
            header_sentinel=header_sentinel,
            row_policy=row_policy,
            skip_blank_lines=skip_blank_lines,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in EnvVars.TRUTHY
    raise ValueError(f"{key} must be a bool or string, got {type(value).__name__}")
