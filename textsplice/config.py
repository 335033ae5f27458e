"""Configuration model and loaders for textsplice.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `SpliceConfig`: normalized settings for one run.
- `ConfigLoader`: static construction helpers for `SpliceConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_optional_string,
    parse_required_boolean,
    parse_single_letter,
)


_DEFAULT_START_LETTER = "в"
_DEFAULT_END_LETTER = "т"
_DEFAULT_ENCODING = "utf-8"


@dataclass(slots=True)
class SpliceConfig:
    """Runtime configuration for one run.

    Attributes:
        start_letter: Letter opening the removed span.
        end_letter: Letter closing the removed span.
        ignore_case: Whether boundary letters match case-insensitively.
        input_path: Optional path of a UTF-8 text file to process.
        encoding: Encoding used when reading `input_path`.
    """

    start_letter: str = _DEFAULT_START_LETTER
    end_letter: str = _DEFAULT_END_LETTER
    ignore_case: bool = True
    input_path: Path | None = None
    encoding: str = _DEFAULT_ENCODING

    def validate(self) -> None:
        """Validate configuration values before a run."""

        parse_single_letter(self.start_letter, "start_letter")
        parse_single_letter(self.end_letter, "end_letter")
        if normalize_optional_string(self.encoding) is None:
            raise ValueError("`encoding` must be a non-empty string.")


class ConfigLoader:
    """Factory methods for loading configuration."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {"start_letter", "end_letter", "ignore_case", "input_path", "encoding"}
    )

    @staticmethod
    def from_yaml(path: Path) -> SpliceConfig:
        """Create a validated config from a YAML file."""

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> SpliceConfig:
        """Create a validated config from `TEXTSPLICE_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        start_letter = ConfigLoader._optional_env_string(env_map, "TEXTSPLICE_START_LETTER")
        end_letter = ConfigLoader._optional_env_string(env_map, "TEXTSPLICE_END_LETTER")
        input_path = ConfigLoader._optional_env_string(env_map, "TEXTSPLICE_INPUT")
        encoding = ConfigLoader._optional_env_string(env_map, "TEXTSPLICE_ENCODING")

        ignore_case = ConfigLoader._optional_boolean(
            env_map, "TEXTSPLICE_IGNORE_CASE", "Environment variable"
        )

        config = SpliceConfig(
            start_letter=start_letter or _DEFAULT_START_LETTER,
            end_letter=end_letter or _DEFAULT_END_LETTER,
            ignore_case=ignore_case,
            input_path=Path(input_path) if input_path is not None else None,
            encoding=encoding or _DEFAULT_ENCODING,
        )
        config.validate()
        return config

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> SpliceConfig:
        """Build a validated config from a YAML mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            raise ValueError(
                f"{source_label} includes unsupported key(s): {', '.join(unknown)}."
            )

        start_letter = ConfigLoader._optional_letter(payload, "start_letter", source_label)
        end_letter = ConfigLoader._optional_letter(payload, "end_letter", source_label)
        input_path = normalize_optional_string(payload.get("input_path"))
        encoding = normalize_optional_string(payload.get("encoding"))

        ignore_case = ConfigLoader._optional_boolean(
            payload, "ignore_case", f"{source_label} field"
        )

        config = SpliceConfig(
            start_letter=start_letter or _DEFAULT_START_LETTER,
            end_letter=end_letter or _DEFAULT_END_LETTER,
            ignore_case=ignore_case,
            input_path=Path(input_path) if input_path is not None else None,
            encoding=encoding or _DEFAULT_ENCODING,
        )
        config.validate()
        return config

    @staticmethod
    def _optional_letter(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> str | None:
        """Read an optional single-letter field."""

        if normalize_optional_string(payload.get(key)) is None:
            return None
        try:
            return parse_single_letter(payload[key], key)
        except ValueError as exc:
            raise ValueError(f"{source_label} field {exc}") from exc

    @staticmethod
    def _optional_boolean(payload: Mapping[str, Any], key: str, label: str) -> bool:
        """Read an optional boolean token, defaulting to `True` when absent."""

        if key not in payload:
            return True
        try:
            return parse_required_boolean(payload[key], key)
        except ValueError as exc:
            raise ValueError(f"{label} {exc}") from exc

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        return normalize_optional_string(env.get(key))
