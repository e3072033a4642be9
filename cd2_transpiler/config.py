from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults

MAX_INDENT = 16
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})
_AUTO = "auto"


@dataclass(frozen=True, slots=True)
class TranspilerConfig:
    pretty_print: bool = Defaults.PRETTY_PRINT
    indent: int = Defaults.INDENT
    strict: bool = Defaults.STRICT
    raw_multiline_description: bool | None = Defaults.RAW_MULTILINE_DESCRIPTION
    output_marker: str = Defaults.OUTPUT_MARKER

    def __post_init__(self) -> None:
        if not 0 <= self.indent <= MAX_INDENT:
            raise ValueError(
                f"indent must be between 0 and {MAX_INDENT}, got {self.indent}"
            )
        marker = self.output_marker
        if not marker or marker != marker.strip(".") or "/" in marker or "\\" in marker:
            raise ValueError(
                f"output_marker must be a plain file name part, got {marker!r}"
            )

    @classmethod
    def from_env(cls) -> TranspilerConfig:
        return cls(
            pretty_print=_coerce_bool(
                os.getenv("CD2_PRETTY_PRINT", str(Defaults.PRETTY_PRINT)),
                key="CD2_PRETTY_PRINT",
            ),
            indent=_coerce_int(
                os.getenv("CD2_INDENT", str(Defaults.INDENT)), key="CD2_INDENT"
            ),
            strict=_coerce_bool(
                os.getenv("CD2_STRICT", str(Defaults.STRICT)), key="CD2_STRICT"
            ),
            raw_multiline_description=_coerce_optional_bool(
                os.getenv("CD2_RAW_MULTILINE", _AUTO), key="CD2_RAW_MULTILINE"
            ),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> TranspilerConfig:
        config = TranspilerConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: TranspilerConfig
    ) -> TranspilerConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        output = _get_table(data, "output")
        conversion = _get_table(data, "conversion")
        pretty_print = base_config.pretty_print
        if (value := output.get("pretty_print")) is not None:
            pretty_print = _coerce_bool(value, key="output.pretty_print")
        indent = base_config.indent
        if (value := output.get("indent")) is not None:
            indent = _coerce_int(value, key="output.indent")
        raw_multiline_description = base_config.raw_multiline_description
        if (value := output.get("raw_multiline_description")) is not None:
            raw_multiline_description = _coerce_optional_bool(
                value, key="output.raw_multiline_description"
            )
        output_marker = base_config.output_marker
        if (value := output.get("marker")) is not None:
            output_marker = str(value).strip()
        strict = base_config.strict
        if (value := conversion.get("strict")) is not None:
            strict = _coerce_bool(value, key="conversion.strict")
        return TranspilerConfig(
            pretty_print=pretty_print,
            indent=indent,
            strict=strict,
            raw_multiline_description=raw_multiline_description,
            output_marker=output_marker,
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
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise ValueError(f"{key} must be a boolean, got {value!r}")


def _coerce_optional_bool(value: object, *, key: str) -> bool | None:
    # "auto" leaves the choice to the input file
    if isinstance(value, str) and value.strip().lower() == _AUTO:
        return None
    return _coerce_bool(value, key=key)


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")
