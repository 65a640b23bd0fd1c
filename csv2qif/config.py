"""Conversion settings, built once before a run and never mutated."""

from __future__ import annotations

import codecs
import json
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from csv2qif.errors import ConfigurationError


@dataclass(frozen=True)
class MemoOptions:
    """Which record fields end up on the QIF memo line, in this order."""

    include_code: bool = False
    include_kind: bool = True
    include_comment: bool = False


@dataclass(frozen=True)
class ConversionConfig:
    input_path: Path
    output_path: Optional[Path] = None
    skip_first_row: bool = True
    memo: MemoOptions = field(default_factory=MemoOptions)
    delimiter: str = ","
    encoding: str = "utf-8-sig"

    def __post_init__(self) -> None:
        for name in ("input_path", "output_path"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, (str, os.PathLike)):
                raise ConfigurationError(f"Setting '{name}' must be a path, got {value!r}")
        for name in ("delimiter", "encoding"):
            if not isinstance(getattr(self, name), str):
                raise ConfigurationError(
                    f"Setting '{name}' must be a string, got {getattr(self, name)!r}"
                )

        object.__setattr__(self, "input_path", Path(self.input_path))
        if self.output_path is None:
            object.__setattr__(self, "output_path", default_output_path(self.input_path))
        else:
            object.__setattr__(self, "output_path", Path(self.output_path))
        if len(self.delimiter) != 1:
            raise ConfigurationError(
                f"Delimiter must be a single character, got {self.delimiter!r}"
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ConfigurationError(f"Unknown encoding: {self.encoding!r}") from exc


def default_output_path(input_path: Union[str, Path]) -> Path:
    return Path(input_path).with_suffix(".qif")


_MEMO_KEYS = {f.name for f in fields(MemoOptions)}
_CONFIG_KEYS = {"output_path", "skip_first_row", "delimiter", "encoding"}
_BOOL_KEYS = {"skip_first_row"} | _MEMO_KEYS
_STR_KEYS = {"delimiter", "encoding"}


def load_config_file(path: Union[str, Path]) -> Mapping[str, Any]:
    """Read settings from a JSON or YAML file.

    Empty files yield an empty mapping. The result is validated against the
    known setting names but not yet applied to a :class:`ConversionConfig`.
    """

    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}

    suffix = path.suffix.lower()
    try:
        if suffix in {".yaml", ".yml"}:
            data = yaml.safe_load(text)
        elif suffix == ".json":
            data = json.loads(text)
        else:
            raise ConfigurationError(f"Unsupported configuration file format: {path.suffix}")
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigurationError(
            f"Configuration file {path} is not valid: {exc}", details={"path": str(path)}
        ) from exc

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigurationError("Configuration must be a mapping")
    _validate_settings(data)
    return data


def _validate_settings(settings: Mapping[str, Any]) -> None:
    unknown = sorted(set(settings) - _CONFIG_KEYS - _MEMO_KEYS)
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration keys: {', '.join(unknown)}",
            details={"keys": unknown},
        )
    for key in _BOOL_KEYS & set(settings):
        if not isinstance(settings[key], bool):
            raise ConfigurationError(f"Configuration key '{key}' must be true or false")
    for key in _STR_KEYS & set(settings):
        if not isinstance(settings[key], str):
            raise ConfigurationError(f"Configuration key '{key}' must be a string")
    if "output_path" in settings and not isinstance(settings["output_path"], (str, os.PathLike)):
        raise ConfigurationError("Configuration key 'output_path' must be a path")


def build_config(
    input_path: Union[str, Path],
    *settings: Optional[Mapping[str, Any]],
) -> ConversionConfig:
    """Create a config for *input_path* by layering *settings* over defaults.

    Later mappings win. ``None`` values inside a mapping mean "not set" and
    leave the previous layer untouched, which lets CLI options that were not
    given fall through to the configuration file.
    """

    config = ConversionConfig(input_path=Path(input_path))
    for layer in settings:
        if not layer:
            continue
        present = {key: value for key, value in layer.items() if value is not None}
        _validate_settings(present)
        memo_updates = {key: present.pop(key) for key in _MEMO_KEYS & set(present)}
        if memo_updates:
            present["memo"] = replace(config.memo, **memo_updates)
        config = replace(config, **present)
    return config


__all__ = [
    "ConversionConfig",
    "MemoOptions",
    "build_config",
    "default_output_path",
    "load_config_file",
]
