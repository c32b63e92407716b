"""Load and merge configuration from .comelint.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]

from comelint.config.schema import (
    OUTPUT_FORMATS,
    ComelintConfig,
    OutputConfig,
    ValidationConfig,
)

CONFIG_FILENAME = ".comelint.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(search_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = search_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _check_type(section: str, name: str, value: Any, expected: type) -> None:
    # bool is a subclass of int; "min_length = true" is still a mistake
    if expected is int and isinstance(value, bool):
        ok = False
    else:
        ok = isinstance(value, expected)
    if not ok:
        raise ConfigError(
            f"[{section}] {name} must be {expected.__name__}, got {type(value).__name__}"
        )


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")

    defaults = cls()
    filtered: Dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        if f.name not in raw:
            continue
        value = raw[f.name]
        _check_type(section, f.name, value, type(getattr(defaults, f.name)))
        filtered[f.name] = value
    return cls(**filtered)


def _merge_env_overrides(cfg: ComelintConfig) -> None:
    """Apply COMELINT_* environment variable overrides."""
    overrides: Dict[str, Any] = {}
    for env, name in (("COMELINT_MIN_LENGTH", "min_length"), ("COMELINT_MAX_LENGTH", "max_length")):
        if val := os.environ.get(env):
            try:
                overrides[name] = int(val)
            except ValueError:
                pass
    if val := os.environ.get("COMELINT_REGEXP"):
        overrides["pattern"] = val
    if overrides:
        cfg.rules = dataclasses.replace(cfg.rules, **overrides)

    if val := os.environ.get("COMELINT_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]


def load_config(
    search_dir: Optional[Path] = None,
    config_override: Optional[str] = None,
) -> ComelintConfig:
    """Load, validate, and return a ComelintConfig."""
    config_path = find_config_file(search_dir or Path.cwd(), config_override)

    if config_path is None:
        cfg = ComelintConfig()
    else:
        raw = _parse_toml(config_path)
        output = _build_section(raw, OutputConfig, "output")
        if output.format not in OUTPUT_FORMATS:
            raise ConfigError(f"[output] format must be one of {', '.join(OUTPUT_FORMATS)}")
        cfg = ComelintConfig(
            version=str(raw.get("version", "1.0")),
            rules=_build_section(raw, ValidationConfig, "rules"),
            output=output,
        )

    _merge_env_overrides(cfg)
    return cfg
