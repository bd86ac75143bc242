"""Load and merge configuration from .gitparse.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from gitparse.config.schema import GitParseConfig, LoggingConfig, OutputConfig, ParseConfig
from gitparse.logging import LOG_FORMATS, LOG_LEVELS

CONFIG_FILENAME = ".gitparse.toml"
OUTPUT_FORMATS = ("terminal", "json")


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(base_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = base_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: GitParseConfig) -> None:
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"Invalid output format: {cfg.output.format}")
    if cfg.logging.level not in LOG_LEVELS:
        raise ConfigError(f"Invalid log level: {cfg.logging.level}")
    if cfg.logging.format not in LOG_FORMATS:
        raise ConfigError(f"Invalid log format: {cfg.logging.format}")


def _merge_env_overrides(cfg: GitParseConfig) -> None:
    """Apply GITPARSE_* environment variable overrides."""
    if val := os.environ.get("GITPARSE_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("GITPARSE_LOG_LEVEL"):
        if val.lower() in LOG_LEVELS:
            cfg.logging.level = val.lower()  # type: ignore[assignment]
    if val := os.environ.get("GITPARSE_LOG_FORMAT"):
        if val in LOG_FORMATS:
            cfg.logging.format = val  # type: ignore[assignment]
    if val := os.environ.get("GITPARSE_REPO_PATH"):
        cfg.parse.repo_path = val
    if os.environ.get("GITPARSE_INCLUDE_RAW") == "1":
        cfg.parse.include_raw_content = True


def load_config(
    base_dir: Path,
    config_override: Optional[str] = None,
) -> GitParseConfig:
    """Load, validate, and return a GitParseConfig."""
    config_path = find_config_file(base_dir, config_override)

    if config_path is None:
        cfg = GitParseConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = GitParseConfig(
            version=raw.get("version", "1.0"),
            parse=_build_section(raw, ParseConfig, "parse"),
            output=_build_section(raw, OutputConfig, "output"),
            logging=_build_section(raw, LoggingConfig, "logging"),
        )
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
