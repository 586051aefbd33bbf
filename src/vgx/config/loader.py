"""Load and merge configuration from .vgx.toml and environment variables."""

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

from vgx.config.schema import (
    DEFAULT_SKIP_DIRS,
    DetectSection,
    OutputSection,
    PatternsSection,
    VgxConfig,
    WalkSection,
)

CONFIG_FILENAME = ".vgx.toml"


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


def _split_csv(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def _merge_env_overrides(cfg: VgxConfig) -> None:
    """Apply VGX_* environment variable overrides. Invalid values are ignored."""
    if val := os.environ.get("VGX_THRESHOLD"):
        try:
            percent = float(val)
        except ValueError:
            percent = -1.0
        if 0 <= percent <= 100:
            cfg.detect.threshold = percent
    if val := os.environ.get("VGX_FORMAT"):
        if val in ("text", "json"):
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("VGX_DISABLE_PATTERNS"):
        cfg.patterns.disable.extend(_split_csv(val))
    if val := os.environ.get("VGX_SKIP_DIRS"):
        if not cfg.walk.skip_dirs:
            cfg.walk.skip_dirs = list(DEFAULT_SKIP_DIRS)
        cfg.walk.skip_dirs.extend(_split_csv(val))


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.get(section, {}).items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: VgxConfig, source: Path) -> None:
    threshold = cfg.detect.threshold
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise ConfigError(f"{source}: [detect] threshold must be a number")
    if not 0 <= threshold <= 100:
        raise ConfigError(
            f"{source}: [detect] threshold must be between 0 and 100, got {threshold}"
        )
    if cfg.output.format not in ("text", "json"):
        raise ConfigError(f"{source}: [output] format must be 'text' or 'json'")


def load_config(
    base_dir: Path,
    config_override: Optional[str] = None,
) -> VgxConfig:
    """Load, validate, and return a VgxConfig."""
    config_path = find_config_file(base_dir, config_override)

    if config_path is None:
        cfg = VgxConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = VgxConfig(
            version=raw.get("version", "1.0"),
            detect=_build_section(raw, DetectSection, "detect"),
            walk=_build_section(raw, WalkSection, "walk"),
            patterns=_build_section(raw, PatternsSection, "patterns"),
            output=_build_section(raw, OutputSection, "output"),
        )
        _validate(cfg, config_path)

    _merge_env_overrides(cfg)
    return cfg
