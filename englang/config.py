"""Workspace configuration support for the ENG toolchain."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

from englang.errors import EngConfigError


CONFIG_FILE_NAMES = ("englang.toml", ".englang.json")
ENV_EMIT_ASSETS = "ENGLANG_EMIT_ASSETS"
ENV_LOG_LEVEL = "ENGLANG_LOG_LEVEL"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_LOG_LEVELS = {"debug", "info", "warn", "warning", "error"}


@dataclass(frozen=True)
class EngConfig:
    """Settings that shape one compilation."""

    # Write .js/.css next to imported .seng/.ceng sources
    emit_assets: bool = True
    default_title: str = "ENG Page"
    indent: str = "  "
    log_level: str = "warning"
    source: Optional[Path] = field(default=None, compare=False)

    def merged(self, overrides: Mapping[str, Any]) -> "EngConfig":
        known = {f.name for f in fields(self)} - {"source"}
        return replace(self, **{key: value for key, value in overrides.items() if key in known})


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_FILE_NAMES:
        path = root / candidate
        if path.exists():
            return path
    return None


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    return json.loads(content)


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        data = tomllib.load(handle)
    return data.get("englang") or {}


def _parse_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise EngConfigError(f"'{key}' must be a boolean, got {value!r}")


def _parse_section(data: Mapping[str, Any], path: Optional[Path]) -> Dict[str, Any]:
    parsed: Dict[str, Any] = {}
    location = str(path) if path else None
    if "emit_assets" in data:
        parsed["emit_assets"] = _parse_bool(data["emit_assets"], "emit_assets")
    for key in ("default_title", "indent"):
        if key in data:
            if not isinstance(data[key], str):
                raise EngConfigError(f"'{key}' must be a string", path=location)
            parsed[key] = data[key]
    if "log_level" in data:
        level = str(data["log_level"]).lower()
        if level not in _LOG_LEVELS:
            raise EngConfigError(
                f"Unknown log level '{data['log_level']}'",
                path=location,
                hint=f"Use one of: {', '.join(sorted(_LOG_LEVELS))}",
            )
        parsed["log_level"] = level
    return parsed


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if environ.get(ENV_EMIT_ASSETS):
        overrides["emit_assets"] = _parse_bool(environ[ENV_EMIT_ASSETS], ENV_EMIT_ASSETS)
    if environ.get(ENV_LOG_LEVEL):
        overrides.update(_parse_section({"log_level": environ[ENV_LOG_LEVEL]}, None))
    return overrides


def load_config(
    root: Optional[Path] = None,
    explicit: Optional[Path] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> EngConfig:
    """
    Resolve configuration from ``englang.toml``/``.englang.json`` and the environment.

    Environment variables win over the file; the file wins over defaults.

    Raises:
        EngConfigError: If the file cannot be parsed or holds values of the wrong type
    """
    root = (root or Path.cwd()).resolve()
    environ = os.environ if environ is None else environ
    config = EngConfig()

    config_path = locate_config_file(root, explicit)
    if config_path is not None:
        try:
            if config_path.suffix == ".toml":
                data = _read_toml_config(config_path)
            else:
                data = _read_json_config(config_path)
        except (OSError, ValueError) as exc:
            raise EngConfigError(f"Cannot load configuration: {exc}", path=str(config_path)) from exc
        if not isinstance(data, dict):
            raise EngConfigError("Configuration must be a table/object", path=str(config_path))
        config = replace(config.merged(_parse_section(data, config_path)), source=config_path)

    return config.merged(_env_overrides(environ))


__all__ = ["EngConfig", "load_config", "locate_config_file", "CONFIG_FILE_NAMES"]
