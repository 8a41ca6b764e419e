# numf/app/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from numf.errors import ConfigError, NumfError
from numf.format import DEFAULT_FORMAT, DEFAULT_WIDTH, Format, UnsignedWidth, resolve_width
from numf.format.parser import numf_parser_str

ENV_CONFIG = "NUMF_CONFIG"
CONFIG_FILENAME = "config.yml"

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class NumfConfig:
    format: Format = DEFAULT_FORMAT
    prefix: bool = False
    padding: bool = False
    width: UnsignedWidth = DEFAULT_WIDTH
    rand_max: Optional[int] = None
    log_level: str = "WARNING"
    source: Optional[Path] = None


def default_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "numf" / CONFIG_FILENAME


def _expect_bool(path: Path, key: str, v: Any) -> bool:
    if not isinstance(v, bool):
        raise ConfigError(
            f"Config key '{key}' must be true or false.",
            hint=f"got {v!r}",
            details={"path": str(path), "key": key},
        )
    return v


def config_from_mapping(data: Mapping[str, Any], *, path: Path) -> NumfConfig:
    """Validate a parsed YAML document and build a NumfConfig."""
    known = set(NumfConfig.__dataclass_fields__) - {"source"}
    unknown = sorted(str(k) for k in set(data) - known)
    if unknown:
        raise ConfigError(
            f"Unknown config key(s): {', '.join(unknown)}",
            hint=f"known keys: {', '.join(sorted(known))}",
            details={"path": str(path)},
        )

    kwargs: Dict[str, Any] = {"source": path}

    try:
        if data.get("format") is not None:
            kwargs["format"] = Format.from_name(data["format"])
        if data.get("width") is not None:
            kwargs["width"] = resolve_width(data["width"])
    except ValueError as e:
        raise ConfigError("Invalid config value.", hint=str(e), details={"path": str(path)}) from None

    for key in ("prefix", "padding"):
        if data.get(key) is not None:
            kwargs[key] = _expect_bool(path, key, data[key])

    rand_max = data.get("rand_max")
    if rand_max is not None:
        if isinstance(rand_max, bool):
            raise ConfigError("Config key 'rand_max' must be a number.", details={"path": str(path)})
        try:
            # strings go through the same parser as the command line ("0xFF")
            kwargs["rand_max"] = (
                rand_max if isinstance(rand_max, int) else numf_parser_str(str(rand_max))
            )
        except NumfError as e:
            raise ConfigError(
                "Config key 'rand_max' is not a valid number.",
                hint=e.message,
                details={"path": str(path)},
            ) from None
        if kwargs["rand_max"] < 0:
            raise ConfigError("Config key 'rand_max' must not be negative.", details={"path": str(path)})

    level = data.get("log_level")
    if level is not None:
        level = str(level).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(
                f"Unknown log level '{data['log_level']}'",
                details={"path": str(path)},
            )
        kwargs["log_level"] = level

    return NumfConfig(**kwargs)


def load_config(path: str | Path | None = None) -> NumfConfig:
    """
    Load the YAML config file.

    An explicit `path` (or $NUMF_CONFIG) must exist. The default location
    is optional; when it is absent the built-in defaults are returned.
    """
    explicit = path is not None or bool(os.environ.get(ENV_CONFIG))
    cfg_path = Path(path) if path is not None else Path(os.environ.get(ENV_CONFIG) or default_config_path())

    if not cfg_path.exists():
        if explicit:
            raise ConfigError(
                f"Config file not found: {cfg_path}",
                details={"path": str(cfg_path)},
            )
        _log.debug("No config file at %s, using defaults", cfg_path)
        return NumfConfig()

    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(
            "Failed to load config file.",
            hint=str(e),
            details={"path": str(cfg_path)},
        ) from None

    if not isinstance(data, dict):
        raise ConfigError(
            f"{cfg_path.name} must contain a mapping",
            details={"path": str(cfg_path)},
        )

    cfg = config_from_mapping(data, path=cfg_path)
    _log.info("Loaded config from %s", cfg_path)
    return cfg
